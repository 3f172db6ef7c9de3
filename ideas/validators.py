from accounts.validators import clean_text, ensure_mapping, require_text

IDEA_REQUIRED = 'Title, summary and description are required'


def normalize_tags(tags):
    """
    Accept a list or a comma separated string and return the trimmed,
    non-empty tags in input order. Repeated tags are kept.
    """
    if isinstance(tags, str):
        tags = tags.split(',')
    if not isinstance(tags, list):
        return []
    return [tag for tag in (clean_text(item) for item in tags) if tag]


def validate_idea(data, partial=False):
    data = ensure_mapping(data)
    keys = ('title', 'summary', 'description')
    if partial:
        keys = tuple(key for key in keys if key in data)
    fields = require_text(data, keys, IDEA_REQUIRED)
    if not partial or 'tags' in data:
        fields['tags'] = normalize_tags(data.get('tags'))
    return fields
