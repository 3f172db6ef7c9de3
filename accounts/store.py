"""
Entity store helpers over Django model managers.

The rule engine talks to persistence through these few calls plus plain
``save()`` / ``delete()`` on model instances.
"""
import math

from .exceptions import NotFoundError
from .validators import parse_object_id

DEFAULT_PAGE_SIZE = 10


def find_by_id(queryset_or_model, pk, label):
    """Return the record for ``pk`` or raise NotFoundError.

    A malformed id is reported the same way as a missing one.
    """
    queryset = _as_queryset(queryset_or_model)
    object_id = parse_object_id(pk)
    if object_id is None:
        raise NotFoundError(f'{label} Not Found')
    instance = queryset.filter(pk=object_id).first()
    if instance is None:
        raise NotFoundError(f'{label} Not Found')
    return instance


def find_one(queryset_or_model, **filters):
    return _as_queryset(queryset_or_model).filter(**filters).first()


def count(queryset_or_model, **filters):
    return _as_queryset(queryset_or_model).filter(**filters).count()


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def search_page(queryset, params, key, search_field='name'):
    """
    Apply ``search`` / ``page`` / ``limit`` query params and return the
    ``{<key>: [...], 'pagination': {...}}`` payload used by list endpoints.
    Items are returned as model instances; the caller serializes them.
    """
    page = _positive_int(params.get('page'), 1)
    limit = _positive_int(params.get('limit'), DEFAULT_PAGE_SIZE)
    search_text = (params.get('search') or '').strip()

    if search_text:
        queryset = queryset.filter(**{f'{search_field}__icontains': search_text})

    total = queryset.count()
    skip = (page - 1) * limit
    items = list(queryset.order_by('-created_at')[skip:skip + limit])

    total_key = 'total' + key[0].upper() + key[1:]
    return items, {
        'currentPage': page,
        'totalPages': math.ceil(total / limit),
        total_key: total,
        'limit': limit,
    }


def _as_queryset(queryset_or_model):
    if hasattr(queryset_or_model, '_default_manager'):
        return queryset_or_model._default_manager.all()
    return queryset_or_model
