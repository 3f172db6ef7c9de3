"""
Pre-write checks shared by every entity service.

The checks read the store and then the caller writes; nothing is locked in
between, so two concurrent requests can both pass the same check.
"""
import logging

from .exceptions import ConflictError

logger = logging.getLogger(__name__)


def ensure_unique_name(queryset, name, message, exclude_id=None, field='name'):
    """
    Fail with ConflictError when ``queryset`` already holds a record whose
    ``field`` matches ``name`` ignoring case. ``queryset`` carries the scope
    (e.g. positions of one department); ``exclude_id`` skips the record being
    updated.
    """
    matches = queryset.filter(**{f'{field}__iexact': name})
    if exclude_id is not None:
        matches = matches.exclude(pk=exclude_id)
    if matches.exists():
        logger.warning('Name collision on %s for %r', queryset.model.__name__, name)
        raise ConflictError(message, field=field)


def ensure_no_dependents(count, message):
    """Fail with ConflictError carrying ``count`` when anything still points
    at the record about to be deleted."""
    if count > 0:
        logger.warning('Delete blocked by %s dependent record(s): %s', count, message)
        raise ConflictError(message, count=count)


def pluralize(count, singular, plural):
    return singular if count == 1 else plural
