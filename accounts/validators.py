"""
Input primitives shared by the per-entity validation rules.

Everything here is a pure function over the raw request payload: values come
in as whatever JSON produced and leave trimmed and coerced, or a
``ValidationError`` is raised for the first problem found.
"""
import re
import uuid
from decimal import Decimal
from typing import Any, Optional

from rest_framework import serializers

from .exceptions import ValidationError

TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):([0-5]\d)$')


def ensure_mapping(data: Any) -> dict:
    """Reject payloads that are not a JSON object."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be an object')
    return data


def clean_text(value: Any) -> str:
    """Return ``value`` as a trimmed string; ``None`` becomes ''."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return ''
    if isinstance(value, (int, float, Decimal)):
        return str(value).strip()
    if isinstance(value, str):
        return value.strip()
    return ''


def is_blank(value: Any) -> bool:
    return clean_text(value) == ''


def require_text(data: dict, fields, message: str, field: Optional[str] = None) -> dict:
    """Ensure every key in ``fields`` is present and non-empty after trim."""
    cleaned = {}
    for key in fields:
        value = clean_text(data.get(key))
        if not value:
            raise ValidationError(message, field=field or key)
        cleaned[key] = value
    return cleaned


def parse_object_id(value: Any) -> Optional[uuid.UUID]:
    """Return the UUID for an id-shaped value, or None when it is not one."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return None


def require_object_id(value: Any, message: str, field: Optional[str] = None) -> uuid.UUID:
    parsed = parse_object_id(value)
    if parsed is None:
        raise ValidationError(message, field=field)
    return parsed


def require_list(value: Any, message: str, field: Optional[str] = None) -> list:
    if not isinstance(value, list) or len(value) == 0:
        raise ValidationError(message, field=field)
    return value


def require_non_negative(
    value: Any,
    message: str,
    field: Optional[str] = None,
    max_digits: Optional[int] = None,
    decimal_places: Optional[int] = None,
) -> Decimal:
    """
    Coerce a numeric-ish value to Decimal and check it is >= 0.

    ``max_digits`` / ``decimal_places`` bound the value to the column it is
    stored in.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(message, field=field)
    number_field = serializers.DecimalField(
        max_digits=max_digits, decimal_places=decimal_places, min_value=0
    )
    try:
        return number_field.run_validation(value)
    except serializers.ValidationError:
        raise ValidationError(message, field=field)


def require_time(value: Any, message: str, field: Optional[str] = None) -> str:
    """Accept a 24h ``HH:MM`` string."""
    text = clean_text(value)
    if not TIME_PATTERN.match(text):
        raise ValidationError(message, field=field)
    return text


def require_lines(value, ref_key, amount_key, messages, field=None, max_digits=None, decimal_places=None):
    """
    Validate an embedded list of ``{ref_key: <id>, amount_key: <number>}``
    lines, in order.

    ``messages`` holds the ``empty``, ``ref`` and ``amount`` failure texts;
    ``max_digits`` / ``decimal_places`` describe the amount column.
    Returns ``[(uuid, Decimal), ...]`` in input order.
    """
    lines = require_list(value, messages['empty'], field=field)
    cleaned = []
    for line in lines:
        if not isinstance(line, dict):
            raise ValidationError(messages['ref'], field=field)
        ref = require_object_id(line.get(ref_key), messages['ref'], field=field)
        amount = require_non_negative(
            line.get(amount_key), messages['amount'], field=field,
            max_digits=max_digits, decimal_places=decimal_places,
        )
        cleaned.append((ref, amount))
    return cleaned
