"""Input rules for shifts."""
from accounts.exceptions import ValidationError
from accounts.validators import clean_text, ensure_mapping, require_list, require_text, require_time

from .models import Shift

WEEKDAYS = [code for code, _ in Shift.WEEKDAY_CHOICES]

SHIFT_REQUIRED = "Shift name, start time and end time are required"
INVALID_TIME = "Invalid time format. Use HH:MM"
WORKING_DAYS_REQUIRED = "At least one working day is required"
INVALID_WORKING_DAY = f"Invalid working day. Valid days are: {', '.join(WEEKDAYS)}"
INVALID_INTERVAL = "Each break interval needs a start time and an end time in HH:MM format"


def normalize_working_days(value):
    """Return the selected day codes once each, in week order."""
    days = require_list(value, WORKING_DAYS_REQUIRED, field="workingDays")
    selected = set()
    for day in days:
        if not isinstance(day, str) or day.strip() not in WEEKDAYS:
            raise ValidationError(INVALID_WORKING_DAY, field="workingDays")
        selected.add(day.strip())
    return [day for day in WEEKDAYS if day in selected]


def normalize_intervals(value):
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(INVALID_INTERVAL, field="intervals")
    intervals = []
    for interval in value:
        if not isinstance(interval, dict):
            raise ValidationError(INVALID_INTERVAL, field="intervals")
        intervals.append(
            (
                require_time(interval.get("startTime"), INVALID_INTERVAL, field="intervals"),
                require_time(interval.get("endTime"), INVALID_INTERVAL, field="intervals"),
            )
        )
    return intervals


def validate_shift(data, partial=False):
    """
    Return model field values plus ``intervals`` as ``[(start, end), ...]``.

    Checks run as: required text, then time format, then working days and
    break intervals.
    """
    data = ensure_mapping(data)
    keys = ("name", "startTime", "endTime")
    if partial:
        keys = tuple(key for key in keys if key in data)
    cleaned = require_text(data, keys, SHIFT_REQUIRED)

    fields = {}
    if "name" in cleaned:
        fields["name"] = cleaned["name"]
    if "startTime" in cleaned:
        fields["start_time"] = require_time(cleaned["startTime"], INVALID_TIME, field="startTime")
    if "endTime" in cleaned:
        fields["end_time"] = require_time(cleaned["endTime"], INVALID_TIME, field="endTime")
    if not partial or "workingDays" in data:
        fields["working_days"] = normalize_working_days(data.get("workingDays"))
    if not partial or "intervals" in data:
        fields["intervals"] = normalize_intervals(data.get("intervals"))
    if "notes" in data:
        fields["notes"] = clean_text(data.get("notes"))
    return fields
