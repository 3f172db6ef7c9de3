"""
Shift write path: validation, name uniqueness, approval status and break
intervals.
"""
import logging

from django.db import transaction

from accounts.guards import ensure_unique_name
from accounts.workflow import initial_status

from .models import Shift, ShiftBreak
from .validators import validate_shift

logger = logging.getLogger(__name__)

SHIFT_NAME_TAKEN = "Shift with this name already exists"


def _replace_intervals(shift: Shift, intervals) -> None:
    shift.intervals.all().delete()
    ShiftBreak.objects.bulk_create(
        [
            ShiftBreak(shift=shift, start_time=start, end_time=end, sort_order=index)
            for index, (start, end) in enumerate(intervals)
        ]
    )


def create_shift(data, actor) -> Shift:
    fields = validate_shift(data)
    intervals = fields.pop("intervals")
    ensure_unique_name(Shift.objects.all(), fields["name"], SHIFT_NAME_TAKEN)

    with transaction.atomic():
        shift = Shift(status=initial_status(actor), **fields)
        shift.stamp_creator(actor)
        shift.save()
        _replace_intervals(shift, intervals)

    logger.info("Shift %s created by user %s with status %s", shift.pk, actor.id, shift.status)
    return shift


def update_shift(shift: Shift, data, actor, partial=False) -> Shift:
    fields = validate_shift(data, partial=partial)
    intervals = fields.pop("intervals", None)

    name = fields.get("name")
    if name is not None and name != shift.name:
        ensure_unique_name(Shift.objects.all(), name, SHIFT_NAME_TAKEN, exclude_id=shift.pk)

    with transaction.atomic():
        for attr, value in fields.items():
            setattr(shift, attr, value)
        shift.save()
        if intervals is not None:
            _replace_intervals(shift, intervals)

    logger.info("Shift %s updated by user %s", shift.pk, actor.id)
    return shift


def delete_shift(shift: Shift, actor) -> None:
    shift_id = shift.pk
    shift.delete()
    logger.info("Shift %s deleted by user %s", shift_id, actor.id)
