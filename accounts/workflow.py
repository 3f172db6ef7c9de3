"""
Approval workflow for policy-like records.

States are Pending, Approved and Rejected. Creation picks the initial state
from the actor's privilege; after that any state may be set from any state.
"""
import logging

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

STATUS_APPROVED = 'Approved'
STATUS_PENDING = 'Pending'
STATUS_REJECTED = 'Rejected'

STATUS_CHOICES = [
    (STATUS_APPROVED, 'Approved'),
    (STATUS_PENDING, 'Pending'),
    (STATUS_REJECTED, 'Rejected'),
]

VALID_STATUSES = [value for value, _ in STATUS_CHOICES]


def initial_status(actor):
    """Records created by an admin start approved, everyone else's wait."""
    return STATUS_APPROVED if actor.is_admin else STATUS_PENDING


def validate_status(status):
    if not isinstance(status, str) or status not in VALID_STATUSES:
        raise ValidationError(
            f"Invalid status. Valid statuses are: {', '.join(VALID_STATUSES)}",
            field='status',
        )
    return status


def transition_status(instance, status, actor=None):
    """Overwrite ``instance.status`` and persist it.

    Re-approving or un-approving is allowed; only the target value is checked.
    """
    status = validate_status(status)
    previous = instance.status
    instance.status = status
    instance.save(update_fields=['status', 'updated_at'])
    logger.info(
        '%s %s status %s -> %s by user %s',
        instance.__class__.__name__,
        instance.pk,
        previous,
        status,
        getattr(actor, 'id', None),
    )
    return instance


def status_message(label, status):
    return f'{label.capitalize()} {status.lower()} successfully'
