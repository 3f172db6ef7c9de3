"""Input rules for leave types and leave policies."""
from accounts.exceptions import ValidationError
from accounts.validators import clean_text, ensure_mapping, require_lines, require_text

LEAVE_TYPE_REQUIRED = "Leave type name is required"
LEAVE_POLICY_REQUIRED = "Leave policy name is required"

# Bounds of LeaveEntitlement.days.
DAYS_MAX_DIGITS = 8
DAYS_DECIMAL_PLACES = 2

ENTITLEMENT_MESSAGES = {
    'empty': "At least one leave type entitlement is required",
    'ref': "Invalid leave type ID in entitlements",
    'amount': "Days must be a non-negative number",
}


def validate_leave_type(data, partial=False):
    data = ensure_mapping(data)
    fields = {}
    if not partial or 'name' in data:
        fields.update(require_text(data, ('name',), LEAVE_TYPE_REQUIRED))
    if 'description' in data:
        fields['description'] = clean_text(data.get('description'))
    return fields


def validate_leave_policy(data, partial=False):
    """
    Return ``{'name': str, 'entitlements': [(leave_type_id, days), ...]}``
    with only the supplied keys when ``partial``.

    A blank name on a partial update is ignored rather than rejected.
    """
    data = ensure_mapping(data)
    fields = {}

    if partial:
        name = clean_text(data.get('name'))
        if name:
            fields['name'] = name
    else:
        fields.update(require_text(data, ('name',), LEAVE_POLICY_REQUIRED))

    if not partial or data.get('entitlements') is not None:
        fields['entitlements'] = require_lines(
            data.get('entitlements'), 'leaveType', 'days', ENTITLEMENT_MESSAGES, field='entitlements',
            max_digits=DAYS_MAX_DIGITS, decimal_places=DAYS_DECIMAL_PLACES,
        )
    return fields


def ensure_leave_types_exist(leave_type_ids, existing_ids):
    missing = set(leave_type_ids) - set(existing_ids)
    if missing:
        raise ValidationError(ENTITLEMENT_MESSAGES['ref'], field='entitlements')
