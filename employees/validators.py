"""Input rules for departments and positions."""
import re

from accounts.exceptions import ValidationError
from accounts.validators import clean_text, ensure_mapping, require_object_id, require_text

DEPARTMENT_REQUIRED = "Department name and position count are required"
POSITION_REQUIRED = "Position name, employee limit, reports to and department are required"
INVALID_DEPARTMENT_ID = "Invalid department ID"
INVALID_LEAVE_POLICY_ID = "Invalid leave policy ID"

DIGITS = re.compile(r"^[0-9]+$")


def validate_department(data, partial=False):
    data = ensure_mapping(data)
    if not partial:
        return _department_fields(require_text(data, ('name', 'positionCount'), DEPARTMENT_REQUIRED))

    cleaned = {}
    for key in ('name', 'positionCount'):
        if key in data:
            value = clean_text(data.get(key))
            if not value:
                raise ValidationError(DEPARTMENT_REQUIRED, field=key)
            cleaned[key] = value
    return _department_fields(cleaned)


def _department_fields(cleaned):
    fields = {}
    if 'name' in cleaned:
        fields['name'] = cleaned['name']
    if 'positionCount' in cleaned:
        fields['position_count'] = cleaned['positionCount']
    return fields


def validate_position(data, partial=False):
    """
    Return model field values for a position payload.

    Full validation requires name, employeeLimit, reportsTo and department;
    partial validation only checks the keys that are present. ``leavePolicy``
    is optional either way and may be null to clear it.
    """
    data = ensure_mapping(data)
    keys = ('name', 'employeeLimit', 'reportsTo', 'department')
    if partial:
        keys = tuple(key for key in keys if key in data)
    cleaned = require_text(data, keys, POSITION_REQUIRED)

    fields = {}
    if 'name' in cleaned:
        fields['name'] = cleaned['name']
    if 'employeeLimit' in cleaned:
        fields['employee_limit'] = cleaned['employeeLimit']
    if 'reportsTo' in cleaned:
        fields['reports_to'] = cleaned['reportsTo']
    if 'department' in cleaned:
        fields['department_id'] = require_object_id(cleaned['department'], INVALID_DEPARTMENT_ID, field='department')

    if 'leavePolicy' in data:
        leave_policy = data.get('leavePolicy')
        if leave_policy in (None, ''):
            fields['leave_policy_id'] = None
        else:
            fields['leave_policy_id'] = require_object_id(leave_policy, INVALID_LEAVE_POLICY_ID, field='leavePolicy')
    return fields


def parse_position_limit(descriptor):
    """
    Parse a department ``positionCount``.

    Returns None for "unlimited" (any case, surrounding spaces ignored) and
    the integer ceiling otherwise. Anything else is an unusable configuration
    and fails closed.
    """
    text = clean_text(descriptor).lower()
    if text == 'unlimited':
        return None
    if not DIGITS.match(text):
        raise ValidationError("Invalid position count limit in department", field='positionCount')
    return int(text)
