"""
Write path for departments and positions.

Each function runs validation, then the guards, then the store write, and
stops at the first failure.
"""
import logging

from accounts.exceptions import ConflictError, NotFoundError
from accounts.guards import ensure_no_dependents, ensure_unique_name
from accounts.store import find_one

from .models import Department, Position
from .validators import parse_position_limit, validate_department, validate_position

logger = logging.getLogger(__name__)

POSITION_NAME_TAKEN = "Position with this name already exists in this department"


def create_department(data, actor):
    fields = validate_department(data)
    ensure_unique_name(Department.objects.all(), fields['name'], "Department with this name already exists")

    department = Department(**fields)
    department.stamp_creator(actor)
    department.save()
    logger.info("Department %s created by user %s", department.pk, actor.id)
    return department


def update_department(department, data, actor, partial=True):
    fields = validate_department(data, partial=partial)

    name = fields.get('name')
    if name is not None and name != department.name:
        ensure_unique_name(
            Department.objects.all(),
            name,
            "Department with this name already exists",
            exclude_id=department.pk,
        )

    for attr, value in fields.items():
        setattr(department, attr, value)
    department.save()
    logger.info("Department %s updated by user %s", department.pk, actor.id)
    return department


def delete_department(department, actor):
    ensure_no_dependents(
        department.positions.count(),
        "Cannot delete department with existing positions. Please remove or reassign positions first.",
    )
    ensure_no_dependents(
        department.employees.count(),
        "Cannot delete department with active employees. Please reassign employees first.",
    )
    department_id = department.pk
    department.delete()
    logger.info("Department %s deleted by user %s", department_id, actor.id)


def ensure_position_capacity(department, exclude_id=None):
    """Fail when ``department`` already holds as many positions as its
    ``position_count`` allows."""
    limit = parse_position_limit(department.position_count)
    if limit is None:
        return

    positions = department.positions.all()
    if exclude_id is not None:
        positions = positions.exclude(pk=exclude_id)
    current = positions.count()

    if current >= limit:
        logger.warning(
            "Position limit %s reached for department %s (%s positions)", limit, department.pk, current
        )
        raise ConflictError(
            f"Position limit reached for {department.name} department. Maximum positions allowed: {limit}",
            field='department',
        )


def _resolve_department(department_id):
    department = find_one(Department, pk=department_id)
    if department is None:
        raise NotFoundError("Department not found")
    return department


def _resolve_leave_policy(fields):
    from timeoff.models import LeavePolicy

    policy_id = fields.get('leave_policy_id')
    if policy_id is not None and find_one(LeavePolicy, pk=policy_id) is None:
        raise NotFoundError("Leave policy not found")


def create_position(data, actor):
    fields = validate_position(data)
    department = _resolve_department(fields['department_id'])
    _resolve_leave_policy(fields)

    ensure_position_capacity(department)
    ensure_unique_name(department.positions.all(), fields['name'], POSITION_NAME_TAKEN)

    position = Position(**fields)
    position.stamp_creator(actor)
    position.save()
    logger.info("Position %s created in department %s by user %s", position.pk, department.pk, actor.id)
    return position


def update_position(position, data, actor, partial=False):
    """
    Apply a position update.

    The capacity check only runs when the position moves to another
    department; the name check runs when the name or the department changes.
    """
    fields = validate_position(data, partial=partial)

    department_id = fields.get('department_id', position.department_id)
    department_changed = department_id != position.department_id
    department = _resolve_department(department_id) if department_changed else position.department
    _resolve_leave_policy(fields)

    if department_changed:
        ensure_position_capacity(department, exclude_id=position.pk)

    name = fields.get('name', position.name)
    if department_changed or name != position.name:
        ensure_unique_name(department.positions.all(), name, POSITION_NAME_TAKEN, exclude_id=position.pk)

    for attr, value in fields.items():
        setattr(position, attr, value)
    position.save()
    logger.info("Position %s updated by user %s", position.pk, actor.id)
    return position


def delete_position(position, actor):
    ensure_no_dependents(
        position.employees.count(),
        "Cannot delete position with active employees. Please reassign employees first.",
    )
    position_id = position.pk
    position.delete()
    logger.info("Position %s deleted by user %s", position_id, actor.id)
