"""
Core helpers for leave types and leave policies: validation, guards,
approval status and persistence of policy entitlements.
"""
import logging
from decimal import Decimal
from typing import Iterable, Tuple
from uuid import UUID

from django.db import transaction

from accounts.guards import ensure_no_dependents, ensure_unique_name
from accounts.workflow import initial_status

from .models import LeaveEntitlement, LeavePolicy, LeaveType
from .validators import ensure_leave_types_exist, validate_leave_policy, validate_leave_type

logger = logging.getLogger(__name__)


def create_leave_type(data, actor) -> LeaveType:
    fields = validate_leave_type(data)
    ensure_unique_name(LeaveType.objects.all(), fields["name"], "Leave type with this name already exists")

    leave_type = LeaveType(**fields)
    leave_type.stamp_creator(actor)
    leave_type.save()
    logger.info("Leave type %s created by user %s", leave_type.pk, actor.id)
    return leave_type


def update_leave_type(leave_type: LeaveType, data, actor, partial=False) -> LeaveType:
    fields = validate_leave_type(data, partial=partial)

    name = fields.get("name")
    if name is not None and name != leave_type.name:
        ensure_unique_name(
            LeaveType.objects.all(),
            name,
            "Leave type with this name already exists",
            exclude_id=leave_type.pk,
        )

    for attr, value in fields.items():
        setattr(leave_type, attr, value)
    leave_type.save()
    logger.info("Leave type %s updated by user %s", leave_type.pk, actor.id)
    return leave_type


def delete_leave_type(leave_type: LeaveType, actor) -> None:
    policy_count = LeavePolicy.objects.filter(entitlements__leave_type=leave_type).distinct().count()
    ensure_no_dependents(
        policy_count,
        f"Cannot delete leave type used in {policy_count} leave policy(ies). "
        "Please remove it from all leave policies first.",
    )
    leave_type_id = leave_type.pk
    leave_type.delete()
    logger.info("Leave type %s deleted by user %s", leave_type_id, actor.id)


def _check_entitlement_types(entitlements: Iterable[Tuple[UUID, Decimal]]) -> None:
    leave_type_ids = [leave_type_id for leave_type_id, _ in entitlements]
    existing = LeaveType.objects.filter(pk__in=leave_type_ids).values_list("pk", flat=True)
    ensure_leave_types_exist(leave_type_ids, existing)


def _replace_entitlements(policy: LeavePolicy, entitlements) -> None:
    policy.entitlements.all().delete()
    LeaveEntitlement.objects.bulk_create(
        [
            LeaveEntitlement(policy=policy, leave_type_id=leave_type_id, days=days, sort_order=index)
            for index, (leave_type_id, days) in enumerate(entitlements)
        ]
    )


def create_leave_policy(data, actor) -> LeavePolicy:
    fields = validate_leave_policy(data)
    _check_entitlement_types(fields["entitlements"])
    ensure_unique_name(LeavePolicy.objects.all(), fields["name"], "Leave policy with this name already exists")

    with transaction.atomic():
        policy = LeavePolicy(name=fields["name"], status=initial_status(actor))
        policy.stamp_creator(actor)
        policy.save()
        _replace_entitlements(policy, fields["entitlements"])

    logger.info("Leave policy %s created by user %s with status %s", policy.pk, actor.id, policy.status)
    return policy


def update_leave_policy(policy: LeavePolicy, data, actor, partial=True) -> LeavePolicy:
    """Update name and/or entitlements. Supplied entitlements replace the
    existing lines wholesale."""
    fields = validate_leave_policy(data, partial=partial)

    name = fields.get("name")
    if name is not None and name != policy.name:
        ensure_unique_name(
            LeavePolicy.objects.all(),
            name,
            "Leave policy with this name already exists",
            exclude_id=policy.pk,
        )

    entitlements = fields.get("entitlements")
    if entitlements is not None:
        _check_entitlement_types(entitlements)

    with transaction.atomic():
        if name is not None:
            policy.name = name
        policy.save()
        if entitlements is not None:
            _replace_entitlements(policy, entitlements)

    logger.info("Leave policy %s updated by user %s", policy.pk, actor.id)
    return policy


def delete_leave_policy(policy: LeavePolicy, actor) -> None:
    position_count = policy.positions.count()
    ensure_no_dependents(
        position_count,
        f"Cannot delete leave policy assigned to {position_count} position(s). "
        "Please reassign positions first.",
    )
    policy_id = policy.pk
    policy.delete()
    logger.info("Leave policy %s deleted by user %s", policy_id, actor.id)
