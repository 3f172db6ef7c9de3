"""
Salary components and salary policies: validation, guards, approval status
and persistence of the priced component lines.
"""
import logging

from django.db import transaction

from accounts.guards import ensure_no_dependents, ensure_unique_name, pluralize
from accounts.workflow import initial_status

from .models import SalaryComponent, SalaryPolicy, SalaryPolicyComponent
from .validators import ensure_components_exist, validate_salary_component, validate_salary_policy

logger = logging.getLogger(__name__)


def create_salary_component(data, actor) -> SalaryComponent:
    fields = validate_salary_component(data)
    ensure_unique_name(
        SalaryComponent.objects.all(), fields["name"], "Salary component with this name already exists"
    )

    component = SalaryComponent(name=fields["name"], status=initial_status(actor))
    component.stamp_creator(actor)
    component.save()
    logger.info("Salary component %s created by user %s with status %s", component.pk, actor.id, component.status)
    return component


def update_salary_component(component: SalaryComponent, data, actor, partial=False) -> SalaryComponent:
    fields = validate_salary_component(data)

    if fields["name"] != component.name:
        ensure_unique_name(
            SalaryComponent.objects.all(),
            fields["name"],
            "Salary component with this name already exists",
            exclude_id=component.pk,
        )

    component.name = fields["name"]
    component.save()
    logger.info("Salary component %s updated by user %s", component.pk, actor.id)
    return component


def delete_salary_component(component: SalaryComponent, actor) -> None:
    policy_count = component.salary_policies.distinct().count()
    ensure_no_dependents(
        policy_count,
        f"Cannot delete salary component. It is currently used in {policy_count} salary "
        f"{pluralize(policy_count, 'policy', 'policies')}. Please remove it from all salary policies first.",
    )
    component_id = component.pk
    component.delete()
    logger.info("Salary component %s deleted by user %s", component_id, actor.id)


def _check_components(components) -> None:
    component_ids = [component_id for component_id, _ in components]
    existing = SalaryComponent.objects.filter(pk__in=component_ids).values_list("pk", flat=True)
    ensure_components_exist(component_ids, existing)


def _replace_components(policy: SalaryPolicy, components) -> None:
    policy.components.all().delete()
    SalaryPolicyComponent.objects.bulk_create(
        [
            SalaryPolicyComponent(policy=policy, salary_component_id=component_id, amount=amount, sort_order=index)
            for index, (component_id, amount) in enumerate(components)
        ]
    )


@transaction.atomic
def _save_policy(policy: SalaryPolicy, components=None) -> None:
    policy.save()
    if components is not None:
        _replace_components(policy, components)


def create_salary_policy(data, actor) -> SalaryPolicy:
    fields = validate_salary_policy(data)
    _check_components(fields["components"])
    ensure_unique_name(SalaryPolicy.objects.all(), fields["name"], "Salary policy with this name already exists")

    policy = SalaryPolicy(name=fields["name"], status=initial_status(actor))
    policy.stamp_creator(actor)
    _save_policy(policy, fields["components"])
    logger.info("Salary policy %s created by user %s with status %s", policy.pk, actor.id, policy.status)
    return policy


def update_salary_policy(policy: SalaryPolicy, data, actor, partial=True) -> SalaryPolicy:
    fields = validate_salary_policy(data, partial=partial)

    name = fields.get("name")
    if name is not None and name != policy.name:
        ensure_unique_name(
            SalaryPolicy.objects.all(),
            name,
            "Salary policy with this name already exists",
            exclude_id=policy.pk,
        )
        policy.name = name

    components = fields.get("components")
    if components is not None:
        _check_components(components)

    _save_policy(policy, components)
    logger.info("Salary policy %s updated by user %s", policy.pk, actor.id)
    return policy


def delete_salary_policy(policy: SalaryPolicy, actor) -> None:
    policy_id = policy.pk
    policy.delete()
    logger.info("Salary policy %s deleted by user %s", policy_id, actor.id)
