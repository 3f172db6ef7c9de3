"""Input rules for salary components and salary policies."""
from accounts.exceptions import ValidationError
from accounts.validators import clean_text, ensure_mapping, require_lines, require_text

SALARY_COMPONENT_REQUIRED = "Salary component name is required"
SALARY_POLICY_REQUIRED = "Salary policy name is required"

# Bounds of SalaryPolicyComponent.amount.
AMOUNT_MAX_DIGITS = 14
AMOUNT_DECIMAL_PLACES = 2

COMPONENT_MESSAGES = {
    "empty": "At least one salary component is required",
    "ref": "Invalid salary component ID in components",
    "amount": "Amount must be a non-negative number",
}


def validate_salary_component(data):
    data = ensure_mapping(data)
    return require_text(data, ("name",), SALARY_COMPONENT_REQUIRED)


def validate_salary_policy(data, partial=False):
    """
    Return ``{'name': str, 'components': [(component_id, amount), ...]}``.
    With ``partial`` only supplied keys are returned and a blank name is
    ignored.
    """
    data = ensure_mapping(data)
    fields = {}

    if partial:
        name = clean_text(data.get("name"))
        if name:
            fields["name"] = name
    else:
        fields.update(require_text(data, ("name",), SALARY_POLICY_REQUIRED))

    if not partial or data.get("components") is not None:
        fields["components"] = require_lines(
            data.get("components"), "salaryComponent", "amount", COMPONENT_MESSAGES, field="components",
            max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES,
        )
    return fields


def ensure_components_exist(component_ids, existing_ids):
    if set(component_ids) - set(existing_ids):
        raise ValidationError(COMPONENT_MESSAGES["ref"], field="components")
