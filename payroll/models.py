import uuid

from django.db import models

from accounts.models import ApprovalModel


class SalaryComponent(ApprovalModel):
    """Named pay element (basic, transport allowance, ...) that salary
    policies price."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "salary_components"
        verbose_name = "Salary Component"
        verbose_name_plural = "Salary Components"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class SalaryPolicy(ApprovalModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    salary_components = models.ManyToManyField(
        SalaryComponent,
        through="SalaryPolicyComponent",
        related_name="salary_policies",
    )

    class Meta:
        db_table = "salary_policies"
        verbose_name = "Salary Policy"
        verbose_name_plural = "Salary Policies"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class SalaryPolicyComponent(models.Model):
    """Amount a salary policy assigns to one component."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    policy = models.ForeignKey(SalaryPolicy, on_delete=models.CASCADE, related_name="components")
    salary_component = models.ForeignKey(
        SalaryComponent, on_delete=models.PROTECT, related_name="policy_lines"
    )
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "salary_policy_components"
        verbose_name = "Salary Policy Component"
        verbose_name_plural = "Salary Policy Components"
        ordering = ["sort_order"]

    def __str__(self):
        return f"{self.policy.name} - {self.salary_component.name}: {self.amount}"
