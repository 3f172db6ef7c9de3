import uuid
from django.db import models

from accounts.models import ApprovalModel, TrackedModel


class LeaveType(TrackedModel):
    """Kind of leave an entitlement grants days for."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "leave_types"
        verbose_name = "Leave Type"
        verbose_name_plural = "Leave Types"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class LeavePolicy(ApprovalModel):
    """
    Named bundle of leave entitlements that positions are assigned to.
    Created pending unless an admin creates it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "leave_policies"
        verbose_name = "Leave Policy"
        verbose_name_plural = "Leave Policies"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class LeaveEntitlement(models.Model):
    """One (leave type, days) line of a leave policy."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    policy = models.ForeignKey(LeavePolicy, on_delete=models.CASCADE, related_name="entitlements")
    leave_type = models.ForeignKey(LeaveType, on_delete=models.PROTECT, related_name="entitlements")
    days = models.DecimalField(max_digits=8, decimal_places=2)
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "leave_entitlements"
        verbose_name = "Leave Entitlement"
        verbose_name_plural = "Leave Entitlements"
        ordering = ["sort_order"]

    def __str__(self):
        return f"{self.policy.name} - {self.leave_type.name}: {self.days}"
