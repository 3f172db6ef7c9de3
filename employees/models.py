import uuid

from django.db import models

from accounts.models import TrackedModel


class Department(TrackedModel):
    """Organizational department"""

    UNLIMITED = 'unlimited'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    position_count = models.CharField(
        max_length=50,
        help_text='Maximum number of positions: "unlimited" or a non-negative integer',
    )

    class Meta:
        db_table = 'departments'
        verbose_name = 'Department'
        verbose_name_plural = 'Departments'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Position(TrackedModel):
    """Job position inside a department"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    department = models.ForeignKey(Department, on_delete=models.PROTECT, related_name='positions')
    reports_to = models.CharField(max_length=255)
    employee_limit = models.CharField(max_length=50)
    leave_policy = models.ForeignKey(
        'timeoff.LeavePolicy',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='positions',
    )

    class Meta:
        db_table = 'positions'
        verbose_name = 'Position'
        verbose_name_plural = 'Positions'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['department', 'name'], name='positions_dept_name_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.department.name})"


class Employee(TrackedModel):
    """Hire record. Only read here to decide whether a department or
    position may be deleted."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    full_name = models.CharField(max_length=255)
    department = models.ForeignKey(
        Department, on_delete=models.PROTECT, null=True, blank=True, related_name='employees'
    )
    position = models.ForeignKey(
        Position, on_delete=models.PROTECT, null=True, blank=True, related_name='employees'
    )

    class Meta:
        db_table = 'employees'
        verbose_name = 'Employee'
        verbose_name_plural = 'Employees'
        ordering = ['full_name']

    def __str__(self):
        return self.full_name
