import uuid

from django.db import models

from accounts.models import ApprovalModel


class Shift(ApprovalModel):
    """
    Named working shift. Times are stored as 24h ``HH:MM`` strings and
    ``working_days`` as an ordered list of day codes (Mon..Sun).
    """

    WEEKDAY_CHOICES = [
        ("Mon", "Monday"),
        ("Tue", "Tuesday"),
        ("Wed", "Wednesday"),
        ("Thu", "Thursday"),
        ("Fri", "Friday"),
        ("Sat", "Saturday"),
        ("Sun", "Sunday"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    start_time = models.CharField(max_length=5)
    end_time = models.CharField(max_length=5)
    working_days = models.JSONField(default=list, blank=True)
    notes = models.TextField(blank=True, default="")

    class Meta:
        db_table = "attendance_shifts"
        verbose_name = "Shift"
        verbose_name_plural = "Shifts"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.start_time}-{self.end_time})"


class ShiftBreak(models.Model):
    """
    Break interval inside a shift.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shift = models.ForeignKey(Shift, on_delete=models.CASCADE, related_name="intervals")
    start_time = models.CharField(max_length=5)
    end_time = models.CharField(max_length=5)
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "attendance_shift_breaks"
        verbose_name = "Shift Break"
        verbose_name_plural = "Shift Breaks"
        ordering = ["sort_order"]

    def __str__(self):
        return f"{self.shift.name}: {self.start_time}-{self.end_time}"
