from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Shift",
            fields=[
                ("created_by", models.IntegerField(blank=True, db_index=True, help_text="User ID of the creator", null=True)),
                ("created_by_name", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("Approved", "Approved"), ("Pending", "Pending"), ("Rejected", "Rejected")],
                        db_index=True,
                        default="Pending",
                        max_length=10,
                    ),
                ),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("start_time", models.CharField(max_length=5)),
                ("end_time", models.CharField(max_length=5)),
                ("working_days", models.JSONField(blank=True, default=list)),
                ("notes", models.TextField(blank=True, default="")),
            ],
            options={
                "verbose_name": "Shift",
                "verbose_name_plural": "Shifts",
                "db_table": "attendance_shifts",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ShiftBreak",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("start_time", models.CharField(max_length=5)),
                ("end_time", models.CharField(max_length=5)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                (
                    "shift",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="intervals",
                        to="attendance.shift",
                    ),
                ),
            ],
            options={
                "verbose_name": "Shift Break",
                "verbose_name_plural": "Shift Breaks",
                "db_table": "attendance_shift_breaks",
                "ordering": ["sort_order"],
            },
        ),
    ]
