from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LeaveType",
            fields=[
                ("created_by", models.IntegerField(blank=True, db_index=True, help_text="User ID of the creator", null=True)),
                ("created_by_name", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
            ],
            options={
                "verbose_name": "Leave Type",
                "verbose_name_plural": "Leave Types",
                "db_table": "leave_types",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="LeavePolicy",
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
            ],
            options={
                "verbose_name": "Leave Policy",
                "verbose_name_plural": "Leave Policies",
                "db_table": "leave_policies",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="LeaveEntitlement",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("days", models.DecimalField(decimal_places=2, max_digits=8)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                (
                    "leave_type",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="entitlements",
                        to="timeoff.leavetype",
                    ),
                ),
                (
                    "policy",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="entitlements",
                        to="timeoff.leavepolicy",
                    ),
                ),
            ],
            options={
                "verbose_name": "Leave Entitlement",
                "verbose_name_plural": "Leave Entitlements",
                "db_table": "leave_entitlements",
                "ordering": ["sort_order"],
            },
        ),
    ]
