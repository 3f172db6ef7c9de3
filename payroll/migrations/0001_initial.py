from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SalaryComponent",
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
                "verbose_name": "Salary Component",
                "verbose_name_plural": "Salary Components",
                "db_table": "salary_components",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="SalaryPolicy",
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
                "verbose_name": "Salary Policy",
                "verbose_name_plural": "Salary Policies",
                "db_table": "salary_policies",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="SalaryPolicyComponent",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=14)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                (
                    "policy",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="components",
                        to="payroll.salarypolicy",
                    ),
                ),
                (
                    "salary_component",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="policy_lines",
                        to="payroll.salarycomponent",
                    ),
                ),
            ],
            options={
                "verbose_name": "Salary Policy Component",
                "verbose_name_plural": "Salary Policy Components",
                "db_table": "salary_policy_components",
                "ordering": ["sort_order"],
            },
        ),
        migrations.AddField(
            model_name="salarypolicy",
            name="salary_components",
            field=models.ManyToManyField(
                related_name="salary_policies",
                through="payroll.SalaryPolicyComponent",
                to="payroll.salarycomponent",
            ),
        ),
    ]
