from decimal import Decimal
import uuid

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.actor import ActorContext
from accounts.exceptions import ConflictError, ValidationError
from accounts.models import User
from payroll.models import SalaryComponent, SalaryPolicy
from payroll.services import (
    create_salary_component,
    create_salary_policy,
    delete_salary_component,
    delete_salary_policy,
    update_salary_component,
    update_salary_policy,
)


class SalaryComponentServiceTests(TestCase):
    def setUp(self):
        self.admin = ActorContext(id=1, name="Admin", role=User.ROLE_ADMIN)
        self.supervisor = ActorContext(id=2, name="Sup", role=User.ROLE_SUPERVISOR)

    def test_initial_status_depends_on_actor(self):
        self.assertEqual(create_salary_component({"name": "Basic"}, self.admin).status, "Approved")
        self.assertEqual(create_salary_component({"name": "Transport"}, self.supervisor).status, "Pending")

    def test_name_required_and_unique(self):
        with self.assertRaisesMessage(ValidationError, "Salary component name is required"):
            create_salary_component({"name": "   "}, self.admin)
        create_salary_component({"name": "Basic"}, self.admin)
        with self.assertRaisesMessage(ConflictError, "Salary component with this name already exists"):
            create_salary_component({"name": "basic"}, self.admin)

    def test_update_renames(self):
        component = create_salary_component({"name": "Basic"}, self.admin)
        update_salary_component(component, {"name": "Basic Salary"}, self.admin)
        component.refresh_from_db()
        self.assertEqual(component.name, "Basic Salary")

    def test_delete_blocked_by_policies_with_count(self):
        component = create_salary_component({"name": "Basic"}, self.admin)
        line = [{"salaryComponent": str(component.pk), "amount": 1000}]
        create_salary_policy({"name": "Junior", "components": line}, self.admin)

        with self.assertRaises(ConflictError) as ctx:
            delete_salary_component(component, self.admin)
        self.assertEqual(
            ctx.exception.message,
            "Cannot delete salary component. It is currently used in 1 salary policy. "
            "Please remove it from all salary policies first.",
        )

        create_salary_policy({"name": "Senior", "components": line}, self.admin)
        with self.assertRaisesMessage(ConflictError, "used in 2 salary policies"):
            delete_salary_component(component, self.admin)

    def test_unreferenced_component_can_be_deleted(self):
        component = create_salary_component({"name": "Bonus"}, self.admin)
        delete_salary_component(component, self.admin)
        self.assertFalse(SalaryComponent.objects.exists())


class SalaryPolicyServiceTests(TestCase):
    def setUp(self):
        self.admin = ActorContext(id=1, name="Admin", role=User.ROLE_ADMIN)
        self.basic = SalaryComponent.objects.create(name="Basic", status="Approved")
        self.housing = SalaryComponent.objects.create(name="Housing", status="Approved")

    def _payload(self, name="Junior", components=None):
        if components is None:
            components = [
                {"salaryComponent": str(self.basic.pk), "amount": 150000},
                {"salaryComponent": str(self.housing.pk), "amount": "25000.50"},
            ]
        return {"name": name, "components": components}

    def test_create_keeps_component_order(self):
        policy = create_salary_policy(self._payload(), self.admin)
        lines = list(policy.components.values_list("salary_component__name", "amount"))
        self.assertEqual(lines, [("Basic", Decimal("150000")), ("Housing", Decimal("25000.50"))])

    def test_component_rules(self):
        with self.assertRaisesMessage(ValidationError, "At least one salary component is required"):
            create_salary_policy(self._payload(components=[]), self.admin)
        with self.assertRaisesMessage(ValidationError, "Invalid salary component ID in components"):
            create_salary_policy(self._payload(components=[{"salaryComponent": "x", "amount": 1}]), self.admin)
        with self.assertRaisesMessage(ValidationError, "Invalid salary component ID in components"):
            create_salary_policy(
                self._payload(components=[{"salaryComponent": str(uuid.uuid4()), "amount": 1}]), self.admin
            )
        with self.assertRaisesMessage(ValidationError, "Amount must be a non-negative number"):
            create_salary_policy(
                self._payload(components=[{"salaryComponent": str(self.basic.pk), "amount": -5}]), self.admin
            )
        self.assertFalse(SalaryPolicy.objects.exists())

    def test_duplicate_name_conflicts(self):
        create_salary_policy(self._payload(), self.admin)
        with self.assertRaisesMessage(ConflictError, "Salary policy with this name already exists"):
            create_salary_policy(self._payload(name="JUNIOR"), self.admin)

    def test_partial_update_keeps_components(self):
        policy = create_salary_policy(self._payload(), self.admin)
        update_salary_policy(policy, {"name": "Graduate"}, self.admin)
        policy.refresh_from_db()
        self.assertEqual(policy.name, "Graduate")
        self.assertEqual(policy.components.count(), 2)

    def test_policy_has_no_dependents(self):
        policy = create_salary_policy(self._payload(), self.admin)
        delete_salary_policy(policy, self.admin)
        self.assertFalse(SalaryPolicy.objects.exists())
        delete_salary_component(self.basic, self.admin)


class SalaryEndpointTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="pass", name="Admin", role=User.ROLE_ADMIN)
        self.client.force_authenticate(user=self.admin)

    def test_component_status_transition(self):
        response = self.client.post("/api/salary-components/", {"name": "Basic"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        component_id = response.data["data"]["id"]

        for target in ("Rejected", "Pending", "Approved"):
            response = self.client.patch(
                f"/api/salary-components/{component_id}/status/", {"status": target}, format="json"
            )
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(response.data["message"], f"Salary component {target.lower()} successfully")
            self.assertEqual(SalaryComponent.objects.get(pk=component_id).status, target)

    def test_policy_response_joins_components(self):
        component = SalaryComponent.objects.create(name="Basic")
        response = self.client.post(
            "/api/salary-policies/",
            {"name": "Junior", "components": [{"salaryComponent": str(component.pk), "amount": 100}]},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(
            response.data["data"]["components"][0]["salaryComponent"],
            {"id": str(component.pk), "name": "Basic"},
        )

        response = self.client.delete(f"/api/salary-components/{component.pk}/")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["kind"], "ConflictError")

    def test_amount_beyond_column_precision_is_rejected(self):
        component = SalaryComponent.objects.create(name="Basic")
        for amount in ("1e20", "10.999"):
            response = self.client.post(
                "/api/salary-policies/",
                {"name": "Junior", "components": [{"salaryComponent": str(component.pk), "amount": amount}]},
                format="json",
            )
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["kind"], "ValidationError")
            self.assertEqual(response.data["message"], "Amount must be a non-negative number")
        self.assertFalse(SalaryPolicy.objects.exists())

        response = self.client.get("/api/salary-policies/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
