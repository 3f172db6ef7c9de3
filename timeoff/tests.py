from decimal import Decimal
import uuid

from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.actor import ActorContext
from accounts.exceptions import ConflictError, ValidationError
from accounts.models import User
from employees.models import Department, Position
from timeoff.models import LeavePolicy, LeaveType
from timeoff.services import (
    create_leave_policy,
    create_leave_type,
    delete_leave_policy,
    delete_leave_type,
    update_leave_policy,
)
from timeoff.validators import validate_leave_policy


class LeavePolicyValidatorTests(SimpleTestCase):
    def test_name_is_required(self):
        with self.assertRaisesMessage(ValidationError, "Leave policy name is required"):
            validate_leave_policy({"name": " ", "entitlements": []})

    def test_entitlements_must_not_be_empty(self):
        with self.assertRaisesMessage(ValidationError, "At least one leave type entitlement is required"):
            validate_leave_policy({"name": "Standard", "entitlements": []})
        with self.assertRaisesMessage(ValidationError, "At least one leave type entitlement is required"):
            validate_leave_policy({"name": "Standard"})

    def test_entitlement_checks(self):
        with self.assertRaisesMessage(ValidationError, "Invalid leave type ID in entitlements"):
            validate_leave_policy({"name": "Standard", "entitlements": [{"leaveType": "abc", "days": 2}]})
        with self.assertRaisesMessage(ValidationError, "Days must be a non-negative number"):
            validate_leave_policy(
                {"name": "Standard", "entitlements": [{"leaveType": str(uuid.uuid4()), "days": -1}]}
            )

    def test_partial_update_ignores_blank_name(self):
        self.assertEqual(validate_leave_policy({"name": ""}, partial=True), {})


class LeavePolicyServiceTests(TestCase):
    def setUp(self):
        self.admin = ActorContext(id=1, name="Admin", role=User.ROLE_ADMIN)
        self.supervisor = ActorContext(id=2, name="Sup", role=User.ROLE_SUPERVISOR)
        self.annual = LeaveType.objects.create(name="Annual")
        self.sick = LeaveType.objects.create(name="Sick")

    def _payload(self, name="Standard", **overrides):
        payload = {
            "name": name,
            "entitlements": [
                {"leaveType": str(self.annual.pk), "days": 21},
                {"leaveType": str(self.sick.pk), "days": "10.5"},
            ],
        }
        payload.update(overrides)
        return payload

    def test_admin_created_policy_is_approved(self):
        policy = create_leave_policy(self._payload(), self.admin)
        self.assertEqual(policy.status, "Approved")
        lines = list(policy.entitlements.values_list("leave_type__name", "days"))
        self.assertEqual(lines, [("Annual", Decimal("21.00")), ("Sick", Decimal("10.50"))])

    def test_supervisor_created_policy_is_pending(self):
        policy = create_leave_policy(self._payload(), self.supervisor)
        self.assertEqual(policy.status, "Pending")
        self.assertEqual(policy.created_by_name, "Sup")

    def test_unknown_leave_type_is_rejected(self):
        payload = self._payload(entitlements=[{"leaveType": str(uuid.uuid4()), "days": 1}])
        with self.assertRaisesMessage(ValidationError, "Invalid leave type ID in entitlements"):
            create_leave_policy(payload, self.admin)
        self.assertFalse(LeavePolicy.objects.exists())

    def test_duplicate_name_conflicts(self):
        create_leave_policy(self._payload(), self.admin)
        with self.assertRaisesMessage(ConflictError, "Leave policy with this name already exists"):
            create_leave_policy(self._payload(name="STANDARD"), self.admin)

    def test_update_replaces_entitlements(self):
        policy = create_leave_policy(self._payload(), self.admin)
        update_leave_policy(policy, {"entitlements": [{"leaveType": str(self.sick.pk), "days": 5}]}, self.admin)
        self.assertEqual(list(policy.entitlements.values_list("leave_type_id", flat=True)), [self.sick.pk])
        self.assertEqual(policy.name, "Standard")

    def test_update_keeps_status(self):
        policy = create_leave_policy(self._payload(), self.supervisor)
        update_leave_policy(policy, {"name": "Renamed"}, self.admin)
        policy.refresh_from_db()
        self.assertEqual(policy.name, "Renamed")
        self.assertEqual(policy.status, "Pending")

    def test_delete_blocked_while_assigned_to_positions(self):
        policy = create_leave_policy(self._payload(), self.admin)
        department = Department.objects.create(name="Ops", position_count="unlimited")
        for name in ("A", "B"):
            Position.objects.create(
                name=name, department=department, reports_to="Lead", employee_limit="1", leave_policy=policy
            )
        with self.assertRaises(ConflictError) as ctx:
            delete_leave_policy(policy, self.admin)
        self.assertEqual(
            ctx.exception.message,
            "Cannot delete leave policy assigned to 2 position(s). Please reassign positions first.",
        )

        department.positions.update(leave_policy=None)
        delete_leave_policy(policy, self.admin)
        self.assertFalse(LeavePolicy.objects.filter(pk=policy.pk).exists())

    def test_leave_type_in_use_cannot_be_deleted(self):
        create_leave_policy(self._payload(), self.admin)
        with self.assertRaises(ConflictError):
            delete_leave_type(self.annual, self.admin)
        unused = create_leave_type({"name": "Unpaid"}, self.admin)
        delete_leave_type(unused, self.admin)

    def test_leave_type_name_is_unique(self):
        with self.assertRaisesMessage(ConflictError, "Leave type with this name already exists"):
            create_leave_type({"name": "annual"}, self.admin)


class LeavePolicyEndpointTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="pass", name="Admin", role=User.ROLE_ADMIN)
        self.supervisor = User.objects.create_user(
            username="sup", password="pass", name="Sup", role=User.ROLE_SUPERVISOR
        )
        self.employee = User.objects.create_user(username="emp", password="pass", name="Emp")
        self.annual = LeaveType.objects.create(name="Annual")

    def _create(self, user, name="Standard", days=20):
        self.client.force_authenticate(user=user)
        return self.client.post(
            "/api/leave-policies/",
            {"name": name, "entitlements": [{"leaveType": str(self.annual.pk), "days": days}]},
            format="json",
        )

    def test_supervisor_proposes_and_admin_approves(self):
        response = self._create(self.supervisor)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["status"], "Pending")
        self.assertEqual(
            response.data["data"]["entitlements"],
            [{"leaveType": {"id": str(self.annual.pk), "name": "Annual"}, "days": Decimal("20.00")}],
        )
        policy_id = response.data["data"]["id"]

        response = self.client.patch(f"/api/leave-policies/{policy_id}/status/", {"status": "Approved"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(user=self.admin)
        response = self.client.patch(f"/api/leave-policies/{policy_id}/status/", {"status": "Approved"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Leave policy approved successfully")
        self.assertEqual(response.data["data"]["status"], "Approved")

    def test_status_outside_workflow_is_rejected(self):
        policy_id = self._create(self.admin).data["data"]["id"]
        response = self.client.patch(f"/api/leave-policies/{policy_id}/status/", {"status": "Closed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid status. Valid statuses are: Approved, Pending, Rejected")

    def test_employee_has_no_access(self):
        response = self._create(self.employee)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_supervisor_can_list_leave_types_but_not_create(self):
        self.client.force_authenticate(user=self.supervisor)
        response = self.client.get("/api/leave-types/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["pagination"]["totalLeaveTypes"], 1)
        response = self.client.post("/api/leave-types/", {"name": "Study"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_days_beyond_column_precision_are_rejected(self):
        for days in ("123456789", "1.005"):
            response = self._create(self.admin, days=days)
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["kind"], "ValidationError")
            self.assertEqual(response.data["message"], "Days must be a non-negative number")
        self.assertFalse(LeavePolicy.objects.exists())

        response = self.client.get("/api/leave-policies/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
