from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.actor import ActorContext
from accounts.exceptions import ConflictError, ValidationError
from accounts.models import User
from attendance.models import Shift
from attendance.services import create_shift, delete_shift, update_shift
from attendance.validators import normalize_working_days, validate_shift


def shift_payload(**overrides):
    payload = {
        "name": "Morning",
        "startTime": "08:00",
        "endTime": "16:00",
        "intervals": [{"startTime": "12:00", "endTime": "12:30"}],
        "workingDays": ["Fri", "Mon", "Wed"],
        "notes": "Front desk",
    }
    payload.update(overrides)
    return payload


class ShiftValidatorTests(SimpleTestCase):
    def test_working_days_are_deduplicated_in_week_order(self):
        self.assertEqual(normalize_working_days(["Sun", "Mon", "Sun", " Tue "]), ["Mon", "Tue", "Sun"])

    def test_working_days_rules(self):
        with self.assertRaisesMessage(ValidationError, "At least one working day is required"):
            normalize_working_days([])
        with self.assertRaisesMessage(ValidationError, "Invalid working day"):
            normalize_working_days(["Monday"])

    def test_times_must_be_hh_mm(self):
        with self.assertRaisesMessage(ValidationError, "Invalid time format. Use HH:MM"):
            validate_shift(shift_payload(startTime="8am"))
        with self.assertRaises(ValidationError):
            validate_shift(shift_payload(intervals=[{"startTime": "12:00"}]))

    def test_required_fields(self):
        with self.assertRaisesMessage(ValidationError, "Shift name, start time and end time are required"):
            validate_shift(shift_payload(name=""))

    def test_partial_only_checks_supplied_fields(self):
        self.assertEqual(validate_shift({"notes": " late "}, partial=True), {"notes": "late"})


class ShiftServiceTests(TestCase):
    def setUp(self):
        self.admin = ActorContext(id=1, name="Admin", role=User.ROLE_ADMIN)
        self.supervisor = ActorContext(id=2, name="Sup", role=User.ROLE_SUPERVISOR)

    def test_create_stores_breaks_and_days(self):
        shift = create_shift(shift_payload(), self.supervisor)
        self.assertEqual(shift.status, "Pending")
        self.assertEqual(shift.working_days, ["Mon", "Wed", "Fri"])
        self.assertEqual(list(shift.intervals.values_list("start_time", "end_time")), [("12:00", "12:30")])

    def test_admin_shift_is_approved(self):
        self.assertEqual(create_shift(shift_payload(), self.admin).status, "Approved")

    def test_name_unique_ignoring_case(self):
        create_shift(shift_payload(), self.admin)
        with self.assertRaisesMessage(ConflictError, "Shift with this name already exists"):
            create_shift(shift_payload(name="MORNING"), self.admin)

    def test_update_replaces_intervals_when_given(self):
        shift = create_shift(shift_payload(), self.admin)
        update_shift(shift, {"intervals": []}, self.admin, partial=True)
        self.assertEqual(shift.intervals.count(), 0)

        update_shift(shift, shift_payload(name="Early", startTime="06:00"), self.admin)
        shift.refresh_from_db()
        self.assertEqual((shift.name, shift.start_time), ("Early", "06:00"))
        self.assertEqual(shift.intervals.count(), 1)

    def test_delete(self):
        shift = create_shift(shift_payload(), self.admin)
        delete_shift(shift, self.admin)
        self.assertFalse(Shift.objects.exists())


class ShiftEndpointTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="pass", name="Admin", role=User.ROLE_ADMIN)
        self.supervisor = User.objects.create_user(
            username="sup", password="pass", name="Sup", role=User.ROLE_SUPERVISOR
        )

    def test_supervisor_creates_pending_shift_but_cannot_delete(self):
        self.client.force_authenticate(user=self.supervisor)
        response = self.client.post("/api/shifts/", shift_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data["data"]
        self.assertEqual(data["status"], "Pending")
        self.assertEqual(data["workingDays"], ["Mon", "Wed", "Fri"])
        self.assertEqual(data["intervals"], [{"startTime": "12:00", "endTime": "12:30"}])

        response = self.client.delete(f"/api/shifts/{data['id']}/")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_rejects_shift(self):
        self.client.force_authenticate(user=self.admin)
        shift_id = self.client.post("/api/shifts/", shift_payload(), format="json").data["data"]["id"]
        response = self.client.patch(f"/api/shifts/{shift_id}/status/", {"status": "Rejected"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Shift rejected successfully")

    def test_unknown_working_day_is_bad_request(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post("/api/shifts/", shift_payload(workingDays=["Funday"]), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["kind"], "ValidationError")
