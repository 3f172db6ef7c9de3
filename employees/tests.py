from datetime import timedelta
import uuid

from django.test import SimpleTestCase, TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.actor import ActorContext
from accounts.exceptions import ConflictError, NotFoundError, ValidationError
from accounts.models import User
from employees.models import Department, Employee, Position
from employees.services import (
    create_department,
    create_position,
    delete_department,
    delete_position,
    update_department,
    update_position,
)
from employees.validators import parse_position_limit, validate_department, validate_position


def position_payload(department, **overrides):
    payload = {
        'name': 'Engineer',
        'reportsTo': 'CTO',
        'employeeLimit': '5',
        'department': str(department.pk),
    }
    payload.update(overrides)
    return payload


class EmployeeValidatorTests(SimpleTestCase):
    def test_department_requires_name_and_position_count(self):
        with self.assertRaisesMessage(ValidationError, 'Department name and position count are required'):
            validate_department({'name': '  ', 'positionCount': '3'})
        self.assertEqual(
            validate_department({'name': ' HR ', 'positionCount': 4}),
            {'name': 'HR', 'position_count': '4'},
        )

    def test_department_partial_update_only_checks_supplied_fields(self):
        self.assertEqual(validate_department({'positionCount': 'unlimited'}, partial=True),
                         {'position_count': 'unlimited'})
        with self.assertRaises(ValidationError):
            validate_department({'name': ''}, partial=True)

    def test_position_required_fields(self):
        with self.assertRaisesMessage(
            ValidationError, 'Position name, employee limit, reports to and department are required'
        ):
            validate_position({'name': 'Dev', 'reportsTo': 'CTO', 'department': str(uuid.uuid4())})

    def test_position_department_must_be_id_shaped(self):
        with self.assertRaisesMessage(ValidationError, 'Invalid department ID'):
            validate_position({'name': 'Dev', 'reportsTo': 'CTO', 'employeeLimit': 2, 'department': 'abc'})

    def test_position_leave_policy_can_be_cleared(self):
        fields = validate_position({'leavePolicy': None}, partial=True)
        self.assertEqual(fields, {'leave_policy_id': None})

    def test_parse_position_limit(self):
        self.assertIsNone(parse_position_limit(' Unlimited '))
        self.assertEqual(parse_position_limit('2'), 2)
        self.assertEqual(parse_position_limit(' 0 '), 0)
        for descriptor in ('two', '-1', '2.5', '', None):
            with self.assertRaisesMessage(ValidationError, 'Invalid position count limit in department'):
                parse_position_limit(descriptor)


class DepartmentServiceTests(TestCase):
    def setUp(self):
        self.actor = ActorContext(id=1, name='Admin', role=User.ROLE_ADMIN)

    def test_create_stamps_creator(self):
        department = create_department({'name': 'Finance', 'positionCount': '2'}, self.actor)
        self.assertEqual(department.created_by, 1)
        self.assertEqual(department.created_by_name, 'Admin')

    def test_duplicate_name_differing_in_case_conflicts(self):
        create_department({'name': 'Finance', 'positionCount': '2'}, self.actor)
        with self.assertRaisesMessage(ConflictError, 'Department with this name already exists'):
            create_department({'name': 'FINANCE', 'positionCount': '2'}, self.actor)

    def test_update_can_change_case_of_own_name(self):
        department = create_department({'name': 'Finance', 'positionCount': '2'}, self.actor)
        update_department(department, {'name': 'finance'}, self.actor)
        department.refresh_from_db()
        self.assertEqual(department.name, 'finance')
        self.assertEqual(department.position_count, '2')

    def test_update_into_existing_name_conflicts(self):
        create_department({'name': 'Finance', 'positionCount': '2'}, self.actor)
        legal = create_department({'name': 'Legal', 'positionCount': '2'}, self.actor)
        with self.assertRaises(ConflictError):
            update_department(legal, {'name': 'finance'}, self.actor)

    def test_delete_blocked_by_positions_until_they_are_gone(self):
        department = create_department({'name': 'Finance', 'positionCount': '2'}, self.actor)
        position = create_position(position_payload(department), self.actor)

        with self.assertRaises(ConflictError) as ctx:
            delete_department(department, self.actor)
        self.assertEqual(ctx.exception.count, 1)

        delete_position(position, self.actor)
        delete_department(department, self.actor)
        self.assertFalse(Department.objects.filter(pk=department.pk).exists())

    def test_delete_blocked_by_employees(self):
        department = create_department({'name': 'Finance', 'positionCount': '2'}, self.actor)
        Employee.objects.create(full_name='Jane Doe', department=department)
        with self.assertRaisesMessage(ConflictError, 'Cannot delete department with active employees'):
            delete_department(department, self.actor)


class PositionServiceTests(TestCase):
    def setUp(self):
        self.actor = ActorContext(id=1, name='Admin', role=User.ROLE_ADMIN)
        self.limited = Department.objects.create(name='Engineering', position_count='2')
        self.unlimited = Department.objects.create(name='Sales', position_count='unlimited')

    def test_capacity_admits_up_to_limit(self):
        create_position(position_payload(self.limited, name='Dev'), self.actor)
        create_position(position_payload(self.limited, name='QA'), self.actor)
        with self.assertRaises(ConflictError) as ctx:
            create_position(position_payload(self.limited, name='Ops'), self.actor)
        self.assertEqual(
            ctx.exception.message,
            'Position limit reached for Engineering department. Maximum positions allowed: 2',
        )
        self.assertEqual(self.limited.positions.count(), 2)

    def test_unlimited_department_has_no_ceiling(self):
        for index in range(12):
            create_position(position_payload(self.unlimited, name=f'Rep {index}'), self.actor)
        self.assertEqual(self.unlimited.positions.count(), 12)

    def test_capacity_runs_before_name_check(self):
        create_position(position_payload(self.limited, name='Dev'), self.actor)
        create_position(position_payload(self.limited, name='QA'), self.actor)
        with self.assertRaisesMessage(ConflictError, 'Position limit reached'):
            create_position(position_payload(self.limited, name='dev'), self.actor)

    def test_invalid_capacity_descriptor_fails_closed(self):
        broken = Department.objects.create(name='Broken', position_count='many')
        with self.assertRaisesMessage(ValidationError, 'Invalid position count limit in department'):
            create_position(position_payload(broken), self.actor)

    def test_name_unique_within_department_only(self):
        create_position(position_payload(self.limited, name='Manager'), self.actor)
        create_position(position_payload(self.unlimited, name='manager'), self.actor)
        with self.assertRaisesMessage(ConflictError, 'Position with this name already exists in this department'):
            create_position(position_payload(self.limited, name='MANAGER'), self.actor)

    def test_unknown_department(self):
        with self.assertRaisesMessage(NotFoundError, 'Department not found'):
            create_position(position_payload(Department(name='Ghost')), self.actor)

    def test_rename_in_full_department_skips_capacity(self):
        dev = create_position(position_payload(self.limited, name='Dev'), self.actor)
        create_position(position_payload(self.limited, name='QA'), self.actor)
        update_position(dev, position_payload(self.limited, name='Developer'), self.actor)
        dev.refresh_from_db()
        self.assertEqual(dev.name, 'Developer')

    def test_move_into_full_department_fails(self):
        create_position(position_payload(self.limited, name='Dev'), self.actor)
        create_position(position_payload(self.limited, name='QA'), self.actor)
        rep = create_position(position_payload(self.unlimited, name='Rep'), self.actor)
        with self.assertRaises(ConflictError):
            update_position(rep, position_payload(self.limited, name='Rep'), self.actor)
        rep.refresh_from_db()
        self.assertEqual(rep.department_id, self.unlimited.pk)

    def test_move_checks_name_in_target_department(self):
        create_position(position_payload(self.unlimited, name='Lead'), self.actor)
        lead = create_position(position_payload(self.limited, name='Lead'), self.actor)
        with self.assertRaises(ConflictError):
            update_position(lead, {'department': str(self.unlimited.pk)}, self.actor, partial=True)

    def test_delete_blocked_by_hired_employees(self):
        position = create_position(position_payload(self.unlimited), self.actor)
        Employee.objects.create(full_name='John Doe', department=self.unlimited, position=position)
        with self.assertRaisesMessage(
            ConflictError, 'Cannot delete position with active employees. Please reassign employees first.'
        ):
            delete_position(position, self.actor)
        self.assertTrue(Position.objects.filter(pk=position.pk).exists())


class OrganizationEndpointTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username='admin', password='pass', name='Admin', role=User.ROLE_ADMIN)
        self.supervisor = User.objects.create_user(
            username='sup', password='pass', name='Sup', role=User.ROLE_SUPERVISOR
        )
        self.client.force_authenticate(user=self.admin)

    def test_department_crud(self):
        response = self.client.post('/api/departments/', {'name': 'HR', 'positionCount': '1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        department_id = response.data['data']['id']
        self.assertEqual(response.data['data']['positionCount'], '1')
        self.assertEqual(response.data['data']['createdBy'], 'Admin')

        response = self.client.put(
            f'/api/departments/{department_id}/', {'positionCount': 'unlimited'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['name'], 'HR')

        response = self.client.get('/api/departments/', {'search': 'h'})
        self.assertEqual(response.data['data']['pagination']['totalDepartments'], 1)

        response = self.client.delete(f'/api/departments/{department_id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data'], {'id': department_id, 'name': 'HR'})

    def test_select_list_is_newest_first(self):
        sales = Department.objects.create(name='Sales', position_count='1')
        admin = Department.objects.create(name='Admin', position_count='1')
        now = timezone.now()
        Department.objects.filter(pk=sales.pk).update(created_at=now)
        Department.objects.filter(pk=admin.pk).update(created_at=now - timedelta(days=1))
        response = self.client.get('/api/departments/list/')
        self.assertEqual(response.data['data'], [
            {'id': sales.pk, 'name': 'Sales'},
            {'id': admin.pk, 'name': 'Admin'},
        ])

    def test_position_response_joins_department(self):
        department = Department.objects.create(name='Sales', position_count='1')
        response = self.client.post('/api/positions/', position_payload(department), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['department'], {'id': str(department.pk), 'name': 'Sales'})
        self.assertEqual(response.data['data']['employeeLimit'], '5')

        response = self.client.post('/api/positions/', position_payload(department, name='Other'), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'ConflictError')

    def test_malformed_id_in_url_is_not_found(self):
        response = self.client.get('/api/positions/not-an-id/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Position Not Found')

    def test_malformed_department_in_body_is_bad_request(self):
        response = self.client.post(
            '/api/positions/',
            {'name': 'Dev', 'reportsTo': 'CTO', 'employeeLimit': '1', 'department': 'xyz'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Invalid department ID')

    def test_supervisor_cannot_manage_departments(self):
        self.client.force_authenticate(user=self.supervisor)
        response = self.client.get('/api/departments/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
