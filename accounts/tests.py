from decimal import Decimal
from io import StringIO
import uuid

from django.core.cache import cache
from django.core.management import call_command
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts import workflow
from accounts.actor import ActorContext
from accounts.exceptions import ConflictError, NotFoundError, ValidationError
from accounts.guards import ensure_no_dependents, ensure_unique_name, pluralize
from accounts.models import User
from accounts.store import count, find_by_id, find_one, search_page
from accounts.validators import (
    clean_text,
    ensure_mapping,
    parse_object_id,
    require_lines,
    require_non_negative,
    require_text,
    require_time,
)
from employees.models import Department

STRONG_PASSWORD = 'Str0ng-Passw0rd!'

LINE_MESSAGES = {'empty': 'empty', 'ref': 'bad ref', 'amount': 'bad amount'}


class ValidatorTests(SimpleTestCase):
    def test_clean_text_trims_and_ignores_non_text(self):
        self.assertEqual(clean_text('  HR  '), 'HR')
        self.assertEqual(clean_text(5), '5')
        self.assertEqual(clean_text(None), '')
        self.assertEqual(clean_text(True), '')
        self.assertEqual(clean_text(['x']), '')

    def test_require_text_reports_first_missing_field(self):
        with self.assertRaises(ValidationError) as ctx:
            require_text({'name': 'Ops', 'code': '   '}, ('name', 'code'), 'Name and code are required')
        self.assertEqual(ctx.exception.message, 'Name and code are required')
        self.assertEqual(ctx.exception.field, 'code')

    def test_ensure_mapping_rejects_lists(self):
        self.assertEqual(ensure_mapping(None), {})
        with self.assertRaises(ValidationError):
            ensure_mapping(['a'])

    def test_parse_object_id(self):
        value = uuid.uuid4()
        self.assertEqual(parse_object_id(str(value)), value)
        self.assertIsNone(parse_object_id('not-an-id'))
        self.assertIsNone(parse_object_id(42))
        self.assertIsNone(parse_object_id(''))

    def test_require_non_negative(self):
        self.assertEqual(require_non_negative('2.5', 'bad'), Decimal('2.5'))
        self.assertEqual(require_non_negative(0, 'bad'), Decimal('0'))
        for value in (-1, None, True, 'abc', float('nan'), float('inf')):
            with self.assertRaises(ValidationError):
                require_non_negative(value, 'bad')

    def test_require_non_negative_respects_column_bounds(self):
        self.assertEqual(
            require_non_negative('999999.99', 'bad', max_digits=8, decimal_places=2), Decimal('999999.99')
        )
        for value in ('1000000', '1.001', '1e20'):
            with self.assertRaisesMessage(ValidationError, 'bad'):
                require_non_negative(value, 'bad', max_digits=8, decimal_places=2)

    def test_require_time(self):
        self.assertEqual(require_time(' 08:30 ', 'bad'), '08:30')
        for value in ('8:30', '24:00', '12:60', '', None):
            with self.assertRaises(ValidationError):
                require_time(value, 'bad')

    def test_require_lines_checks_reference_before_amount(self):
        ref = uuid.uuid4()
        self.assertEqual(
            require_lines([{'ref': str(ref), 'amount': 3}], 'ref', 'amount', LINE_MESSAGES),
            [(ref, Decimal('3'))],
        )
        with self.assertRaisesMessage(ValidationError, 'empty'):
            require_lines([], 'ref', 'amount', LINE_MESSAGES)
        with self.assertRaisesMessage(ValidationError, 'bad ref'):
            require_lines([{'ref': 'nope', 'amount': -1}], 'ref', 'amount', LINE_MESSAGES)
        with self.assertRaisesMessage(ValidationError, 'bad amount'):
            require_lines([{'ref': str(ref), 'amount': -1}], 'ref', 'amount', LINE_MESSAGES)
        with self.assertRaisesMessage(ValidationError, 'bad amount'):
            require_lines([{'ref': str(ref)}], 'ref', 'amount', LINE_MESSAGES)

    def test_error_as_dict(self):
        error = ConflictError('Taken', count=2)
        self.assertEqual(error.as_dict(), {'kind': 'ConflictError', 'httpStatusHint': 400, 'message': 'Taken'})
        self.assertEqual(error.count, 2)
        self.assertEqual(NotFoundError('Gone').as_dict()['httpStatusHint'], 404)


class WorkflowTests(TestCase):
    def setUp(self):
        self.admin = ActorContext(id=1, name='Admin', role=User.ROLE_ADMIN)
        self.supervisor = ActorContext(id=2, name='Sup', role=User.ROLE_SUPERVISOR)

    def test_initial_status_follows_actor_privilege(self):
        self.assertEqual(workflow.initial_status(self.admin), workflow.STATUS_APPROVED)
        self.assertEqual(workflow.initial_status(self.supervisor), workflow.STATUS_PENDING)

    def test_validate_status_rejects_unknown_value(self):
        with self.assertRaises(ValidationError) as ctx:
            workflow.validate_status('Closed')
        self.assertEqual(
            ctx.exception.message, 'Invalid status. Valid statuses are: Approved, Pending, Rejected'
        )
        with self.assertRaises(ValidationError):
            workflow.validate_status(None)
        with self.assertRaises(ValidationError):
            workflow.validate_status('approved')

    def test_transition_allows_any_state_to_any_state(self):
        from payroll.models import SalaryComponent

        component = SalaryComponent.objects.create(name='Basic', status=workflow.STATUS_PENDING)
        for target in ('Approved', 'Rejected', 'Approved', 'Pending', 'Pending'):
            workflow.transition_status(component, target, actor=self.admin)
            component.refresh_from_db()
            self.assertEqual(component.status, target)

    def test_status_message(self):
        self.assertEqual(workflow.status_message('Leave Policy', 'Approved'), 'Leave policy approved successfully')


class GuardAndStoreTests(TestCase):
    def setUp(self):
        self.hr = Department.objects.create(name='Human Resources', position_count='unlimited')
        self.it = Department.objects.create(name='IT', position_count='3')

    def test_unique_name_is_case_insensitive(self):
        with self.assertRaises(ConflictError):
            ensure_unique_name(Department.objects.all(), 'human resources', 'taken')
        ensure_unique_name(Department.objects.all(), 'Finance', 'taken')

    def test_unique_name_skips_record_being_updated(self):
        ensure_unique_name(Department.objects.all(), 'it', 'taken', exclude_id=self.it.pk)

    def test_no_dependents(self):
        ensure_no_dependents(0, 'blocked')
        with self.assertRaises(ConflictError) as ctx:
            ensure_no_dependents(3, 'blocked')
        self.assertEqual(ctx.exception.count, 3)

    def test_pluralize(self):
        self.assertEqual(pluralize(1, 'policy', 'policies'), 'policy')
        self.assertEqual(pluralize(2, 'policy', 'policies'), 'policies')

    def test_find_by_id_treats_malformed_and_missing_the_same(self):
        self.assertEqual(find_by_id(Department, str(self.hr.pk), 'Department'), self.hr)
        for bad in ('123', uuid.uuid4()):
            with self.assertRaises(NotFoundError) as ctx:
                find_by_id(Department, bad, 'Department')
            self.assertEqual(ctx.exception.message, 'Department Not Found')

    def test_find_one_and_count(self):
        self.assertEqual(find_one(Department, name='IT'), self.it)
        self.assertIsNone(find_one(Department, name='Legal'))
        self.assertEqual(count(Department), 2)

    def test_search_page(self):
        for index in range(3):
            Department.objects.create(name=f'Ops {index}', position_count='1')
        items, pagination = search_page(
            Department.objects.all(), {'search': 'ops', 'page': '1', 'limit': '2'}, 'departments'
        )
        self.assertEqual(len(items), 2)
        self.assertEqual(
            pagination, {'currentPage': 1, 'totalPages': 2, 'totalDepartments': 3, 'limit': 2}
        )

    def test_search_page_falls_back_on_bad_params(self):
        _, pagination = search_page(Department.objects.all(), {'page': 'x', 'limit': '-4'}, 'departments')
        self.assertEqual(pagination['currentPage'], 1)
        self.assertEqual(pagination['limit'], 10)


class MigrationStateTests(TestCase):
    def test_models_have_no_pending_migrations(self):
        output = StringIO()
        try:
            call_command('makemigrations', '--check', '--dry-run', stdout=output)
        except SystemExit:
            self.fail(f'Models and migrations differ:\n{output.getvalue()}')


class AuthEndpointTests(APITestCase):
    def setUp(self):
        cache.clear()
        self.admin = User.objects.create_user(
            username='admin', password=STRONG_PASSWORD, name='Admin', role=User.ROLE_ADMIN
        )

    def test_register_employee(self):
        response = self.client.post(
            reverse('accounts:register'),
            {'name': 'Jane Doe', 'username': 'jane', 'password': STRONG_PASSWORD, 'role': 'employee'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['user']['role'], 'employee')
        self.assertIn('access', response.data['data']['tokens'])

    def test_register_rejects_duplicate_username(self):
        response = self.client.post(
            reverse('accounts:register'),
            {'name': 'Other', 'username': 'ADMIN', 'password': STRONG_PASSWORD, 'role': 'employee'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('username', response.data['errors'])

    def test_only_admin_can_register_elevated_roles(self):
        payload = {'name': 'Sup', 'username': 'sup', 'password': STRONG_PASSWORD, 'role': 'supervisor'}
        response = self.client.post(reverse('accounts:register'), payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        self.client.force_authenticate(user=self.admin)
        response = self.client.post(reverse('accounts:register'), payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_login(self):
        response = self.client.post(
            reverse('accounts:login'), {'username': 'admin', 'password': STRONG_PASSWORD}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['user']['username'], 'admin')

    def test_login_with_wrong_password(self):
        response = self.client.post(
            reverse('accounts:login'), {'username': 'admin', 'password': 'nope'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data['success'])

    def test_profile_requires_authentication(self):
        response = self.client.get(reverse('accounts:user-profile'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data['success'])

        self.client.force_authenticate(user=self.admin)
        response = self.client.get(reverse('accounts:user-profile'))
        self.assertEqual(response.data['data']['name'], 'Admin')

    def test_rule_errors_render_kind_and_field(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/api/departments/', {'name': 'HR'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'ValidationError')
        self.assertEqual(response.data['message'], 'Department name and position count are required')
        self.assertEqual(response.data['errors'][0]['field'], 'positionCount')
