import getpass

from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model
from django.db import IntegrityError

User = get_user_model()


class Command(BaseCommand):
    help = 'Create an admin user whose records are approved on creation'

    def add_arguments(self, parser):
        parser.add_argument('--username', type=str, help='Admin username', required=True)
        parser.add_argument('--name', type=str, help='Display name', required=False)
        parser.add_argument('--password', type=str, help='Admin password', required=False)

    def handle(self, *args, **options):
        username = (options['username'] or '').strip()
        password = options.get('password')

        if not username:
            raise CommandError('Username is required')

        if User.objects.filter(username__iexact=username).exists():
            raise CommandError(f'User {username} already exists')

        if not password:
            password = getpass.getpass('Enter password: ')
            confirm_password = getpass.getpass('Confirm password: ')

            if password != confirm_password:
                raise CommandError('Passwords do not match')

        try:
            user = User.objects.create_superuser(
                username=username,
                password=password,
                name=options.get('name') or username,
            )
        except IntegrityError as e:
            raise CommandError(f'Error creating user: {e}') from e

        self.stdout.write(self.style.SUCCESS(f'Successfully created admin: {user.username}'))
        self.stdout.write(f'  - Role: {user.role}')
        self.stdout.write(f'  - Is Superuser: {user.is_superuser}')
