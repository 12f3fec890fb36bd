"""
Management command to generate the ADMIN_PASSWORD_HASH value.

Usage:
    python manage.py hash_admin_password
    python manage.py hash_admin_password --password 's3cret'
"""
from getpass import getpass

from django.core.management.base import BaseCommand, CommandError

from accounts.hashers import PasswordHasher


class Command(BaseCommand):
    help = 'Print a password hash to use as ADMIN_PASSWORD_HASH'

    def add_arguments(self, parser):
        parser.add_argument(
            '--password',
            type=str,
            help='Password to hash (prompted for when omitted)',
        )

    def handle(self, *args, **options):
        password = options.get('password')
        if not password:
            password = getpass('Admin password: ')
            if password != getpass('Confirm password: '):
                raise CommandError('Passwords do not match.')

        if not password:
            raise CommandError('Password must not be empty.')

        digest = PasswordHasher().hash(password)
        self.stdout.write(self.style.SUCCESS('Add this to your environment:'))
        self.stdout.write(f"ADMIN_PASSWORD_HASH='{digest}'")
