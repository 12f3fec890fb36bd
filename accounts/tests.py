"""
Tests for the admin password login check
"""
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework import status

from accounts.hashers import PasswordHasher


@pytest.fixture
def admin_password(settings):
    settings.ADMIN_PASSWORD_HASH = PasswordHasher().hash('correct horse battery staple')
    return 'correct horse battery staple'


class TestPasswordHasher:

    def test_verify_round_trip(self):
        hasher = PasswordHasher()
        digest = hasher.hash('s3cret')

        assert digest != 's3cret'
        assert hasher.verify('s3cret', digest) is True
        assert hasher.verify('wrong', digest) is False

    def test_pbkdf2_digest(self):
        digest = PasswordHasher('pbkdf2_sha256').hash('s3cret')

        assert digest.startswith('pbkdf2_sha256$')
        assert PasswordHasher().verify('s3cret', digest) is True

    def test_empty_inputs_never_verify(self):
        hasher = PasswordHasher()
        assert hasher.verify('', hasher.hash('')) is False
        assert hasher.verify('s3cret', '') is False


class TestAdminLogin:

    def test_login_success(self, api_client, admin_password):
        response = api_client.post('/api/admin/login', {'password': admin_password}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'message': 'Login successful.'}

    def test_wrong_password(self, api_client, admin_password):
        response = api_client.post('/api/admin/login', {'password': 'letmein'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'success': False, 'message': 'Invalid password.'}

    def test_password_is_not_trimmed(self, api_client, admin_password):
        response = api_client.post('/api/admin/login', {'password': f' {admin_password} '}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_missing_password(self, api_client, admin_password):
        response = api_client.post('/api/admin/login', {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'All fields are required.'

    def test_not_configured(self, api_client, settings):
        settings.ADMIN_PASSWORD_HASH = ''

        response = api_client.post('/api/admin/login', {'password': 'anything'}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'success': False, 'message': 'Admin login is not configured.'}


class TestHashAdminPasswordCommand:

    def test_prints_usable_hash(self):
        out = StringIO()
        call_command('hash_admin_password', '--password', 'open sesame', stdout=out)

        line = [l for l in out.getvalue().splitlines() if l.startswith('ADMIN_PASSWORD_HASH=')][0]
        digest = line.split('=', 1)[1].strip("'")
        assert PasswordHasher().verify('open sesame', digest) is True

    def test_mismatched_prompt(self, monkeypatch):
        answers = iter(['first', 'second'])
        monkeypatch.setattr(
            'accounts.management.commands.hash_admin_password.getpass',
            lambda prompt: next(answers)
        )

        with pytest.raises(CommandError):
            call_command('hash_admin_password', stdout=StringIO())
