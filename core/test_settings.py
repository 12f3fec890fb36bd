"""
Settings used by the test suite.

Runs against a file-backed SQLite database so that threads in the
concurrency tests share one database. Requires SQLite 3.35+ for the
counter upsert.
"""
import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')

from core.settings import *  # noqa: E402,F401,F403

DEBUG = False
SECURE_SSL_REDIRECT = False
ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': str(BASE_DIR / 'test_db.sqlite3'),
        'OPTIONS': {
            'timeout': 20,
        },
        'TEST': {
            'NAME': str(BASE_DIR / 'test_db_pytest.sqlite3'),
        },
    }
}

# Fast hashing for tests; PBKDF2 is exercised explicitly where it matters
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
]

CELERY_TASK_ALWAYS_EAGER = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
DEFAULT_FROM_EMAIL = 'website@college.example.com'
COLLEGE_EMAIL_RECEIVER = 'admissions@college.example.com'

CORS_ALLOWED_ORIGINS = [
    'https://college.example.com',
    'http://localhost:3000/',
]
CORS_ALLOW_CREDENTIALS = True
CORS_PREFLIGHT_MAX_AGE = 600

VISIT_COUNTER_KEY = 'site_visits'
ADMIN_PASSWORD_HASH = ''

# Let caplog see the CORS decision log
LOGGING['loggers']['core.cors']['propagate'] = True
