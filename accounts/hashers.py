"""
Password hashing capability used by the admin login check.

Wraps Django's configured PASSWORD_HASHERS (PBKDF2 by default) behind a
two-method interface so views never touch hashing details.
"""
from django.contrib.auth.hashers import check_password, make_password


class PasswordHasher:
    """
    Usage:
        hasher = PasswordHasher()
        digest = hasher.hash('s3cret')
        hasher.verify('s3cret', digest)  # True
    """

    def __init__(self, algorithm: str = 'default'):
        self.algorithm = algorithm

    def hash(self, secret: str) -> str:
        """Encode secret with the configured (or given) algorithm."""
        return make_password(secret, hasher=self.algorithm)

    def verify(self, secret: str, digest: str) -> bool:
        """True if secret matches the encoded digest."""
        if not secret or not digest:
            return False
        return check_password(secret, digest)
