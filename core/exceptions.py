"""
Project-wide exceptions.
"""
from django.core.exceptions import ImproperlyConfigured


class InvalidConfiguration(ImproperlyConfigured):
    """Raised when deployment configuration cannot be used as given."""
    pass
