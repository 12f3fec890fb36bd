import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ContactConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'contact'
    verbose_name = 'Contact Enquiries'

    def ready(self):
        """Report notification configuration once at start-up."""
        from django.conf import settings

        def status(value):
            return 'loaded' if value else 'NOT LOADED'

        logger.info(
            f"Email notifications: EMAIL_HOST_USER {status(settings.EMAIL_HOST_USER)}, "
            f"EMAIL_HOST_PASSWORD {status(settings.EMAIL_HOST_PASSWORD)}, "
            f"COLLEGE_EMAIL_RECEIVER {status(settings.COLLEGE_EMAIL_RECEIVER)}"
        )
