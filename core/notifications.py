"""
Notification dispatch for new website submissions.

Notifications are optional: without COLLEGE_EMAIL_RECEIVER nothing is
queued. Queueing problems are logged and never fail the submission that
triggered them.
"""
import logging

from django.conf import settings
from kombu.exceptions import OperationalError

logger = logging.getLogger(__name__)


def notification_recipient():
    """Mailbox for submission notifications, or None when disabled."""
    return getattr(settings, 'COLLEGE_EMAIL_RECEIVER', '') or None


def notification_sender():
    """From header, e.g. '"Website Inquiry" <college@example.com>'."""
    name = getattr(settings, 'NOTIFICATION_FROM_NAME', 'Website Inquiry')
    return f'"{name}" <{settings.DEFAULT_FROM_EMAIL}>'


def dispatch_notification(task, object_id) -> bool:
    """
    Queue a notification task for a saved submission.

    Args:
        task: Celery task taking the submission id
        object_id: Primary key of the saved submission

    Returns:
        True if the task was queued, False if skipped or queueing failed
    """
    if not notification_recipient():
        logger.warning(
            f"Notification not sent for {object_id}: COLLEGE_EMAIL_RECEIVER is not configured"
        )
        return False

    try:
        task.delay(str(object_id))
    except OperationalError:
        logger.error(f"Could not queue {task.name} for {object_id}", exc_info=True)
        return False

    return True
