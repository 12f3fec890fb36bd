"""
Admissions Email Tasks

Celery task for notifying the college mailbox about new applications.
"""
from celery import shared_task
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils import timezone

from core.notifications import notification_recipient, notification_sender
from .models import Application


@shared_task(bind=True, max_retries=3)
def send_application_notification(self, application_id):
    """
    Send notification email to the college about a new application.

    Args:
        application_id: UUID of the Application
    """
    try:
        application = Application.objects.get(id=application_id)
    except Application.DoesNotExist:
        return f"Application {application_id} not found"

    recipient = notification_recipient()
    if not recipient:
        return f"Notification skipped for {application.reference_id}: no receiver configured"

    submitted_at = timezone.localtime(application.submitted_at)
    html_content = render_to_string('admissions/emails/application_notification.html', {
        'application': application,
        'submitted_at': submitted_at,
    })

    text_content = f"""A new admission application has been submitted through the college website:

Name: {application.full_name}
Email: {application.email}
Phone: {application.phone}
Course: {application.course}
Qualification: {application.qualification}

{application.message}

---
Reference: {application.reference_id}
Submitted At: {submitted_at.strftime('%d/%m/%Y, %I:%M:%S %p')}
"""

    email = EmailMultiAlternatives(
        subject=f"New Admission Application: {application.full_name} - {application.course}",
        body=text_content,
        from_email=notification_sender(),
        to=[recipient],
        reply_to=[application.email]
    )
    email.attach_alternative(html_content, "text/html")

    try:
        email.send(fail_silently=False)
    except Exception as exc:
        raise self.retry(exc=exc, countdown=60)

    return f"Application notification sent for {application.reference_id}"
