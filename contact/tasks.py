"""
Contact Enquiry Email Tasks

Celery task for notifying the college mailbox about new enquiries.
"""
from celery import shared_task
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils import timezone

from core.notifications import notification_recipient, notification_sender
from .models import Enquiry


@shared_task(bind=True, max_retries=3)
def send_enquiry_notification(self, enquiry_id):
    """
    Send notification email to the college about a new enquiry.

    Replies go straight to the enquirer.

    Args:
        enquiry_id: UUID of the Enquiry
    """
    try:
        enquiry = Enquiry.objects.get(id=enquiry_id)
    except Enquiry.DoesNotExist:
        return f"Enquiry {enquiry_id} not found"

    recipient = notification_recipient()
    if not recipient:
        return f"Notification skipped for {enquiry.reference_id}: no receiver configured"

    submitted_at = timezone.localtime(enquiry.submitted_at)
    context = {
        'enquiry': enquiry,
        'submitted_at': submitted_at,
    }

    text_content = f"""You have received a new inquiry from the college website:

Name: {enquiry.name}
Email: {enquiry.email}
Subject: {enquiry.subject}

Message:
{enquiry.message}

---
Enquiry ID: {enquiry.id}
Submitted At: {submitted_at.strftime('%d/%m/%Y, %I:%M:%S %p')}
"""
    html_content = render_to_string('contact/emails/enquiry_notification.html', context)

    email = EmailMultiAlternatives(
        subject=f"New Website Inquiry: {enquiry.subject}",
        body=text_content,
        from_email=notification_sender(),
        to=[recipient],
        reply_to=[enquiry.email]
    )
    email.attach_alternative(html_content, "text/html")

    try:
        email.send(fail_silently=False)
    except Exception as exc:
        # Retry on failure
        raise self.retry(exc=exc, countdown=60)

    return f"Enquiry notification sent for {enquiry.reference_id}"
