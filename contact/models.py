"""
Contact Enquiry Models

Database schema for contact form submissions.
"""
import uuid
from django.db import models
from django.core.validators import EmailValidator
from django.utils import timezone


class Enquiry(models.Model):
    """
    A contact form submission from the college website.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    name = models.CharField(
        max_length=100,
        help_text="Name of the person making the enquiry"
    )

    email = models.EmailField(
        max_length=255,
        validators=[EmailValidator()],
        help_text="Email address for follow-up"
    )

    subject = models.CharField(
        max_length=200,
        help_text="Subject line entered on the form"
    )

    message = models.TextField(
        help_text="The enquiry text"
    )

    submitted_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="When the enquiry was submitted"
    )

    class Meta:
        db_table = 'contact_enquiries'
        ordering = ['-submitted_at']
        verbose_name = 'Enquiry'
        verbose_name_plural = 'Enquiries'
        indexes = [
            models.Index(fields=['email'], name='contact_enquiry_email_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.subject}"

    @property
    def reference_id(self):
        """Readable reference quoted back to the enquirer."""
        return f"ENQ-{str(self.id)[:8].upper()}"
