"""
Admissions Models

Database schema for admission applications.
"""
import uuid
from django.db import models
from django.core.validators import EmailValidator
from django.utils import timezone
from phonenumber_field.modelfields import PhoneNumberField


class Application(models.Model):
    """
    An admission application submitted from the college website.
    """

    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('under_review', 'Under Review'),
        ('accepted', 'Accepted'),
        ('rejected', 'Rejected'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    # Applicant
    full_name = models.CharField(
        max_length=150,
        help_text="Applicant's full name"
    )

    email = models.EmailField(
        max_length=255,
        validators=[EmailValidator()],
        help_text="Applicant's email address"
    )

    phone = PhoneNumberField(
        help_text="Applicant's contact number"
    )

    date_of_birth = models.DateField(
        null=True,
        blank=True
    )

    address = models.TextField(
        blank=True,
        default=''
    )

    # Programme
    course = models.CharField(
        max_length=150,
        db_index=True,
        help_text="Course or programme applied for"
    )

    qualification = models.CharField(
        max_length=255,
        help_text="Highest qualification held"
    )

    message = models.TextField(
        blank=True,
        default='',
        help_text="Anything else the applicant wants to tell us"
    )

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='pending',
        db_index=True
    )

    submitted_at = models.DateTimeField(
        default=timezone.now,
        db_index=True
    )

    updated_at = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        db_table = 'admission_applications'
        ordering = ['-submitted_at']
        verbose_name = 'Application'
        verbose_name_plural = 'Applications'
        indexes = [
            models.Index(fields=['status', 'submitted_at'], name='admission_status_sub_idx'),
            models.Index(fields=['email'], name='admission_email_idx'),
        ]

    def __str__(self):
        return f"{self.full_name} - {self.course} ({self.status})"

    @property
    def reference_id(self):
        """Readable reference quoted back to the applicant."""
        return f"APP-{str(self.id)[:8].upper()}"
