"""
Admissions Serializers
"""
from rest_framework import serializers
from django.utils.html import strip_tags
from phonenumber_field.serializerfields import PhoneNumberField

from core.api import clean_required_text
from .models import Application


class ApplicationSubmitSerializer(serializers.ModelSerializer):
    """
    Public admission application serializer.

    full_name, email, phone, course and qualification are required;
    the rest may be left out. Status is never accepted from the public.
    """

    phone = PhoneNumberField()

    class Meta:
        model = Application
        fields = [
            'full_name', 'email', 'phone', 'date_of_birth', 'address',
            'course', 'qualification', 'message'
        ]

    def validate_full_name(self, value):
        return clean_required_text(value)

    def validate_email(self, value):
        return value.lower()

    def validate_message(self, value):
        return strip_tags(value).strip()


class ApplicationSerializer(serializers.ModelSerializer):
    """
    Read serializer for stored applications.
    """

    referenceId = serializers.ReadOnlyField(source='reference_id')
    phone = serializers.CharField(read_only=True)
    statusDisplay = serializers.CharField(source='get_status_display', read_only=True)
    submittedAt = serializers.DateTimeField(source='submitted_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Application
        fields = [
            'id', 'referenceId', 'full_name', 'email', 'phone', 'date_of_birth',
            'address', 'course', 'qualification', 'message', 'status',
            'statusDisplay', 'submittedAt', 'updatedAt'
        ]
        read_only_fields = fields
