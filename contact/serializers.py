"""
Contact Enquiry Serializers
"""
from rest_framework import serializers
from core.api import clean_required_text
from .models import Enquiry


class EnquirySubmitSerializer(serializers.Serializer):
    """
    Public contact form submission serializer.

    Every field is required; surrounding whitespace is trimmed and the
    email address is stored lower-cased.
    """

    name = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=255)
    subject = serializers.CharField(max_length=200)
    message = serializers.CharField(max_length=5000)

    def validate_name(self, value):
        """Sanitize name field."""
        return clean_required_text(value)

    def validate_subject(self, value):
        return clean_required_text(value)

    def validate_email(self, value):
        return value.lower()

    def create(self, validated_data):
        return Enquiry.objects.create(**validated_data)


class EnquirySerializer(serializers.ModelSerializer):
    """
    Read serializer for stored enquiries.
    """

    referenceId = serializers.ReadOnlyField(source='reference_id')
    submittedAt = serializers.DateTimeField(source='submitted_at', read_only=True)

    class Meta:
        model = Enquiry
        fields = ['id', 'referenceId', 'name', 'email', 'subject', 'message', 'submittedAt']
        read_only_fields = fields
