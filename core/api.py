"""
Shared validation and response helpers for the public submission endpoints.
"""
from django.utils.html import strip_tags
from rest_framework import serializers, status
from rest_framework.response import Response

MISSING_FIELD_CODES = {'required', 'blank', 'null'}


def has_missing_fields(errors) -> bool:
    """True if any serializer error reports an absent or empty field."""
    for field_errors in errors.values():
        for error in field_errors:
            if getattr(error, 'code', None) in MISSING_FIELD_CODES:
                return True
    return False


def clean_required_text(value):
    """
    Strip markup from a required text field.

    A value that is only tags or whitespace is reported as blank, the same
    as an empty field.
    """
    cleaned = strip_tags(value).strip()
    if not cleaned:
        raise serializers.ValidationError('This field may not be blank.', code='blank')
    return cleaned


def validation_failed_response(serializer):
    """
    400 response for an invalid submission.

    Missing fields get the short "All fields are required." message that
    the website form shows as-is; anything else is reported per field.
    """
    errors = serializer.errors
    message = 'All fields are required.' if has_missing_fields(errors) else 'Validation failed.'
    return Response(
        {
            'success': False,
            'message': message,
            'errors': errors,
        },
        status=status.HTTP_400_BAD_REQUEST
    )


def list_response(data):
    """Envelope for list endpoints."""
    return Response({
        'success': True,
        'count': len(data),
        'data': data,
    })


def not_found_response(message):
    return Response(
        {'success': False, 'message': message},
        status=status.HTTP_404_NOT_FOUND
    )


def server_error_response(message):
    return Response(
        {'success': False, 'message': message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
