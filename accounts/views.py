"""
Accounts Views

POST /api/admin/login  compare a submitted password against ADMIN_PASSWORD_HASH
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.api import server_error_response, validation_failed_response
from .hashers import PasswordHasher
from .serializers import AdminLoginSerializer

logger = logging.getLogger(__name__)


class AdminLoginView(APIView):
    """
    Password check for the website's admin area.

    Returns a plain success payload; no session or token is created.
    """

    def post(self, request):
        serializer = AdminLoginSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_failed_response(serializer)

        digest = getattr(settings, 'ADMIN_PASSWORD_HASH', '')
        if not digest:
            logger.error("Admin login attempted but ADMIN_PASSWORD_HASH is not configured")
            return server_error_response('Admin login is not configured.')

        if not PasswordHasher().verify(serializer.validated_data['password'], digest):
            logger.warning("Admin login failed: invalid password")
            return Response(
                {'success': False, 'message': 'Invalid password.'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        logger.info("Admin login succeeded")
        return Response({'success': True, 'message': 'Login successful.'})
