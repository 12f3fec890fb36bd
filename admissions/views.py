"""
Admissions Views

API endpoints for admission application submission and reading stored
applications.
"""
import logging

from django.db import DatabaseError
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, status, filters
from rest_framework.response import Response
from rest_framework.views import APIView

from core.api import (
    list_response,
    not_found_response,
    server_error_response,
    validation_failed_response,
)
from core.notifications import dispatch_notification
from .models import Application
from .serializers import ApplicationSubmitSerializer, ApplicationSerializer
from .tasks import send_application_notification

logger = logging.getLogger(__name__)


def submit_application(request):
    """Validate, store and announce one application."""
    serializer = ApplicationSubmitSerializer(data=request.data)

    if not serializer.is_valid():
        logger.info(f"Application validation failed: {sorted(serializer.errors)}")
        return validation_failed_response(serializer)

    try:
        application = serializer.save()
    except DatabaseError:
        logger.error("Error storing application", exc_info=True)
        return server_error_response('Failed to store application. Please try again later.')

    logger.info(f"Application saved: {application.id} for course {application.course!r}")
    dispatch_notification(send_application_notification, application.id)

    return Response(
        {
            'success': True,
            'message': 'Application received successfully! We will contact you soon.',
            'applicationId': str(application.id),
            'referenceId': application.reference_id,
        },
        status=status.HTTP_201_CREATED
    )


class ApplicationSubmitView(APIView):
    """
    Public endpoint for admission applications.

    POST /api/submit-application
    """

    def post(self, request):
        """Submit an application."""
        return submit_application(request)


class ApplicationListView(generics.ListCreateAPIView):
    """
    List stored applications, newest first, or submit a new one.

    GET  /api/applications
    POST /api/applications

    Query Parameters:
    - course: Filter by course
    - status: Filter by status (pending, under_review, accepted, rejected)
    - search: Search in name, email, course or qualification
    - ordering: e.g. submitted_at or -submitted_at (default)
    """

    queryset = Application.objects.all()
    serializer_class = ApplicationSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['course', 'status']
    search_fields = ['full_name', 'email', 'course', 'qualification']
    ordering_fields = ['submitted_at', 'status']
    ordering = ['-submitted_at']

    def list(self, request, *args, **kwargs):
        try:
            applications = list(self.filter_queryset(self.get_queryset()))
        except DatabaseError:
            logger.error("Error fetching applications", exc_info=True)
            return server_error_response('Failed to fetch applications.')

        return list_response(self.get_serializer(applications, many=True).data)

    def create(self, request, *args, **kwargs):
        return submit_application(request)


class ApplicationDetailView(APIView):
    """
    Read a single application.

    GET /api/applications/:id
    """

    def get(self, request, id):
        try:
            application = Application.objects.get(id=id)
        except Application.DoesNotExist:
            return not_found_response('Application not found.')
        except DatabaseError:
            logger.error(f"Error fetching application {id}", exc_info=True)
            return server_error_response('Failed to fetch application.')

        return Response({'success': True, 'data': ApplicationSerializer(application).data})
