"""
Contact Enquiry Views

API endpoints for contact form submission and reading stored enquiries.
"""
import logging

from django.db import DatabaseError
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
from .models import Enquiry
from .serializers import EnquirySubmitSerializer, EnquirySerializer
from .tasks import send_enquiry_notification

logger = logging.getLogger(__name__)


class EnquirySubmitView(APIView):
    """
    Public endpoint for contact form submissions.

    POST /api/send-enquiry
    """

    def post(self, request):
        """Submit an enquiry."""
        serializer = EnquirySubmitSerializer(data=request.data)

        if not serializer.is_valid():
            logger.info(f"Enquiry validation failed: {sorted(serializer.errors)}")
            return validation_failed_response(serializer)

        try:
            enquiry = serializer.save()
        except DatabaseError:
            logger.error("Error storing enquiry", exc_info=True)
            return server_error_response('Failed to store enquiry. Please try again later.')

        logger.info(f"Enquiry saved: {enquiry.id}")
        dispatch_notification(send_enquiry_notification, enquiry.id)

        return Response(
            {
                'success': True,
                'message': 'Enquiry received and stored successfully! Notification email attempted.',
                'enquiryId': str(enquiry.id),
                'referenceId': enquiry.reference_id,
            },
            status=status.HTTP_201_CREATED
        )


class EnquiryListView(generics.ListAPIView):
    """
    List stored enquiries, newest first.

    GET /api/enquiries

    Query Parameters:
    - search: Search in name, email, subject or message
    - ordering: e.g. submitted_at or -submitted_at (default)
    """

    queryset = Enquiry.objects.all()
    serializer_class = EnquirySerializer
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'email', 'subject', 'message']
    ordering_fields = ['submitted_at']
    ordering = ['-submitted_at']

    def list(self, request, *args, **kwargs):
        try:
            enquiries = list(self.filter_queryset(self.get_queryset()))
        except DatabaseError:
            logger.error("Error fetching enquiries", exc_info=True)
            return server_error_response('Failed to fetch enquiries.')

        return list_response(self.get_serializer(enquiries, many=True).data)


class EnquiryDetailView(APIView):
    """
    Read a single enquiry.

    GET /api/enquiries/:id
    """

    def get(self, request, id):
        try:
            enquiry = Enquiry.objects.get(id=id)
        except Enquiry.DoesNotExist:
            return not_found_response('Enquiry not found.')
        except DatabaseError:
            logger.error(f"Error fetching enquiry {id}", exc_info=True)
            return server_error_response('Failed to fetch enquiry.')

        return Response({'success': True, 'data': EnquirySerializer(enquiry).data})
