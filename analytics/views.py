"""
Site Analytics Views

GET  /api/analytics/visits       current visit count
POST /api/analytics/track-visit  record one visit
"""
from django.conf import settings
from rest_framework.response import Response
from rest_framework.views import APIView

from core.api import server_error_response
from .counters import CounterStoreUnavailable, VisitCounterStore


def _visit_counter_key():
    return getattr(settings, 'VISIT_COUNTER_KEY', 'site_visits')


class VisitCountView(APIView):
    """
    Current site visit count.

    GET /api/analytics/visits
    """

    def get(self, request):
        try:
            count = VisitCounterStore().get_or_create(_visit_counter_key())
        except CounterStoreUnavailable:
            return server_error_response('Failed to fetch visit count.')

        return Response({'success': True, 'count': count})


class TrackVisitView(APIView):
    """
    Record one site visit and return the new total.

    POST /api/analytics/track-visit
    """

    def post(self, request):
        try:
            count = VisitCounterStore().increment(_visit_counter_key())
        except CounterStoreUnavailable:
            return server_error_response('Failed to track visit.')

        return Response({'success': True, 'count': count})
