"""
Service-level endpoints: health check and API greeting.
"""
from rest_framework.decorators import api_view
from rest_framework.response import Response


@api_view(['GET'])
def health_check(request):
    """GET / - liveness probe for the load balancer."""
    return Response({'message': 'Backend API is healthy and running!'})


@api_view(['GET'])
def api_root(request):
    """GET /api"""
    return Response({'message': 'Hello from the college website backend API!'})
