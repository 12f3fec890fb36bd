"""
Origin admission middleware.

Runs every request through the OriginAdmissionFilter before any view:
- OPTIONS (preflight) requests are answered here with an empty body and
  never reach a view: 204 with CORS headers when admitted, 403 without
  them when rejected.
- Other requests always reach the view; a rejected origin only loses the
  CORS headers, so the browser refuses to expose the response.
"""
from django.conf import settings
from django.http import HttpResponse
from django.utils.cache import patch_vary_headers

from core.cors import OriginAdmissionFilter


def build_origin_filter():
    """Build the filter from the CORS_* settings."""
    return OriginAdmissionFilter(
        allowed_origins=getattr(settings, 'CORS_ALLOWED_ORIGINS', []),
        allow_methods=getattr(settings, 'CORS_ALLOW_METHODS', ['GET', 'HEAD', 'POST', 'OPTIONS']),
        allow_headers=getattr(settings, 'CORS_ALLOW_HEADERS', ['Content-Type']),
        allow_credentials=getattr(settings, 'CORS_ALLOW_CREDENTIALS', False),
        max_age=getattr(settings, 'CORS_PREFLIGHT_MAX_AGE', 0),
    )


class OriginAdmissionMiddleware:
    """
    Attach CORS headers for admitted origins and terminate preflights.

    The allow-list is read once, when Django builds the middleware chain,
    so a malformed entry fails at start-up rather than on a request.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.origin_filter = build_origin_filter()

    def __call__(self, request):
        decision = self.origin_filter.evaluate(request.headers.get('Origin'))
        is_preflight = request.method == 'OPTIONS'

        if is_preflight:
            response = HttpResponse(status=204 if decision.allowed else 403)
        else:
            response = self.get_response(request)

        for header, value in self.origin_filter.allow_headers_for(decision, preflight=is_preflight).items():
            response[header] = value

        # Responses differ per Origin whenever an allow-list is in force
        patch_vary_headers(response, ['Origin'])
        return response
