"""
Origin Admission Filter

Decides whether a browser-declared request Origin may read our responses,
and which CORS headers to attach when it may.

Rules:
- A missing Origin (server-to-server calls, same-origin requests, health
  checks) is always admitted.
- A present Origin is normalized by stripping one trailing "/" and then
  compared by exact, case-sensitive string match against the configured
  allow-list, which is normalized the same way at construction.
- Wildcards and subdomain patterns are not supported.

The filter is stateless per request; the allow-list is injected once.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import urlsplit

from core.exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)


class OriginRejected(Exception):
    """Raised when a request Origin is not on the allow-list."""

    def __init__(self, origin: str):
        self.origin = origin
        super().__init__(f"Origin {origin} not allowed by CORS policy.")


@dataclass(frozen=True)
class OriginDecision:
    """Outcome of checking one request Origin."""

    allowed: bool
    reason: str
    origin: Optional[str] = None
    normalized: Optional[str] = None


def normalize_origin(origin: str) -> str:
    """Strip a single trailing slash from an origin string."""
    if origin.endswith('/'):
        return origin[:-1]
    return origin


def validate_allowed_origin(entry) -> str:
    """
    Normalize a configured allow-list entry, rejecting malformed ones.

    Returns:
        The normalized entry

    Raises:
        InvalidConfiguration: If the entry is empty or is not scheme://host[:port]
    """
    if not isinstance(entry, str) or not entry.strip():
        raise InvalidConfiguration(
            f"CORS_ALLOWED_ORIGINS contains an empty entry: {entry!r}"
        )

    normalized = normalize_origin(entry)
    parts = urlsplit(normalized)
    if (
        not parts.scheme
        or not parts.netloc
        or parts.path
        or parts.query
        or parts.fragment
        or entry != entry.strip()
    ):
        raise InvalidConfiguration(
            f"CORS_ALLOWED_ORIGINS entry {entry!r} is not an origin. "
            f"Expected scheme://host[:port], e.g. 'https://example.com'."
        )
    return normalized


class OriginAdmissionFilter:
    """
    Per-request origin decision plus the CORS headers that go with it.

    Usage:
        origin_filter = OriginAdmissionFilter(['https://example.com'])
        decision = origin_filter.evaluate(request.headers.get('Origin'))
        if decision.allowed:
            headers = origin_filter.allow_headers_for(decision)
    """

    def __init__(
        self,
        allowed_origins: Iterable[str],
        allow_methods: Iterable[str] = ('GET', 'HEAD', 'POST', 'OPTIONS'),
        allow_headers: Iterable[str] = ('Content-Type',),
        allow_credentials: bool = False,
        max_age: int = 0,
    ):
        # Kept as a list: duplicates and case variants are not coalesced
        self.allowed_origins = [validate_allowed_origin(entry) for entry in allowed_origins]
        self.allow_methods = ', '.join(allow_methods)
        self.allow_headers = ', '.join(allow_headers)
        self.allow_credentials = allow_credentials
        self.max_age = max_age

    def check(self, origin: Optional[str]) -> Optional[str]:
        """
        Admit or reject a request Origin.

        Args:
            origin: Value of the Origin header, or None when absent

        Returns:
            The normalized origin, or None when no Origin was sent

        Raises:
            OriginRejected: If the origin is not on the allow-list
        """
        if not origin:
            return None

        normalized = normalize_origin(origin)
        if normalized not in self.allowed_origins:
            raise OriginRejected(origin)
        return normalized

    def evaluate(self, origin: Optional[str]) -> OriginDecision:
        """Check an origin and log the outcome."""
        try:
            normalized = self.check(origin)
        except OriginRejected as exc:
            decision = OriginDecision(
                allowed=False,
                reason=str(exc),
                origin=origin,
                normalized=normalize_origin(origin),
            )
            logger.warning(
                f"CORS check: origin={decision.origin} normalized={decision.normalized} "
                f"allowed=False reason={decision.reason}"
            )
            return decision

        if normalized is None:
            decision = OriginDecision(allowed=True, reason='No Origin header')
        else:
            decision = OriginDecision(
                allowed=True,
                reason='Origin on allow-list',
                origin=origin,
                normalized=normalized,
            )
        logger.info(
            f"CORS check: origin={decision.origin} normalized={decision.normalized} "
            f"allowed=True reason={decision.reason}"
        )
        return decision

    def allow_headers_for(self, decision: OriginDecision, preflight: bool = False) -> dict:
        """
        Response headers granting access for an admitted request.

        Rejected decisions get no headers at all, so the browser blocks the
        response. Requests without an Origin get no Allow-Origin echo.
        """
        if not decision.allowed:
            return {}

        headers = {}
        if decision.origin:
            # Echo the origin exactly as the browser sent it
            headers['Access-Control-Allow-Origin'] = decision.origin
            if self.allow_credentials:
                headers['Access-Control-Allow-Credentials'] = 'true'

        headers['Access-Control-Allow-Methods'] = self.allow_methods
        headers['Access-Control-Allow-Headers'] = self.allow_headers
        if preflight and self.max_age:
            headers['Access-Control-Max-Age'] = str(self.max_age)

        return headers
