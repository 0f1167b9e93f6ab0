"""
Caller authentication middleware.

This middleware verifies signed caller identity headers on API
requests and binds the verified identity for the rest of the request.
"""

import logging
import time
from typing import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.domain.value_objects import UserIdentity
from core.infrastructure.authentication import CallerSignature, caller_context

logger = logging.getLogger(__name__)

CALLER_ID_HEADER = "X-Caller-Id"
CALLER_TIMESTAMP_HEADER = "X-Caller-Timestamp"
CALLER_SIGNATURE_HEADER = "X-Caller-Signature"


class CallerSignatureMiddleware:
    """
    Middleware for caller authentication.

    This middleware:
    1. Ignores requests outside /api/v1/ and requests without a caller id
    2. Verifies timestamp freshness and the HMAC signature
    3. Returns 401 Unauthorized if verification fails
    4. Binds the caller identity for the duration of the request

    Requests without caller headers pass through unauthenticated;
    operations that act for a user reject them later.
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and bind the caller identity.

        Args:
            request: HTTP request

        Returns:
            HTTP response
        """
        caller_id = None
        if request.path.startswith("/api/v1/") and request.headers.get(CALLER_ID_HEADER):
            caller_id, error = self._authenticate(request)
            if error:
                return error

        request.caller_identity = caller_id  # type: ignore
        token = caller_context.set(caller_id)
        try:
            return self.get_response(request)
        finally:
            caller_context.reset(token)

    def _authenticate(self, request: HttpRequest):
        """
        Verify the caller headers.

        Args:
            request: HTTP request

        Returns:
            Tuple of (caller_id, None) on success or (None, 401 response)
        """
        caller_id = request.headers.get(CALLER_ID_HEADER, "")
        timestamp = request.headers.get(CALLER_TIMESTAMP_HEADER, "")
        signature = request.headers.get(CALLER_SIGNATURE_HEADER, "")

        try:
            UserIdentity(caller_id)
        except ValueError:
            return None, self._unauthorized("Invalid caller identity")

        if not signature or not timestamp:
            return None, self._unauthorized(
                f"Missing caller signature. Provide {CALLER_TIMESTAMP_HEADER} "
                f"and {CALLER_SIGNATURE_HEADER} headers."
            )

        if not self._timestamp_is_fresh(timestamp):
            logger.warning("Stale caller signature for %s", caller_id)
            return None, self._unauthorized("Caller signature expired")

        config = settings.CALLER_AUTH
        if not CallerSignature.verify(
            config["SIGNING_SECRET"], caller_id, timestamp, request.body, signature
        ):
            logger.warning("Invalid caller signature attempted for %s", caller_id)
            return None, self._unauthorized("Invalid caller signature")

        return caller_id, None

    def _timestamp_is_fresh(self, timestamp: str) -> bool:
        """Check the signed timestamp against the configured tolerance."""
        try:
            signed_at = int(timestamp)
        except ValueError:
            return False
        tolerance = settings.CALLER_AUTH.get("TIMESTAMP_TOLERANCE_SECONDS", 300)
        return abs(time.time() - signed_at) <= tolerance

    def _unauthorized(self, message: str) -> JsonResponse:
        return JsonResponse(
            {"error": {"code": "UNAUTHORIZED", "message": message}},
            status=401,
        )
