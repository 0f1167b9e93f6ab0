"""
Caller authentication.

The middleware verifies a signed caller identity once per request and
binds it to a context variable; the authenticator compares that bound
identity with the user an operation acts for.
"""

import contextlib
import contextvars
import hashlib
import hmac
import logging
from typing import Iterator, Optional

from core.domain.exceptions import UnauthorizedError
from core.ports.caller_authenticator import CallerAuthenticator

logger = logging.getLogger(__name__)

# Context variable for the verified caller identity
caller_context: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "caller_identity", default=None
)


def get_current_caller() -> Optional[str]:
    """
    Get the verified caller identity from context.

    Returns:
        Caller identity or None if the request carried no valid signature
    """
    return caller_context.get()


@contextlib.contextmanager
def authenticated_caller(identity: Optional[str]) -> Iterator[None]:
    """
    Bind a caller identity for the duration of a block.

    Usage:
        with authenticated_caller("alice"):
            engine.issue_tokens("alice", 1, 100)
    """
    token = caller_context.set(identity)
    try:
        yield
    finally:
        caller_context.reset(token)


class CallerSignature:
    """HMAC-SHA256 signatures over caller id, timestamp and request body."""

    @staticmethod
    def generate(secret: str, caller_id: str, timestamp: str, body: bytes) -> str:
        """
        Generate a caller signature.

        Args:
            secret: Shared signing secret
            caller_id: Caller identity
            timestamp: Unix timestamp (seconds) as sent in the header
            body: Raw request body

        Returns:
            Hex-encoded signature
        """
        message = f"{timestamp}.{caller_id}.".encode() + body
        return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()

    @staticmethod
    def verify(secret: str, caller_id: str, timestamp: str, body: bytes, signature: str) -> bool:
        """
        Verify a caller signature.

        Args:
            secret: Shared signing secret
            caller_id: Caller identity
            timestamp: Unix timestamp (seconds) as sent in the header
            body: Raw request body
            signature: Signature to verify

        Returns:
            True if signature is valid
        """
        expected = CallerSignature.generate(secret, caller_id, timestamp, body)
        return hmac.compare_digest(expected.encode(), signature.encode())


class ContextCallerAuthenticator(CallerAuthenticator):
    """Authorizes against the caller bound by CallerSignatureMiddleware."""

    def require_authorized(self, identity: str) -> None:
        """
        Require that the bound caller is ``identity``.

        Args:
            identity: User identity the operation acts for

        Raises:
            UnauthorizedError: If no caller is bound or it differs
        """
        caller = get_current_caller()
        if caller is None:
            raise UnauthorizedError("Missing authenticated caller")
        if caller != identity:
            logger.warning("Caller %s attempted to act for %s", caller, identity)
            raise UnauthorizedError(f"Caller is not authorized to act for {identity}")
