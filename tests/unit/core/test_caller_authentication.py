"""
Unit tests for caller signatures and the context authenticator.
"""
import pytest

from core.domain.exceptions import UnauthorizedError
from core.infrastructure.authentication import (
    CallerSignature,
    ContextCallerAuthenticator,
    authenticated_caller,
    get_current_caller,
)


class TestCallerSignature:
    """Tests for CallerSignature."""

    def test_generate_is_deterministic(self):
        """Test the same inputs produce the same signature."""
        first = CallerSignature.generate("secret", "alice", "1700000000", b"{}")
        second = CallerSignature.generate("secret", "alice", "1700000000", b"{}")
        assert first == second
        assert len(first) == 64

    def test_verify_valid(self):
        """Test a generated signature verifies."""
        signature = CallerSignature.generate("secret", "alice", "1700000000", b'{"a": 1}')
        assert CallerSignature.verify("secret", "alice", "1700000000", b'{"a": 1}', signature)

    @pytest.mark.parametrize(
        "secret,caller_id,timestamp,body",
        [
            ("other", "alice", "1700000000", b"{}"),
            ("secret", "bob", "1700000000", b"{}"),
            ("secret", "alice", "1700000001", b"{}"),
            ("secret", "alice", "1700000000", b'{"amount": 1}'),
        ],
    )
    def test_verify_rejects_any_change(self, secret, caller_id, timestamp, body):
        """Test changing any signed component invalidates the signature."""
        signature = CallerSignature.generate("secret", "alice", "1700000000", b"{}")
        assert not CallerSignature.verify(secret, caller_id, timestamp, body, signature)


class TestContextCallerAuthenticator:
    """Tests for ContextCallerAuthenticator."""

    def test_no_caller_bound(self):
        """Test operations without a caller are rejected."""
        assert get_current_caller() is None
        with pytest.raises(UnauthorizedError, match="Missing authenticated caller"):
            ContextCallerAuthenticator().require_authorized("alice")

    def test_matching_caller(self):
        """Test the bound caller is authorized for itself."""
        with authenticated_caller("alice"):
            ContextCallerAuthenticator().require_authorized("alice")

    def test_different_caller(self):
        """Test a caller cannot act for another user."""
        with authenticated_caller("mallory"):
            with pytest.raises(UnauthorizedError) as exc_info:
                ContextCallerAuthenticator().require_authorized("alice")
        assert exc_info.value.code == "UNAUTHORIZED"

    def test_context_reset_after_block(self):
        """Test the caller binding ends with the block."""
        with authenticated_caller("alice"):
            assert get_current_caller() == "alice"
        assert get_current_caller() is None
