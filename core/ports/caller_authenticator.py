"""
Caller authentication port (interface).
"""

from abc import ABC, abstractmethod


class CallerAuthenticator(ABC):
    """Confirms that the current invocation is attributable to an identity."""

    @abstractmethod
    def require_authorized(self, identity: str) -> None:
        """
        Require that the current call was made by ``identity``.

        Args:
            identity: User identity the operation acts for

        Raises:
            UnauthorizedError: If the caller is not ``identity``
        """
        pass
