"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions. Every ledger exception
aborts the whole operation before any balance is written.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class UnauthorizedError(DomainException):
    """Raised when the caller is not the user the operation acts for."""

    def __init__(self, message: str = "Caller is not authorized for this user"):
        super().__init__(message, code="UNAUTHORIZED")


class LedgerException(DomainException):
    """Base exception for ledger rule violations."""

    pass


class InactiveBrandError(LedgerException):
    """Raised when a brand does not exist or is not active."""

    def __init__(self, message: str = "Brand is not active"):
        super().__init__(message, code="INACTIVE_BRAND")


class InvalidAmountError(LedgerException):
    """Raised when an amount is zero or negative."""

    def __init__(self, message: str = "Amount must be positive"):
        super().__init__(message, code="INVALID_AMOUNT")


class SameBrandExchangeError(LedgerException):
    """Raised when source and destination brand are identical."""

    def __init__(self, message: str = "Cannot exchange to the same brand"):
        super().__init__(message, code="SAME_BRAND_EXCHANGE")


class InsufficientBalanceError(LedgerException):
    """Raised when the source balance cannot cover an exchange."""

    def __init__(self, message: str = "Insufficient balance"):
        super().__init__(message, code="INSUFFICIENT_BALANCE")


class AmountOverflowError(LedgerException):
    """Raised when balance arithmetic leaves the signed 64-bit range."""

    def __init__(self, message: str = "Balance arithmetic overflow"):
        super().__init__(message, code="AMOUNT_OVERFLOW")
