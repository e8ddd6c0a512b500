"""Domain error codes shared by every app."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL = "INTERNAL"

    EMPTY_CART = "EMPTY_CART"
    MIXED_CURRENCY = "MIXED_CURRENCY"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    PRICE_DRIFT = "PRICE_DRIFT"
    PAYMENT_PROVIDER_ERROR = "PAYMENT_PROVIDER_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a request is well-formed JSON but semantically invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class ForbiddenError(DomainError):
    """Raised when the caller is authenticated but not permitted."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class ConflictError(DomainError):
    """Raised on a uniqueness violation."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message)
