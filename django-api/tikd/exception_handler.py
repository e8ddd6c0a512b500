"""Maps exceptions raised by views and services to JSON error responses.

Every error body has the shape ``{"error": <message>, "code": <CODE>}``.
Unexpected exceptions are logged and answered with a generic message.
"""

import structlog
from rest_framework import exceptions, status
from rest_framework.response import Response

from tikd.errors import DomainError, ErrorCode

logger = structlog.get_logger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.EMPTY_CART: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MIXED_CURRENCY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_TYPE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PRICE_DRIFT: status.HTTP_409_CONFLICT,
    ErrorCode.PAYMENT_PROVIDER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(code: ErrorCode, message: str, **extra) -> Response:
    body = {"error": message, "code": code.value, **extra}
    return Response(body, status=STATUS_BY_CODE[code])


def api_exception_handler(exc: Exception, context: dict) -> Response:
    """DRF ``EXCEPTION_HANDLER`` entry point."""
    if isinstance(exc, DomainError):
        return error_response(exc.code, exc.message)

    # DRF downgrades NotAuthenticated to 403 when no auth header is
    # available; the API contract wants 401 for a missing identity.
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return error_response(ErrorCode.UNAUTHORIZED, "Unauthorized")
    if isinstance(exc, exceptions.PermissionDenied):
        return error_response(ErrorCode.FORBIDDEN, "Forbidden")
    if isinstance(exc, exceptions.NotFound):
        return error_response(ErrorCode.NOT_FOUND, "Not found")
    if isinstance(exc, (exceptions.ParseError, exceptions.ValidationError)):
        return error_response(ErrorCode.VALIDATION_ERROR, "Invalid request body")
    if isinstance(exc, exceptions.APIException):
        return Response(
            {"error": str(exc.detail), "code": exc.default_code.upper()},
            status=exc.status_code,
        )

    view = context.get("view")
    logger.exception(
        "unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
    )
    return error_response(ErrorCode.INTERNAL, "Internal server error")
