"""
Error Taxonomy

Every failure a handler can produce is one of the exceptions below.
Handlers raise them; a single exception handler registered in main.py
converts them into HTTP responses using status_for().

Kind                 Status  Body
-------------------  ------  ------------------------------
ValidationError      400     {"message": ...}
AuthError            401     empty
NotFoundError        404     {"message": ...}
PayloadTooLargeError 413     {"message": ...}
StoreError           500     {"message": <generic>}
CatalogImportError   502     {"message": ...}

Keeping the mapping in one place stops status codes drifting between
handlers.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for all errors surfaced by the service."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An internal error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Malformed client input: bad offset, empty query, invalid body."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class AuthError(ServiceError):
    """Missing or incorrect bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized."


class NotFoundError(ServiceError):
    """The targeted book does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class PayloadTooLargeError(ServiceError):
    """Request body exceeds the configured size cap."""

    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    default_message = "Request body too large."


class StoreError(ServiceError):
    """
    Any database failure: connection loss, constraint violation, timeout.

    The original exception is kept on `cause` for server-side logging;
    the client only ever sees the generic message.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "A database error occurred. Please try again later."

    def __init__(self, message: str | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class CatalogImportError(ServiceError):
    """The outbound catalog request failed or returned an unexpected shape."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Import from the external catalog failed."


class DateParseError(ValueError):
    """
    An upstream publication date could not be parsed.

    Raised per record during import and caught by the import loop,
    which skips that record. Never reaches a handler.
    """


def status_for(exc: Exception) -> int:
    """Map an exception to the HTTP status code it should produce."""
    if isinstance(exc, ServiceError):
        return exc.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
