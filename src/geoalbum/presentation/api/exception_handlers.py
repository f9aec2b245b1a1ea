"""Centralized exception handlers for the FastAPI application.

Use cases return errors inside ``Err``; routers call ``unwrap()``, which
raises the carried exception, and the handlers below turn it into a
response with a consistent format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from geoalbum.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RepositoryError,
    UnauthorizedError,
    ValidationError,
)
from geoalbum_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    OAuthError,
    TokenError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.COORDINATE_OUT_OF_BOUNDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_URL_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ENTITY_VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    # 403 Forbidden - ownership violations
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALBUM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 500 Internal Server Error
    ErrorCode.REPOSITORY_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, UnauthorizedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, RepositoryError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    return status.HTTP_400_BAD_REQUEST


def _get_status_for_auth_error(exc: AuthError) -> int:
    if isinstance(exc, InvalidTokenError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, OAuthError):
        return status.HTTP_502_BAD_GATEWAY
    if isinstance(exc, TokenError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_401_UNAUTHORIZED


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Repository failures keep their cause in ``details``; it is logged
        but never sent to the client.
        """
        status_code = _get_status_for_exception(exc)

        log = logger.error if status_code >= 500 else logger.warning
        log(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        status_code = _get_status_for_auth_error(exc)
        logger.warning(
            "Auth error on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code,
            exc.details,
        )

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code,
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all so clients always receive the same error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An unexpected error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
