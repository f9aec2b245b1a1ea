"""Shared domain exceptions and error codes.

This module defines the error taxonomy for the whole domain layer. All domain
errors inherit from DomainException so the presentation layer can map them
centrally. Domain operations return these errors inside ``Err`` rather than
raising them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    COORDINATE_OUT_OF_BOUNDS = "COORDINATE_OUT_OF_BOUNDS"
    INVALID_URL_FORMAT = "INVALID_URL_FORMAT"
    INVALID_ID = "INVALID_ID"
    ENTITY_VALIDATION_ERROR = "ENTITY_VALIDATION_ERROR"

    # Authorization Errors (403)
    UNAUTHORIZED = "UNAUTHORIZED"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ALBUM_NOT_FOUND = "ALBUM_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Persistence Errors (500)
    REPOSITORY_ERROR = "REPOSITORY_ERROR"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def with_context(self, context: str) -> DomainException:
        """Attach the operation that surfaced this error and return self."""
        self.details.setdefault("context", context)
        return self

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation or an invariant check fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityValidationError(ValidationError):
    """An aggregate rejected a state change."""

    def __init__(self, entity_name: str, message: str) -> None:
        super().__init__(
            f"{entity_name} validation failed: {message}",
            ErrorCode.ENTITY_VALIDATION_ERROR,
            {"entity": entity_name},
        )


class InvalidIdError(ValidationError):
    """Identifier is not a valid UUID v4."""

    def __init__(self, kind: str, value: str) -> None:
        super().__init__(
            f"Invalid UUID format for {kind}: {value}",
            ErrorCode.INVALID_ID,
            {"kind": kind, "value": value},
        )


class UnauthorizedError(DomainException):
    """Authenticated, but not permitted (ownership mismatch)."""

    def __init__(
        self,
        message: str = "Unauthorized access",
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class RepositoryError(DomainException):
    """Persistence-layer failure; the original cause is kept in details."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        details = {"cause": repr(cause)} if cause is not None else None
        super().__init__(message, ErrorCode.REPOSITORY_ERROR, details)
        self.__cause__ = cause
