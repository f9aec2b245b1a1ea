"""Shared domain building blocks: results, errors, identifiers and time."""

from geoalbum.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    EntityValidationError,
    ErrorCode,
    InvalidIdError,
    RepositoryError,
    UnauthorizedError,
    ValidationError,
)
from geoalbum.domain.shared.result import Err, Ok, Result, err, ok
from geoalbum.domain.shared.time import utc_now
from geoalbum.domain.shared.value_objects import AlbumId, Identifier, UserId

__all__ = [
    "AlbumId",
    "DomainException",
    "EntityNotFoundError",
    "EntityValidationError",
    "Err",
    "ErrorCode",
    "Identifier",
    "InvalidIdError",
    "Ok",
    "RepositoryError",
    "Result",
    "UnauthorizedError",
    "UserId",
    "ValidationError",
    "err",
    "ok",
    "utc_now",
]
