"""Identifier value objects.

AlbumId and UserId both wrap a UUID string but are distinct nominal types:
equality includes the class, so an AlbumId never equals a UserId holding the
same value.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from geoalbum.domain.shared.exceptions import InvalidIdError
from geoalbum.domain.shared.result import Err, Ok, Result

UUID_V4_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

IdT = TypeVar("IdT", bound="Identifier")


@dataclass(frozen=True)
class Identifier:
    """Base for UUID v4 identifiers. Use a concrete subclass."""

    value: str

    kind: ClassVar[str] = "Identifier"

    def __post_init__(self) -> None:
        value = self.value
        if not isinstance(value, str) or not UUID_V4_PATTERN.fullmatch(value):
            raise InvalidIdError(self.kind, str(value))
        object.__setattr__(self, "value", value.lower())

    @classmethod
    def create(cls: type[IdT], value: str) -> Result[IdT, InvalidIdError]:
        candidate = value.strip() if isinstance(value, str) else value
        if not isinstance(candidate, str) or not UUID_V4_PATTERN.fullmatch(candidate):
            return Err(InvalidIdError(cls.kind, str(value)))
        return Ok(cls(candidate))

    @classmethod
    def generate(cls: type[IdT]) -> IdT:
        return cls(str(uuid.uuid4()))

    def as_uuid(self) -> uuid.UUID:
        return uuid.UUID(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.value}')"


@dataclass(frozen=True, repr=False)
class AlbumId(Identifier):
    kind: ClassVar[str] = "AlbumId"


@dataclass(frozen=True, repr=False)
class UserId(Identifier):
    kind: ClassVar[str] = "UserId"
