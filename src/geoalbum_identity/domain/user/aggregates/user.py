"""User aggregate linked to an external (GitHub) identity."""

from __future__ import annotations

import re
from datetime import datetime
from urllib.parse import urlsplit

from geoalbum.domain.shared.exceptions import EntityValidationError
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.time import utc_now
from geoalbum.domain.shared.value_objects import UserId

# GitHub's maximum username length
USERNAME_MAX_LENGTH = 39
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9-]+")


def _validate_username(username: str) -> EntityValidationError | None:
    if not username or not username.strip():
        return EntityValidationError("User", "Username is required")
    if len(username) > USERNAME_MAX_LENGTH:
        return EntityValidationError(
            "User",
            f"Username must be {USERNAME_MAX_LENGTH} characters or less",
        )
    if not USERNAME_PATTERN.fullmatch(username):
        return EntityValidationError(
            "User",
            "Username can only contain alphanumeric characters and hyphens",
        )
    return None


def _validate_avatar_url(avatar_url: str) -> EntityValidationError | None:
    try:
        parts = urlsplit(avatar_url)
    except ValueError:
        parts = None
    if parts is None or not parts.scheme or not parts.netloc:
        return EntityValidationError("User", "Invalid avatar URL format")
    return None


class User:
    """
    User aggregate root.

    Identity (``id``, ``external_id``) and ``created_at`` never change after
    creation; the profile (username, avatar, name) is re-synced from the
    OAuth provider on every sign-in.
    """

    def __init__(  # noqa: PLR0913
        self,
        id: UserId,
        external_id: str,
        username: str,
        avatar_url: str | None,
        name: str | None,
        created_at: datetime,
        updated_at: datetime,
    ):
        self._id = id
        self._external_id = external_id
        self._username = username
        self._avatar_url = avatar_url
        self._name = name
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        external_id: str,
        username: str,
        avatar_url: str | None = None,
        name: str | None = None,
    ) -> Result[User, EntityValidationError]:
        if not external_id or not external_id.strip():
            return Err(EntityValidationError("User", "External ID is required"))

        error = _validate_username(username)
        if error is not None:
            return Err(error)

        if avatar_url:
            error = _validate_avatar_url(avatar_url)
            if error is not None:
                return Err(error)

        now = utc_now()
        return Ok(
            cls(
                id=UserId.generate(),
                external_id=external_id.strip(),
                username=username,
                avatar_url=avatar_url or None,
                name=name or None,
                created_at=now,
                updated_at=now,
            )
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UserId,
        external_id: str,
        username: str,
        avatar_url: str | None,
        name: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        return cls(
            id=id,
            external_id=external_id,
            username=username,
            avatar_url=avatar_url,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UserId:
        return self._id

    @property
    def external_id(self) -> str:
        return self._external_id

    @property
    def username(self) -> str:
        return self._username

    @property
    def avatar_url(self) -> str | None:
        return self._avatar_url

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def display_name(self) -> str:
        return self._name or self._username

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        username: str | None = None,
        avatar_url: str | None = None,
        name: str | None = None,
    ) -> Result[None, EntityValidationError]:
        """Update the given profile fields.

        ``None`` leaves a field unchanged; an empty string clears
        ``avatar_url`` or ``name``. All fields are validated before any of
        them changes.
        """
        if username is not None:
            error = _validate_username(username)
            if error is not None:
                return Err(error)

        if avatar_url:
            error = _validate_avatar_url(avatar_url)
            if error is not None:
                return Err(error)

        if username is not None:
            self._username = username
        if avatar_url is not None:
            self._avatar_url = avatar_url or None
        if name is not None:
            self._name = name or None

        self._updated_at = max(utc_now(), self._updated_at)
        return Ok(None)

    def is_same_external_user(self, external_id: str) -> bool:
        return self._external_id == external_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id.value}, username={self._username})"
