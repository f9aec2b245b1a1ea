"""SQLAlchemy model for User aggregate."""

from typing import Optional
from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from geoalbum.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin
from geoalbum_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserModel(IdentityBase, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    ``external_id`` is the GitHub account id and is unique: one row per
    GitHub account. Usernames can be renamed on GitHub, so they are indexed
    but not unique.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    external_id: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )
    username: Mapped[str] = mapped_column(String(39), nullable=False, index=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username})>"
