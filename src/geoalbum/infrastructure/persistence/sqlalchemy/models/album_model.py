"""SQLAlchemy model for Album aggregate."""

from typing import Any
from uuid import UUID

from sqlalchemy import Float, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from geoalbum.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AlbumModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting Album aggregates.

    Image URLs are stored in order as a JSON array; the aggregate is always
    written whole, so no separate image table is needed. Deleting a user
    deletes their albums.

    Table: albums
    """

    __tablename__ = "albums"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    image_urls: Mapped[list[Any]] = mapped_column(JSON, nullable=False)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<AlbumModel(id={self.id}, owner_id={self.owner_id})>"
