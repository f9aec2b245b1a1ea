"""SQLAlchemy implementation of AlbumRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from geoalbum.domain.album import (
    Album,
    AlbumNotFoundError,
    AlbumRepository,
    Coordinate,
    ImageUrl,
)
from geoalbum.domain.shared.exceptions import DomainException, RepositoryError
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.time import as_utc
from geoalbum.domain.shared.value_objects import AlbumId, UserId
from geoalbum.infrastructure.persistence.sqlalchemy.models import AlbumModel

logger = logging.getLogger(__name__)


class AlbumRepositorySQLAlchemy(AlbumRepository):
    """SQLAlchemy implementation of the AlbumRepository interface.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, album: Album) -> Result[None, RepositoryError]:
        try:
            existing = await self._find_model_by_id(album.id.as_uuid())
            if existing:
                self._update_model(existing, album)
                logger.debug("Updated album: %s", album.id)
            else:
                self._session.add(self._map_to_model(album))
                logger.debug("Created album: %s", album.id)

            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to save album %s: %s", album.id, e)
            return Err(RepositoryError("Failed to save album", e))

        return Ok(None)

    async def find_by_id(
        self,
        album_id: AlbumId,
    ) -> Result[Album | None, RepositoryError]:
        try:
            model = await self._find_model_by_id(album_id.as_uuid())
            album = self._map_to_domain(model) if model is not None else None
        except (SQLAlchemyError, DomainException) as e:
            logger.error("Failed to load album %s: %s", album_id, e)
            return Err(RepositoryError("Failed to load album", e))

        return Ok(album)

    async def find_by_owner_id(
        self,
        owner_id: UserId,
    ) -> Result[list[Album], RepositoryError]:
        stmt = (
            select(AlbumModel)
            .where(AlbumModel.owner_id == owner_id.as_uuid())
            .order_by(AlbumModel.created_at.desc(), AlbumModel.id)
        )
        return await self._find_many(stmt)

    async def find_all(self) -> Result[list[Album], RepositoryError]:
        stmt = select(AlbumModel).order_by(
            AlbumModel.created_at.desc(),
            AlbumModel.id,
        )
        return await self._find_many(stmt)

    async def delete(
        self,
        album_id: AlbumId,
    ) -> Result[None, AlbumNotFoundError | RepositoryError]:
        try:
            model = await self._find_model_by_id(album_id.as_uuid())
            if model is None:
                return Err(AlbumNotFoundError(album_id.value))

            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to delete album %s: %s", album_id, e)
            return Err(RepositoryError("Failed to delete album", e))

        logger.debug("Deleted album: %s", album_id)
        return Ok(None)

    async def _find_many(self, stmt) -> Result[list[Album], RepositoryError]:
        try:
            result = await self._session.execute(stmt)
            albums = [self._map_to_domain(m) for m in result.scalars().all()]
        except (SQLAlchemyError, DomainException) as e:
            logger.error("Failed to list albums: %s", e)
            return Err(RepositoryError("Failed to list albums", e))

        return Ok(albums)

    async def _find_model_by_id(self, album_id: UUID) -> AlbumModel | None:
        stmt = select(AlbumModel).where(AlbumModel.id == album_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: AlbumModel) -> Album:
        return Album.reconstitute(
            id=AlbumId(str(model.id)),
            coordinate=Coordinate(model.latitude, model.longitude),
            image_urls=[ImageUrl(url) for url in model.image_urls],
            owner_id=UserId(str(model.owner_id)),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _map_to_model(self, album: Album) -> AlbumModel:
        return AlbumModel(
            id=album.id.as_uuid(),
            latitude=album.coordinate.latitude,
            longitude=album.coordinate.longitude,
            image_urls=[url.value for url in album.image_urls],
            owner_id=album.owner_id.as_uuid(),
            created_at=album.created_at,
            updated_at=album.updated_at,
        )

    def _update_model(self, model: AlbumModel, album: Album) -> None:
        # id, owner and created_at never change
        model.latitude = album.coordinate.latitude
        model.longitude = album.coordinate.longitude
        model.image_urls = [url.value for url in album.image_urls]
        model.updated_at = album.updated_at
