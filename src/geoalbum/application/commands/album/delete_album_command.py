"""Delete an album; only its owner may do so."""

from __future__ import annotations

import logging

from geoalbum.domain.album import AlbumNotFoundError, AlbumRepository
from geoalbum.domain.shared.exceptions import DomainException, UnauthorizedError
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.value_objects import AlbumId, UserId

logger = logging.getLogger(__name__)

CONTEXT = "delete album"


class DeleteAlbumCommand:
    """Delete an album after checking ownership."""

    def __init__(self, album_repository: AlbumRepository):
        self._album_repo = album_repository

    async def execute(
        self,
        album_id: str,
        requester_id: str,
    ) -> Result[None, DomainException]:
        album_id_result = AlbumId.create(album_id)
        if isinstance(album_id_result, Err):
            return Err(album_id_result.error.with_context(CONTEXT))

        requester_result = UserId.create(requester_id)
        if isinstance(requester_result, Err):
            return Err(requester_result.error.with_context(CONTEXT))

        find_result = await self._album_repo.find_by_id(album_id_result.value)
        if isinstance(find_result, Err):
            return Err(find_result.error.with_context(CONTEXT))

        album = find_result.value
        if album is None:
            return Err(AlbumNotFoundError(album_id_result.value.value))

        if not album.is_owned_by(requester_result.value):
            return Err(
                UnauthorizedError("Only the album owner can delete this album")
            )

        delete_result = await self._album_repo.delete(album.id)
        if isinstance(delete_result, Err):
            return Err(delete_result.error.with_context(CONTEXT))

        logger.info("Album deleted: %s", album.id)
        return Ok(None)
