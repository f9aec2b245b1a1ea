"""List albums, optionally restricted to one owner."""

from __future__ import annotations

import logging

from geoalbum.application.dtos import AlbumDTO
from geoalbum.domain.album import AlbumRepository
from geoalbum.domain.shared.exceptions import DomainException
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.value_objects import UserId

logger = logging.getLogger(__name__)

CONTEXT = "list albums"


class ListAlbumsQuery:
    """Query for albums, newest first."""

    def __init__(self, album_repository: AlbumRepository):
        self._album_repo = album_repository

    async def execute(
        self,
        owner_id: str | None = None,
    ) -> Result[list[AlbumDTO], DomainException]:
        """Return all albums, or only those owned by ``owner_id``.

        Parameters
        ----------
        owner_id
            Owner to filter by; ``None`` lists every album

        Returns
        -------
        Ok with the album DTOs (possibly empty), or Err on an invalid owner
        id or repository failure
        """
        if owner_id is None:
            find_result = await self._album_repo.find_all()
        else:
            owner_result = UserId.create(owner_id)
            if isinstance(owner_result, Err):
                return Err(owner_result.error.with_context(CONTEXT))
            find_result = await self._album_repo.find_by_owner_id(owner_result.value)

        if isinstance(find_result, Err):
            return Err(find_result.error.with_context(CONTEXT))

        logger.debug("Listed %d albums (owner=%s)", len(find_result.value), owner_id)
        return Ok([AlbumDTO.from_album(album) for album in find_result.value])
