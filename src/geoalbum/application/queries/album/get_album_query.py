"""Fetch a single album by id."""

from __future__ import annotations

from geoalbum.application.dtos import AlbumDTO
from geoalbum.domain.album import AlbumNotFoundError, AlbumRepository
from geoalbum.domain.shared.exceptions import DomainException
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.value_objects import AlbumId

CONTEXT = "get album"


class GetAlbumQuery:
    def __init__(self, album_repository: AlbumRepository):
        self._album_repo = album_repository

    async def execute(self, album_id: str) -> Result[AlbumDTO, DomainException]:
        album_id_result = AlbumId.create(album_id)
        if isinstance(album_id_result, Err):
            return Err(album_id_result.error.with_context(CONTEXT))

        find_result = await self._album_repo.find_by_id(album_id_result.value)
        if isinstance(find_result, Err):
            return Err(find_result.error.with_context(CONTEXT))

        if find_result.value is None:
            return Err(AlbumNotFoundError(album_id_result.value.value))

        return Ok(AlbumDTO.from_album(find_result.value))
