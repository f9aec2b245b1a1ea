"""Add an image to an existing album."""

from __future__ import annotations

import logging

from geoalbum.application.dtos import AlbumDTO
from geoalbum.domain.album import AlbumNotFoundError, AlbumRepository, ImageUrl
from geoalbum.domain.shared.exceptions import DomainException
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.value_objects import AlbumId, UserId

logger = logging.getLogger(__name__)

CONTEXT = "add album image"


class AddAlbumImageCommand:
    """Append one image URL to an album owned by the requester."""

    def __init__(self, album_repository: AlbumRepository):
        self._album_repo = album_repository

    async def execute(
        self,
        album_id: str,
        image_url: str,
        requester_id: str,
    ) -> Result[AlbumDTO, DomainException]:
        album_id_result = AlbumId.create(album_id)
        if isinstance(album_id_result, Err):
            return Err(album_id_result.error.with_context(CONTEXT))

        requester_result = UserId.create(requester_id)
        if isinstance(requester_result, Err):
            return Err(requester_result.error.with_context(CONTEXT))

        url_result = ImageUrl.create(image_url)
        if isinstance(url_result, Err):
            return Err(url_result.error.with_context(CONTEXT))

        find_result = await self._album_repo.find_by_id(album_id_result.value)
        if isinstance(find_result, Err):
            return Err(find_result.error.with_context(CONTEXT))

        album = find_result.value
        if album is None:
            return Err(AlbumNotFoundError(album_id_result.value.value))

        add_result = album.add_image(url_result.value, requester_result.value)
        if isinstance(add_result, Err):
            return Err(add_result.error.with_context(CONTEXT))

        save_result = await self._album_repo.save(album)
        if isinstance(save_result, Err):
            return Err(save_result.error.with_context(CONTEXT))

        logger.info("Image added to album %s (%d images)", album.id, album.image_count)
        return Ok(AlbumDTO.from_album(album))
