"""Remove an image from an existing album."""

from __future__ import annotations

import logging

from geoalbum.application.dtos import AlbumDTO
from geoalbum.domain.album import AlbumNotFoundError, AlbumRepository, ImageUrl
from geoalbum.domain.shared.exceptions import DomainException
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.value_objects import AlbumId, UserId

logger = logging.getLogger(__name__)

CONTEXT = "remove album image"


class RemoveAlbumImageCommand:
    """Remove one image URL from an album owned by the requester.

    An album always keeps at least one image; removing the last one fails
    whoever asks. Delete the album instead.
    """

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

        remove_result = album.remove_image(url_result.value, requester_result.value)
        if isinstance(remove_result, Err):
            return Err(remove_result.error.with_context(CONTEXT))

        save_result = await self._album_repo.save(album)
        if isinstance(save_result, Err):
            return Err(save_result.error.with_context(CONTEXT))

        logger.info(
            "Image removed from album %s (%d images)", album.id, album.image_count
        )
        return Ok(AlbumDTO.from_album(album))
