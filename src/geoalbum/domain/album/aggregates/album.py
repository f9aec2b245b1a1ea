"""Album aggregate: photos pinned to one point on the map."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from geoalbum.domain.album.value_objects import Coordinate, ImageUrl
from geoalbum.domain.shared.exceptions import (
    EntityValidationError,
    UnauthorizedError,
)
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.time import utc_now
from geoalbum.domain.shared.value_objects import AlbumId, UserId

MIN_IMAGES = 1
MAX_IMAGES = 10


def _check_images(image_urls: Sequence[ImageUrl]) -> EntityValidationError | None:
    if len(image_urls) < MIN_IMAGES:
        return EntityValidationError("Album", "At least one image is required")
    if len(image_urls) > MAX_IMAGES:
        return EntityValidationError(
            "Album",
            f"Maximum {MAX_IMAGES} images allowed per album",
        )
    if len(set(image_urls)) != len(image_urls):
        return EntityValidationError("Album", "Duplicate image URLs are not allowed")
    return None


class Album:
    """
    Album aggregate root.

    Holds 1..10 distinct image URLs at a coordinate. Only the owner may add
    or remove images; every successful mutation advances ``updated_at``.
    The album references its owner by id only.
    """

    def __init__(  # noqa: PLR0913
        self,
        id: AlbumId,
        coordinate: Coordinate,
        image_urls: Iterable[ImageUrl],
        owner_id: UserId,
        created_at: datetime,
        updated_at: datetime,
    ):
        self._id = id
        self._coordinate = coordinate
        self._image_urls: tuple[ImageUrl, ...] = tuple(image_urls)
        self._owner_id = owner_id
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        coordinate: Coordinate,
        image_urls: Sequence[ImageUrl],
        owner_id: UserId,
    ) -> Result[Album, EntityValidationError]:
        error = _check_images(image_urls)
        if error is not None:
            return Err(error)

        now = utc_now()
        return Ok(
            cls(
                id=AlbumId.generate(),
                coordinate=coordinate,
                image_urls=image_urls,
                owner_id=owner_id,
                created_at=now,
                updated_at=now,
            )
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: AlbumId,
        coordinate: Coordinate,
        image_urls: Iterable[ImageUrl],
        owner_id: UserId,
        created_at: datetime,
        updated_at: datetime,
    ) -> Album:
        return cls(
            id=id,
            coordinate=coordinate,
            image_urls=image_urls,
            owner_id=owner_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> AlbumId:
        return self._id

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def image_urls(self) -> tuple[ImageUrl, ...]:
        return self._image_urls

    @property
    def image_count(self) -> int:
        return len(self._image_urls)

    @property
    def owner_id(self) -> UserId:
        return self._owner_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def add_image(
        self,
        image_url: ImageUrl,
        requester_id: UserId,
    ) -> Result[None, UnauthorizedError | EntityValidationError]:
        if not self.is_owned_by(requester_id):
            return Err(UnauthorizedError("Only the album owner can add images"))

        if len(self._image_urls) >= MAX_IMAGES:
            return Err(
                EntityValidationError(
                    "Album",
                    f"Maximum {MAX_IMAGES} images allowed per album",
                )
            )

        if image_url in self._image_urls:
            return Err(
                EntityValidationError("Album", "Image URL already exists in album")
            )

        self._image_urls = (*self._image_urls, image_url)
        self._touch()
        return Ok(None)

    def remove_image(
        self,
        image_url: ImageUrl,
        requester_id: UserId,
    ) -> Result[None, UnauthorizedError | EntityValidationError]:
        # The last image stays whoever asks; delete the album instead
        if len(self._image_urls) <= MIN_IMAGES:
            return Err(
                EntityValidationError(
                    "Album",
                    "Cannot remove the last image from album",
                )
            )

        if not self.is_owned_by(requester_id):
            return Err(UnauthorizedError("Only the album owner can remove images"))

        if image_url not in self._image_urls:
            return Err(EntityValidationError("Album", "Image URL not found in album"))

        self._image_urls = tuple(url for url in self._image_urls if url != image_url)
        self._touch()
        return Ok(None)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self._owner_id == user_id

    def distance_from(self, coordinate: Coordinate) -> float:
        """Distance in kilometers from this album's coordinate."""
        return self._coordinate.distance_to(coordinate)

    def _touch(self) -> None:
        self._updated_at = max(utc_now(), self._updated_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Album):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Album(id={self._id.value}, coordinate={self._coordinate}, "
            f"images={len(self._image_urls)})"
        )
