"""Album repository interface.

Implementations persist whole aggregates: ``save`` writes the album's
current state atomically (insert or update). Concurrent writers to the same
album are resolved by the implementation (last writer wins).
"""

from abc import ABC, abstractmethod

from geoalbum.domain.album.aggregates.album import Album
from geoalbum.domain.album.exceptions import AlbumNotFoundError
from geoalbum.domain.shared.exceptions import RepositoryError
from geoalbum.domain.shared.result import Result
from geoalbum.domain.shared.value_objects import AlbumId, UserId


class AlbumRepository(ABC):
    """Repository interface for Album aggregates."""

    @abstractmethod
    async def save(self, album: Album) -> Result[None, RepositoryError]:
        """Insert or update an album."""

    @abstractmethod
    async def find_by_id(
        self,
        album_id: AlbumId,
    ) -> Result[Album | None, RepositoryError]:
        """Find an album by its ID."""

    @abstractmethod
    async def find_by_owner_id(
        self,
        owner_id: UserId,
    ) -> Result[list[Album], RepositoryError]:
        """List albums owned by a user, newest first."""

    @abstractmethod
    async def find_all(self) -> Result[list[Album], RepositoryError]:
        """List all albums, newest first."""

    @abstractmethod
    async def delete(
        self,
        album_id: AlbumId,
    ) -> Result[None, AlbumNotFoundError | RepositoryError]:
        """Delete an album; fails with AlbumNotFoundError if absent."""
