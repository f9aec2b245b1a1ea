"""Unit tests for DeleteAlbumCommand."""

from unittest.mock import AsyncMock

import pytest

from geoalbum.application.commands import DeleteAlbumCommand
from geoalbum.domain.album import AlbumNotFoundError, AlbumRepository
from geoalbum.domain.shared.exceptions import (
    InvalidIdError,
    RepositoryError,
    UnauthorizedError,
)
from geoalbum.domain.shared.result import Err, Ok
from geoalbum.domain.shared.value_objects import AlbumId
from tests.shared.fixtures.builders import (
    ALBUM_ID,
    OTHER_USER_ID,
    OWNER_ID,
    make_album,
)


class TestDeleteAlbumCommand:
    def setup_method(self):
        self.album_repo = AsyncMock(spec=AlbumRepository)
        self.album_repo.find_by_id.return_value = Ok(make_album())
        self.album_repo.delete.return_value = Ok(None)
        self.command = DeleteAlbumCommand(self.album_repo)

    @pytest.mark.asyncio
    async def test_owner_deletes_album(self):
        result = await self.command.execute(ALBUM_ID, OWNER_ID)

        assert result == Ok(None)
        self.album_repo.delete.assert_awaited_once_with(AlbumId(ALBUM_ID))

    @pytest.mark.asyncio
    async def test_non_owner_is_unauthorized(self):
        result = await self.command.execute(ALBUM_ID, OTHER_USER_ID)

        assert isinstance(result, Err)
        assert isinstance(result.error, UnauthorizedError)
        self.album_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_album(self):
        self.album_repo.find_by_id.return_value = Ok(None)

        result = await self.command.execute(ALBUM_ID, OWNER_ID)

        assert isinstance(result, Err)
        assert isinstance(result.error, AlbumNotFoundError)

    @pytest.mark.asyncio
    async def test_invalid_album_id(self):
        result = await self.command.execute("42", OWNER_ID)

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidIdError)
        self.album_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_error_on_delete(self):
        self.album_repo.delete.return_value = Err(RepositoryError("boom"))

        result = await self.command.execute(ALBUM_ID, OWNER_ID)

        assert isinstance(result, Err)
        assert result.error.details["context"] == "delete album"
