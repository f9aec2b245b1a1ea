"""Tests for the database engine dependency."""

import pytest
from sqlalchemy import text

from geoalbum.presentation.api.dependencies import get_engine


class TestGetEngine:
    @pytest.mark.asyncio
    async def test_sqlite_enforces_foreign_keys(self, tmp_path):
        engine = get_engine(f"sqlite+aiosqlite:///{tmp_path / 'geoalbum.db'}")
        try:
            async with engine.connect() as conn:
                result = await conn.execute(text("PRAGMA foreign_keys"))
                assert result.scalar_one() == 1
        finally:
            await engine.dispose()

    def test_engine_is_shared_per_url(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'shared.db'}"

        assert get_engine(url) is get_engine(url)

    def test_creates_sqlite_directory(self, tmp_path):
        data_dir = tmp_path / "data"

        get_engine(f"sqlite+aiosqlite:///{data_dir / 'geoalbum.db'}")

        assert data_dir.is_dir()
