"""Database initialization utilities."""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import geoalbum.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import geoalbum_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from geoalbum.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all database tables. Used by tests and development resets."""
    logger.warning("Dropping all database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Make SQLite enforce foreign keys, including ``ON DELETE CASCADE``.

    The pragma is per connection, so it is set on every new DBAPI
    connection. No-op for other dialects.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
