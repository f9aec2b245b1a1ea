"""SQLAlchemy persistence for the album domain.

Provides:
- Base: Declarative base shared with geoalbum_identity models
- AlbumModel: SQLAlchemy model for albums
- AlbumRepositorySQLAlchemy: Repository implementation for albums
- create_tables / drop_tables: schema helpers
- enable_sqlite_foreign_keys: FK enforcement for SQLite engines
"""

from geoalbum.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
    enable_sqlite_foreign_keys,
)
from geoalbum.infrastructure.persistence.sqlalchemy.models import AlbumModel, Base
from geoalbum.infrastructure.persistence.sqlalchemy.repositories import (
    AlbumRepositorySQLAlchemy,
)

__all__ = [
    "AlbumModel",
    "AlbumRepositorySQLAlchemy",
    "Base",
    "create_tables",
    "drop_tables",
    "enable_sqlite_foreign_keys",
]
