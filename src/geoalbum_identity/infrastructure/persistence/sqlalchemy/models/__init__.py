"""SQLAlchemy models for identity."""

from geoalbum_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["UserModel"]
