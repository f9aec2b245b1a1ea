"""SQLAlchemy declarative base for geoalbum_identity models.

Uses the same metadata as geoalbum's Base so albums can reference users.
"""

from geoalbum.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
