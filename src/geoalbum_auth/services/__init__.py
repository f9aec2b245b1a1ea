"""Authentication services.

Provides session token management.
"""

from geoalbum_auth.services.jwt_service import JWTService

__all__ = [
    "JWTService",
]
