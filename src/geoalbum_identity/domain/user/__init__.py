"""User domain manages user identity only.

This domain handles:
- User aggregate (id, external GitHub identity, profile)
- Profile re-sync on sign-in

Albums reference users by UserId only.
"""

from geoalbum_identity.domain.user.aggregates import USERNAME_MAX_LENGTH, User
from geoalbum_identity.domain.user.exceptions import UserNotFoundError
from geoalbum_identity.domain.user.repositories import UserRepository

__all__ = [
    "USERNAME_MAX_LENGTH",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
