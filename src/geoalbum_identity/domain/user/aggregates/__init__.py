from geoalbum_identity.domain.user.aggregates.user import USERNAME_MAX_LENGTH, User

__all__ = ["USERNAME_MAX_LENGTH", "User"]
