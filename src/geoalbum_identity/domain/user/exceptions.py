"""User domain exceptions."""

from geoalbum.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": user_id},
        )
