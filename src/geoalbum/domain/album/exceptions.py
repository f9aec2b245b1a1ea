"""Album domain exceptions."""

from geoalbum.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class CoordinateOutOfBoundsError(ValidationError):
    """Raised when a latitude or longitude is outside its valid range."""

    def __init__(
        self,
        axis: str,
        value: float,
        minimum: float,
        maximum: float,
    ) -> None:
        self.axis = axis
        self.value = value
        super().__init__(
            f"{axis} {value} is out of bounds. Must be between {minimum} and {maximum}",
            ErrorCode.COORDINATE_OUT_OF_BOUNDS,
            {"axis": axis, "value": value, "min": minimum, "max": maximum},
        )


class InvalidImageUrlError(ValidationError):
    """Raised when a string is not an acceptable image URL."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        message = f"Invalid URL format: {url}"
        if reason:
            message = f"{message} - {reason}"
        super().__init__(message, ErrorCode.INVALID_URL_FORMAT, {"url": url})


class AlbumNotFoundError(EntityNotFoundError):
    """Album not found."""

    def __init__(self, album_id: str) -> None:
        self.album_id = album_id
        super().__init__(
            f"Album with id {album_id} not found",
            ErrorCode.ALBUM_NOT_FOUND,
            {"album_id": album_id},
        )
