"""ImageUrl value object.

An absolute http(s) URL that points at an image: either the path carries an
image file extension, or the host is an allow-listed object-storage host
(uploads there are stored under opaque keys without extensions).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from geoalbum.domain.album.exceptions import InvalidImageUrlError
from geoalbum.domain.shared.result import Err, Ok, Result

ALLOWED_SCHEMES = frozenset({"http", "https"})

# No SVG: it can embed script
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp")

# Virtual-hosted and path-style S3 hosts, e.g.
#   photos.s3.amazonaws.com, photos.s3.ap-northeast-1.amazonaws.com,
#   s3.ap-northeast-1.amazonaws.com
OBJECT_STORAGE_HOST_PATTERNS = (
    re.compile(r"([a-z0-9][a-z0-9.-]*\.)?s3([.-][a-z0-9-]+)?\.amazonaws\.com"),
)


def _normalize(raw: str) -> str | InvalidImageUrlError:
    """Return the normalized URL, or the reason it is not an image URL."""
    candidate = raw.strip() if isinstance(raw, str) else ""
    if not candidate:
        return InvalidImageUrlError(str(raw), "URL cannot be empty")

    try:
        parts = urlsplit(candidate)
        _ = parts.port  # raises on a malformed port
    except ValueError:
        return InvalidImageUrlError(candidate)

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        return InvalidImageUrlError(candidate, "only http and https are allowed")

    host = (parts.hostname or "").lower()
    if not host:
        return InvalidImageUrlError(candidate)

    path = parts.path.lower()
    has_image_extension = path.endswith(IMAGE_EXTENSIONS)
    is_object_storage = any(
        pattern.fullmatch(host) for pattern in OBJECT_STORAGE_HOST_PATTERNS
    )
    if not has_image_extension and not is_object_storage:
        return InvalidImageUrlError(candidate, "must be a valid image file")

    return urlunsplit(
        (scheme, parts.netloc.lower(), parts.path, parts.query, parts.fragment)
    )


@dataclass(frozen=True)
class ImageUrl:
    """Value object representing a validated, normalized image URL."""

    value: str

    def __post_init__(self) -> None:
        normalized = _normalize(self.value)
        if isinstance(normalized, InvalidImageUrlError):
            raise normalized
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, raw: str) -> Result[ImageUrl, InvalidImageUrlError]:
        normalized = _normalize(raw)
        if isinstance(normalized, InvalidImageUrlError):
            return Err(normalized)
        return Ok(cls(normalized))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ImageUrl('{self.value}')"
