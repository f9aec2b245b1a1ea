"""Commands: use cases that change state."""

from geoalbum.application.commands.album import (
    AddAlbumImageCommand,
    CreateAlbumCommand,
    DeleteAlbumCommand,
    RemoveAlbumImageCommand,
)

__all__ = [
    "AddAlbumImageCommand",
    "CreateAlbumCommand",
    "DeleteAlbumCommand",
    "RemoveAlbumImageCommand",
]
