"""Album commands."""

from geoalbum.application.commands.album.add_album_image_command import (
    AddAlbumImageCommand,
)
from geoalbum.application.commands.album.create_album_command import (
    CreateAlbumCommand,
)
from geoalbum.application.commands.album.delete_album_command import (
    DeleteAlbumCommand,
)
from geoalbum.application.commands.album.remove_album_image_command import (
    RemoveAlbumImageCommand,
)

__all__ = [
    "AddAlbumImageCommand",
    "CreateAlbumCommand",
    "DeleteAlbumCommand",
    "RemoveAlbumImageCommand",
]
