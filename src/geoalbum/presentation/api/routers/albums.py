"""Albums router for browsing and managing geo-located albums."""

import logging

from fastapi import APIRouter, Query, Response, status

from geoalbum.application.commands import (
    AddAlbumImageCommand,
    CreateAlbumCommand,
    DeleteAlbumCommand,
    RemoveAlbumImageCommand,
)
from geoalbum.application.queries import GetAlbumQuery, ListAlbumsQuery
from geoalbum.presentation.api.dependencies import AlbumRepo, CurrentUser, DBSession
from geoalbum.presentation.api.schemas.albums import (
    AlbumCreateRequest,
    AlbumImageRequest,
    AlbumResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List albums",
    responses={400: {"description": "Invalid owner id"}},
)
async def list_albums(
    album_repo: AlbumRepo,
    owner_id: str | None = Query(
        default=None,
        description="Only albums owned by this user",
    ),
) -> list[AlbumResponse]:
    """List all albums, newest first, optionally filtered by owner."""
    result = await ListAlbumsQuery(album_repo).execute(owner_id=owner_id)
    return [AlbumResponse.from_dto(dto) for dto in result.unwrap()]


@router.get(
    "/mine",
    summary="List my albums",
)
async def list_my_albums(
    current_user: CurrentUser,
    album_repo: AlbumRepo,
) -> list[AlbumResponse]:
    result = await ListAlbumsQuery(album_repo).execute(owner_id=current_user.id.value)
    return [AlbumResponse.from_dto(dto) for dto in result.unwrap()]


@router.get(
    "/{album_id}",
    summary="Get an album",
    responses={404: {"description": "Album not found"}},
)
async def get_album(album_id: str, album_repo: AlbumRepo) -> AlbumResponse:
    result = await GetAlbumQuery(album_repo).execute(album_id)
    return AlbumResponse.from_dto(result.unwrap())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an album",
    responses={
        201: {"description": "Album created"},
        400: {"description": "Invalid coordinate or image URLs"},
    },
)
async def create_album(
    request: AlbumCreateRequest,
    current_user: CurrentUser,
    album_repo: AlbumRepo,
    session: DBSession,
) -> AlbumResponse:
    result = await CreateAlbumCommand(album_repo).execute(
        latitude=request.coordinate.latitude,
        longitude=request.coordinate.longitude,
        image_urls=request.image_urls,
        owner_id=current_user.id.value,
    )
    dto = result.unwrap()
    await session.commit()
    return AlbumResponse.from_dto(dto)


@router.delete(
    "/{album_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an album",
    responses={
        403: {"description": "Not the album owner"},
        404: {"description": "Album not found"},
    },
)
async def delete_album(
    album_id: str,
    current_user: CurrentUser,
    album_repo: AlbumRepo,
    session: DBSession,
) -> Response:
    result = await DeleteAlbumCommand(album_repo).execute(
        album_id=album_id,
        requester_id=current_user.id.value,
    )
    result.unwrap()
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{album_id}/images",
    summary="Add an image to an album",
    responses={
        400: {"description": "Invalid URL, duplicate, or album is full"},
        403: {"description": "Not the album owner"},
        404: {"description": "Album not found"},
    },
)
async def add_album_image(
    album_id: str,
    request: AlbumImageRequest,
    current_user: CurrentUser,
    album_repo: AlbumRepo,
    session: DBSession,
) -> AlbumResponse:
    result = await AddAlbumImageCommand(album_repo).execute(
        album_id=album_id,
        image_url=request.image_url,
        requester_id=current_user.id.value,
    )
    dto = result.unwrap()
    await session.commit()
    return AlbumResponse.from_dto(dto)


@router.delete(
    "/{album_id}/images",
    summary="Remove an image from an album",
    responses={
        400: {"description": "Image not in album, or it is the last one"},
        403: {"description": "Not the album owner"},
        404: {"description": "Album not found"},
    },
)
async def remove_album_image(
    album_id: str,
    request: AlbumImageRequest,
    current_user: CurrentUser,
    album_repo: AlbumRepo,
    session: DBSession,
) -> AlbumResponse:
    result = await RemoveAlbumImageCommand(album_repo).execute(
        album_id=album_id,
        image_url=request.image_url,
        requester_id=current_user.id.value,
    )
    dto = result.unwrap()
    await session.commit()
    return AlbumResponse.from_dto(dto)
