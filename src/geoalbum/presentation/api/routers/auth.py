"""Authentication router: GitHub sign-in and the current user."""

import logging
import secrets

from fastapi import APIRouter

from geoalbum.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
    JWTServiceDep,
)
from geoalbum.presentation.api.schemas.auth import (
    AuthorizationUrlResponse,
    GitHubCallbackRequest,
    SignInResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/github/url",
    summary="Get the GitHub authorization URL",
)
async def get_github_authorization_url(
    auth_service: AuthService,
) -> AuthorizationUrlResponse:
    state = secrets.token_urlsafe(16)
    return AuthorizationUrlResponse(
        url=auth_service.get_authorization_url(state),
        state=state,
    )


@router.post(
    "/github/callback",
    summary="Complete GitHub sign-in",
    responses={
        200: {"description": "Signed in; session token issued"},
        400: {"description": "GitHub profile failed validation"},
        502: {"description": "GitHub rejected the code or returned bad data"},
    },
)
async def github_callback(
    request: GitHubCallbackRequest,
    auth_service: AuthService,
    session: DBSession,
    jwt_service: JWTServiceDep,
) -> SignInResponse:
    """
    Exchange the authorization code, upsert the user and issue a token.

    The user row is committed only when the whole sign-in succeeded.
    """
    result = await auth_service.sign_in(request.code)
    signed_in = result.unwrap()
    await session.commit()

    return SignInResponse(
        user=UserResponse.from_user(signed_in.user),
        token=signed_in.token,
        expires_in=jwt_service.expires_in_seconds,
        is_new_user=signed_in.is_new_user,
    )


@router.get(
    "/me",
    summary="Get the current user",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    return UserResponse.from_user(current_user)
