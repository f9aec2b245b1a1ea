"""Authentication service: OAuth sign-in and session token checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from geoalbum.domain.shared.exceptions import DomainException
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum_auth import AuthError, JWTService, OAuthProvider, TokenPayload
from geoalbum_auth.exceptions import InvalidTokenError
from geoalbum_identity.domain.user import User

if TYPE_CHECKING:
    from geoalbum_auth.schemas import OAuthProfile
    from geoalbum_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)

SignInError = Union[AuthError, DomainException]


class SignInStage(str, Enum):
    """Stages of the sign-in pipeline, in order. There are no back-transitions."""

    CODE_RECEIVED = "code_received"
    TOKEN_OBTAINED = "token_obtained"
    PROFILE_OBTAINED = "profile_obtained"
    USER_RESOLVED = "user_resolved"
    SESSION_ISSUED = "session_issued"


@dataclass(frozen=True)
class SignInResult:
    """Outcome of a successful sign-in."""

    user: User
    token: str
    is_new_user: bool


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the geoalbum_auth infrastructure (OAuth provider, JWT
    tokens) with the User domain:
    - Sign in with an OAuth authorization code
    - Verify session tokens

    Any stage failing short-circuits the rest. If token issuance fails after
    the user was saved, the user stays persisted without a session; callers
    that hold the unit of work simply do not commit.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        oauth_provider: OAuthProvider,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._oauth = oauth_provider
        self._jwt_service = jwt_service

    def get_authorization_url(self, state: str | None = None) -> str:
        return self._oauth.get_authorization_url(state)

    async def sign_in(self, code: str) -> Result[SignInResult, SignInError]:
        stage = SignInStage.CODE_RECEIVED
        logger.debug("Sign-in stage: %s", stage.value)

        token_result = await self._oauth.exchange_code_for_token(code)
        if isinstance(token_result, Err):
            return self._fail(stage, token_result.error)
        stage = SignInStage.TOKEN_OBTAINED
        logger.debug("Sign-in stage: %s", stage.value)

        profile_result = await self._oauth.get_user_profile(token_result.value)
        if isinstance(profile_result, Err):
            return self._fail(stage, profile_result.error)
        profile = profile_result.value
        stage = SignInStage.PROFILE_OBTAINED
        logger.debug("Sign-in stage: %s (login=%s)", stage.value, profile.login)

        user_result = await self._resolve_user(profile)
        if isinstance(user_result, Err):
            return self._fail(stage, user_result.error)
        user, is_new_user = user_result.value
        stage = SignInStage.USER_RESOLVED
        logger.debug("Sign-in stage: %s (user=%s)", stage.value, user.id)

        issue_result = self._jwt_service.issue_token(user.id.value)
        if isinstance(issue_result, Err):
            return self._fail(stage, issue_result.error)

        logger.info(
            "User signed in: %s (new=%s, stage=%s)",
            user.username,
            is_new_user,
            SignInStage.SESSION_ISSUED.value,
        )
        return Ok(
            SignInResult(user=user, token=issue_result.value, is_new_user=is_new_user)
        )

    def verify_token(self, token: str) -> Result[TokenPayload, InvalidTokenError]:
        return self._jwt_service.verify_token(token)

    async def _resolve_user(
        self,
        profile: OAuthProfile,
    ) -> Result[tuple[User, bool], DomainException]:
        """Create the user on first sign-in, re-sync the profile afterwards."""
        existing_result = await self._user_repo.find_by_external_id(
            profile.external_id
        )
        if isinstance(existing_result, Err):
            return existing_result

        existing = existing_result.value
        if existing is not None:
            update_result = existing.update_profile(
                username=profile.login,
                avatar_url=profile.avatar_url,
                name=profile.name,
            )
            if isinstance(update_result, Err):
                return update_result
            user, is_new_user = existing, False
        else:
            create_result = User.create(
                external_id=profile.external_id,
                username=profile.login,
                avatar_url=profile.avatar_url,
                name=profile.name,
            )
            if isinstance(create_result, Err):
                return create_result
            user, is_new_user = create_result.value, True

        save_result = await self._user_repo.save(user)
        if isinstance(save_result, Err):
            return save_result

        return Ok((user, is_new_user))

    @staticmethod
    def _fail(stage: SignInStage, error: SignInError) -> Err[SignInError]:
        logger.warning("Sign-in failed after stage %s: %s", stage.value, error)
        return Err(error.with_context(f"sign-in failed after {stage.value}"))
