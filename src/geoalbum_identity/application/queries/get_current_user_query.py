"""Query to get the user a session token belongs to."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from geoalbum.domain.shared.exceptions import DomainException
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.value_objects import UserId
from geoalbum_auth import AuthError, JWTService
from geoalbum_auth.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from geoalbum_identity.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class GetCurrentUserQuery:
    """Resolve a bearer token to its User.

    A token for a user that no longer exists is reported exactly like an
    invalid token.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
    ) -> None:
        self._user_repo = user_repository
        self._jwt_service = jwt_service

    async def execute(
        self,
        token: str,
    ) -> Result[User, Union[AuthError, DomainException]]:
        payload_result = self._jwt_service.verify_token(token)
        if isinstance(payload_result, Err):
            return payload_result

        user_id_result = UserId.create(payload_result.value.user_id)
        if isinstance(user_id_result, Err):
            logger.debug("Token carries a malformed user id")
            return Err(InvalidTokenError())

        user_result = await self._user_repo.find_by_id(user_id_result.value)
        if isinstance(user_result, Err):
            return Err(user_result.error.with_context("get current user"))

        user = user_result.value
        if user is None:
            logger.warning("User not found for token: %s", user_id_result.value)
            return Err(InvalidTokenError())

        return Ok(user)
