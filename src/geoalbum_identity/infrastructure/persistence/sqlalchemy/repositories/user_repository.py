"""SQLAlchemy implementation of UserRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from geoalbum.domain.shared.exceptions import DomainException, RepositoryError
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.time import as_utc
from geoalbum.domain.shared.value_objects import UserId
from geoalbum_identity.domain.user import User, UserRepository
from geoalbum_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UserId) -> Result[User | None, RepositoryError]:
        stmt = select(UserModel).where(UserModel.id == user_id.as_uuid())
        return await self._find_one(stmt)

    async def find_by_external_id(
        self,
        external_id: str,
    ) -> Result[User | None, RepositoryError]:
        stmt = select(UserModel).where(UserModel.external_id == external_id)
        return await self._find_one(stmt)

    async def find_by_username(
        self,
        username: str,
    ) -> Result[User | None, RepositoryError]:
        # A stale row can hold a name that was renamed on GitHub
        stmt = (
            select(UserModel)
            .where(UserModel.username == username)
            .order_by(UserModel.updated_at.desc())
            .limit(1)
        )
        return await self._find_one(stmt)

    async def save(self, user: User) -> Result[None, RepositoryError]:
        try:
            existing = await self._find_model_by_id(user.id.as_uuid())
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s (username: %s)", user.id, user.username)

            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to save user %s: %s", user.id, e)
            return Err(RepositoryError("Failed to save user", e))

        return Ok(None)

    async def _find_one(self, stmt) -> Result[User | None, RepositoryError]:
        try:
            result = await self._session.execute(stmt)
            model = result.scalars().first()
            user = self._map_to_domain(model) if model is not None else None
        except (SQLAlchemyError, DomainException) as e:
            logger.error("Failed to load user: %s", e)
            return Err(RepositoryError("Failed to load user", e))

        return Ok(user)

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=UserId(str(model.id)),
            external_id=model.external_id,
            username=model.username,
            avatar_url=model.avatar_url,
            name=model.name,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id.as_uuid(),
            external_id=user.external_id,
            username=user.username,
            avatar_url=user.avatar_url,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # id, external_id and created_at never change
        model.username = user.username
        model.avatar_url = user.avatar_url
        model.name = user.name
        model.updated_at = user.updated_at
