"""User repository interface."""

from abc import ABC, abstractmethod

from geoalbum.domain.shared.exceptions import RepositoryError
from geoalbum.domain.shared.result import Result
from geoalbum.domain.shared.value_objects import UserId
from geoalbum_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def save(self, user: User) -> Result[None, RepositoryError]:
        """Save or update a user."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Result[User | None, RepositoryError]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_external_id(
        self,
        external_id: str,
    ) -> Result[User | None, RepositoryError]:
        """Find a user by their OAuth provider identity."""

    @abstractmethod
    async def find_by_username(
        self,
        username: str,
    ) -> Result[User | None, RepositoryError]:
        """Find a user by username."""
