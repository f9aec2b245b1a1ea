"""OAuth provider interface."""

from abc import ABC, abstractmethod

from geoalbum.domain.shared.result import Err, Result
from geoalbum_auth.exceptions import OAuthError
from geoalbum_auth.schemas import OAuthProfile


class OAuthProvider(ABC):
    """Authorization-code flow against a third-party identity provider."""

    @abstractmethod
    def get_authorization_url(self, state: str | None = None) -> str:
        """URL the browser is sent to for consent."""

    @abstractmethod
    async def exchange_code_for_token(self, code: str) -> Result[str, OAuthError]:
        """Exchange an authorization code for an access token."""

    @abstractmethod
    async def get_user_profile(
        self,
        access_token: str,
    ) -> Result[OAuthProfile, OAuthError]:
        """Fetch the profile of the user the access token belongs to."""

    async def authenticate(self, code: str) -> Result[OAuthProfile, OAuthError]:
        """Run the code exchange and fetch the profile."""
        token_result = await self.exchange_code_for_token(code)
        if isinstance(token_result, Err):
            return token_result
        return await self.get_user_profile(token_result.value)
