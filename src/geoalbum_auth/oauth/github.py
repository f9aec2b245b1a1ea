"""GitHub OAuth provider."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum_auth.exceptions import OAuthError
from geoalbum_auth.oauth.provider import OAuthProvider
from geoalbum_auth.schemas import OAuthProfile

logger = logging.getLogger(__name__)


class GitHubOAuthProvider(OAuthProvider):
    """GitHub implementation of the authorization-code flow."""

    BASE_URL = "https://github.com"
    API_URL = "https://api.github.com"
    DEFAULT_SCOPE = "read:user"

    def __init__(  # noqa: PLR0913
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scope: str = DEFAULT_SCOPE,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri
        self._scope = scope
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def get_authorization_url(self, state: str | None = None) -> str:
        params = {
            "client_id": self._client_id,
            "redirect_uri": self._redirect_uri,
            "scope": self._scope,
        }
        if state:
            params["state"] = state
        return f"{self.BASE_URL}/login/oauth/authorize?{urlencode(params)}"

    async def exchange_code_for_token(self, code: str) -> Result[str, OAuthError]:
        if not code:
            return Err(OAuthError("Authorization code is required"))

        try:
            client = await self._get_client()
            response = await client.post(
                f"{self.BASE_URL}/login/oauth/access_token",
                json={
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "code": code,
                    "redirect_uri": self._redirect_uri,
                },
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.warning("GitHub token exchange failed: %s", e)
            return Err(OAuthError(f"Failed to exchange code for token: {e}"))

        if not response.is_success:
            logger.warning(
                "GitHub token exchange returned %d: %s",
                response.status_code,
                response.text[:200] if response.text else "no body",
            )
            return Err(
                OAuthError(
                    f"GitHub API error: {response.status_code} "
                    f"{response.reason_phrase}"
                )
            )

        data = self._json_object(response)
        access_token = data.get("access_token") if data else None
        if not access_token:
            # GitHub answers 200 with {"error": ...} for bad or reused codes
            reason = data.get("error") if data else None
            logger.warning("GitHub returned no access token (error=%s)", reason)
            return Err(OAuthError("No access token received from GitHub"))

        return Ok(str(access_token))

    async def get_user_profile(
        self,
        access_token: str,
    ) -> Result[OAuthProfile, OAuthError]:
        try:
            client = await self._get_client()
            response = await client.get(
                f"{self.API_URL}/user",
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github.v3+json",
                },
            )
        except httpx.HTTPError as e:
            logger.warning("GitHub profile request failed: %s", e)
            return Err(OAuthError(f"Failed to get user info: {e}"))

        if not response.is_success:
            logger.warning("GitHub profile request returned %d", response.status_code)
            return Err(
                OAuthError(
                    f"GitHub API error: {response.status_code} "
                    f"{response.reason_phrase}"
                )
            )

        data = self._json_object(response)
        if not data or not data.get("id") or not data.get("login"):
            return Err(OAuthError("Invalid user data received from GitHub"))

        return Ok(
            OAuthProfile(
                external_id=str(data["id"]),
                login=str(data["login"]),
                avatar_url=data.get("avatar_url") or None,
                name=data.get("name") or None,
            )
        )

    @staticmethod
    def _json_object(response: httpx.Response) -> dict[str, Any] | None:
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None
