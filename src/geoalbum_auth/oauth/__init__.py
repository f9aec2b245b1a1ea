"""OAuth providers."""

from geoalbum_auth.oauth.github import GitHubOAuthProvider
from geoalbum_auth.oauth.provider import OAuthProvider

__all__ = [
    "GitHubOAuthProvider",
    "OAuthProvider",
]
