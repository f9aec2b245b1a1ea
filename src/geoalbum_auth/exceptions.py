"""Authentication exceptions.

These errors are returned (inside ``Err``) by the geoalbum_auth package and
handled by the application layer (AuthenticationService) or mapped to HTTP
responses by the API.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code = "AUTH_ERROR"

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        self.details: dict[str, str] = {}
        super().__init__(self.message)

    def with_context(self, context: str) -> AuthError:
        """Attach the operation that surfaced this error and return self."""
        self.details.setdefault("context", context)
        return self


class InvalidTokenError(AuthError):
    """Token is invalid, expired, or malformed.

    The message is the same for every cause.
    """

    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class OAuthError(AuthError):
    """The OAuth provider rejected a request or returned unusable data."""

    code = "OAUTH_ERROR"

    def __init__(self, message: str = "OAuth provider error"):
        super().__init__(message)


class TokenError(AuthError):
    """A session token could not be issued."""

    code = "TOKEN_ERROR"

    def __init__(self, message: str = "Failed to generate token"):
        super().__init__(message)
