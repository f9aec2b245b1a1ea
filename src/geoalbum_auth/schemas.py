"""Data classes exchanged by the auth services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Verified claims of a session token."""

    user_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class OAuthProfile:
    """Profile returned by an OAuth provider, normalized."""

    external_id: str
    login: str
    avatar_url: str | None = None
    name: str | None = None
