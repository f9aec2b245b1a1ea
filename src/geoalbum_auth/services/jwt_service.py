"""JWT token service.

Issues and verifies the stateless session tokens handed out after sign-in.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import jwt

from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum_auth.exceptions import InvalidTokenError, TokenError
from geoalbum_auth.schemas import TokenPayload

logger = logging.getLogger(__name__)

USER_ID_CLAIM = "userId"
REQUIRED_CLAIMS = [USER_ID_CLAIM, "iat", "exp", "iss", "aud"]


class JWTService:
    """Service for session token creation and verification.

    Tokens carry ``userId`` as their only custom claim, plus issued-at,
    expiry, issuer and audience.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue_token(user_id).unwrap()
    >>> payload = service.verify_token(token).unwrap()
    >>> print(payload.user_id)
    """

    DEFAULT_EXPIRE_HOURS = 24 * 7
    DEFAULT_ISSUER = "geoalbum"
    DEFAULT_AUDIENCE = "geoalbum-web"
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
        issuer: str = DEFAULT_ISSUER,
        audience: str = DEFAULT_AUDIENCE,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Shared secret for signing tokens. Must be kept secure.
        expire_hours
            Hours until a token expires (default 7 days)
        issuer
            Value of the ``iss`` claim, checked on verification
        audience
            Value of the ``aud`` claim, checked on verification
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=expire_hours)
        self._issuer = issuer
        self._audience = audience

    @property
    def expires_in_seconds(self) -> int:
        return int(self._expire.total_seconds())

    def issue_token(
        self,
        user_id: str,
        expires_delta: timedelta | None = None,
    ) -> Result[str, TokenError]:
        """Create a signed session token for a user.

        Parameters
        ----------
        user_id
            The user's identifier (UUID string)
        expires_delta
            Custom lifetime (optional)

        Returns
        -------
        Ok with the encoded token, or Err(TokenError) if signing failed
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            USER_ID_CLAIM: str(user_id),
            "iat": now,
            "exp": now + (expires_delta or self._expire),
            "iss": self._issuer,
            "aud": self._audience,
        }

        try:
            token = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            logger.error("Failed to sign token for user %s: %s", user_id, e)
            return Err(TokenError(f"Failed to generate token: {e}"))

        return Ok(token)

    def verify_token(self, token: str) -> Result[TokenPayload, InvalidTokenError]:
        """Verify signature, issuer, audience and expiry in one step.

        Every failure yields the same generic InvalidTokenError; the cause
        is only logged at debug level.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": REQUIRED_CLAIMS},
            )
            user_id = claims[USER_ID_CLAIM]
            if not isinstance(user_id, str) or not user_id:
                msg = "userId claim must be a non-empty string"
                raise ValueError(msg)

            payload = TokenPayload(
                user_id=user_id,
                issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            )
        except (jwt.PyJWTError, KeyError, TypeError, ValueError) as e:
            logger.debug("Token rejected (%s): %s", type(e).__name__, e)
            return Err(InvalidTokenError())

        return Ok(payload)
