"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from geoalbum.domain.shared.result import Err, Ok
from geoalbum_auth.exceptions import InvalidTokenError
from geoalbum_auth.services import JWTService

USER_ID = "0b6c7a4e-2f1d-4c3b-9a8e-5d6f7a8b9c0d"
SECRET = "test-secret-key-12345"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key="test-secret-key")
        assert service.expires_in_seconds == 7 * 24 * 3600

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_custom_expiry(self):
        service = JWTService(secret_key="test-secret", expire_hours=1)
        assert service.expires_in_seconds == 3600


class TestIssueAndVerify:
    """Tests for token issuance and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)

    def test_round_trip(self):
        token = self.service.issue_token(USER_ID).unwrap()

        result = self.service.verify_token(token)

        assert isinstance(result, Ok)
        assert result.value.user_id == USER_ID
        assert result.value.expires_at > result.value.issued_at

    def test_token_claims(self):
        token = self.service.issue_token(USER_ID).unwrap()

        claims = jwt.decode(token, options={"verify_signature": False})

        assert claims["userId"] == USER_ID
        assert claims["iss"] == "geoalbum"
        assert claims["aud"] == "geoalbum-web"
        assert {"iat", "exp"} <= claims.keys()

    def test_expired_token_rejected(self):
        token = self.service.issue_token(
            USER_ID,
            expires_delta=timedelta(seconds=-1),
        ).unwrap()

        result = self.service.verify_token(token)

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidTokenError)
        assert result.error.message == "Invalid or expired token"

    def test_tampered_token_rejected(self):
        token = self.service.issue_token(USER_ID).unwrap()
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        assert isinstance(self.service.verify_token(tampered), Err)

    def test_other_secret_rejected(self):
        token = JWTService(secret_key="another-secret").issue_token(USER_ID).unwrap()
        assert isinstance(self.service.verify_token(token), Err)

    def test_wrong_issuer_rejected(self):
        token = (
            JWTService(secret_key=SECRET, issuer="someone-else")
            .issue_token(USER_ID)
            .unwrap()
        )
        assert isinstance(self.service.verify_token(token), Err)

    def test_wrong_audience_rejected(self):
        token = (
            JWTService(secret_key=SECRET, audience="mobile")
            .issue_token(USER_ID)
            .unwrap()
        )
        assert isinstance(self.service.verify_token(token), Err)

    def test_missing_user_id_rejected(self):
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "iat": now,
                "exp": now + timedelta(hours=1),
                "iss": "geoalbum",
                "aud": "geoalbum-web",
            },
            SECRET,
            algorithm="HS256",
        )

        assert isinstance(self.service.verify_token(token), Err)

    def test_garbage_rejected(self):
        result = self.service.verify_token("not-a-jwt")

        assert isinstance(result, Err)
        assert result.error.message == "Invalid or expired token"

    def test_all_failures_share_one_message(self):
        expired = self.service.issue_token(
            USER_ID, expires_delta=timedelta(seconds=-1)
        ).unwrap()
        foreign = JWTService(secret_key="x").issue_token(USER_ID).unwrap()

        messages = {
            self.service.verify_token(token).error.message
            for token in (expired, foreign, "garbage")
        }

        assert messages == {"Invalid or expired token"}
