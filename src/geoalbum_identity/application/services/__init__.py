"""Application services for identity management."""

from geoalbum_identity.application.services.authentication_service import (
    AuthenticationService,
    SignInResult,
    SignInStage,
)

__all__ = ["AuthenticationService", "SignInResult", "SignInStage"]
