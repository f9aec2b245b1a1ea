"""Authentication schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from geoalbum_identity.domain.user import User


class AuthorizationUrlResponse(BaseModel):
    """Where to send the browser to start GitHub sign-in."""

    url: str = Field(..., description="GitHub authorization URL")
    state: str = Field(..., description="Opaque value to check on callback")


class GitHubCallbackRequest(BaseModel):
    """Request schema for completing GitHub sign-in."""

    code: str = Field(
        ...,
        min_length=1,
        description="Authorization code GitHub passed to the redirect URI",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"code": "4f2c9d0e1a7b3c5d8e6f"},
        },
    )


class UserResponse(BaseModel):
    """Response schema for user information."""

    id: str
    username: str
    avatar_url: str | None
    name: str | None
    display_name: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.value,
            username=user.username,
            avatar_url=user.avatar_url,
            name=user.name,
            display_name=user.display_name,
            created_at=user.created_at,
        )


class SignInResponse(BaseModel):
    """Response schema for a completed sign-in."""

    user: UserResponse
    token: str
    token_type: str = "bearer"  # NOQA: S105
    expires_in: int = Field(..., description="Token lifetime in seconds")
    is_new_user: bool

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": "0b6c7a4e-2f1d-4c3b-9a8e-5d6f7a8b9c0d",
                    "username": "octocat",
                    "avatar_url": "https://avatars.githubusercontent.com/u/583231",
                    "name": "The Octocat",
                    "display_name": "The Octocat",
                    "created_at": "2024-01-15T10:30:00Z",
                },
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 604800,
                "is_new_user": True,
            },
        },
    )
