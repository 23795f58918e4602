"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from vistagram.core.settings import MAX_PROFILE_NAME_LENGTH


class SessionRequest(BaseModel):
    """Sign-in request carrying the identity provider's ID token."""

    id_token: str = Field(..., min_length=1, description="ID token issued by the identity provider")


class UserResponse(BaseModel):
    """Profile information for a signed-in user."""

    id: int
    email: str
    name: str | None
    image: str | None
    bio: str | None

    model_config = ConfigDict(from_attributes=True)


class SessionResponse(BaseModel):
    """Response returned after successful sign-in."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type (always 'bearer')")
    user: UserResponse


class ProfileUpdateRequest(BaseModel):
    """Schema for updating user profile information.

    Over-long names fail schema validation; blank names and over-long bios
    are rejected by the endpoint with a 400.
    """

    name: str = Field(..., max_length=MAX_PROFILE_NAME_LENGTH, description="Display name")
    image: str | None = Field(None, description="Avatar URL")
    bio: str | None = Field(None, description="Short biography")


class ProfileUpdateResponse(BaseModel):
    """Envelope returned after a profile update."""

    user: UserResponse
