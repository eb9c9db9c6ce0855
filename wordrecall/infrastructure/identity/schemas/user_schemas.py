from pydantic import BaseModel, Field


class UserDetailsResponse(BaseModel):
    """Schema for returning user details."""

    id: int = Field(..., description="User id")
    email: str = Field(..., description="User email")
    name: str | None = Field(None, description="Optional display name")
    display_name: str = Field(..., description="Name shown next to the user's lists")


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    email: str = Field(
        ..., min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$", description="Email"
    )
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    name: str | None = Field(None, max_length=100, description="Optional display name")


class RefreshTokenRequest(BaseModel):
    """Request body for refresh token (non-browser clients)."""

    refresh_token: str | None = None
