"""Identity context schemas."""

from wordrecall.infrastructure.identity.schemas.user_schemas import (
    RefreshTokenRequest,
    UserDetailsResponse,
    UserRegisterRequest,
)

__all__ = [
    "RefreshTokenRequest",
    "UserDetailsResponse",
    "UserRegisterRequest",
]
