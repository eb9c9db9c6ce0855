"""Token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from wordrecall.config import get_settings

ALGORITHM = "HS256"


class TokenWithRefresh(BaseModel):
    """DTO for token pair with access and refresh tokens."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int


def _access_secret() -> str:
    return get_settings().SECRET_KEY


def _refresh_secret() -> str:
    settings = get_settings()
    return settings.REFRESH_TOKEN_SECRET_KEY or settings.SECRET_KEY


def create_access_token(user_id: int) -> str:
    """Create an access token for a user."""
    expire = datetime.now(UTC) + timedelta(minutes=get_settings().ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": str(user_id), "exp": expire, "type": "access"}
    return jwt.encode(to_encode, _access_secret(), algorithm=ALGORITHM)


def create_refresh_token(user_id: int) -> str:
    """Create a refresh token for a user."""
    expire = datetime.now(UTC) + timedelta(days=get_settings().REFRESH_TOKEN_EXPIRE_DAYS)
    to_encode = {"sub": str(user_id), "exp": expire, "type": "refresh"}
    return jwt.encode(to_encode, _refresh_secret(), algorithm=ALGORITHM)


def _decode_subject(token: str, secret: str, expected_type: str) -> int | None:
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        if payload.get("type") != expected_type:
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return int(user_id)
    except (InvalidTokenError, ValueError):
        return None


def verify_access_token(token: str) -> int | None:
    """Verify an access token and return the user_id if valid."""
    # Refresh tokens are only accepted at the /refresh endpoint
    return _decode_subject(token, _access_secret(), "access")


def verify_refresh_token(token: str) -> int | None:
    """Verify a refresh token and return the user_id if valid."""
    return _decode_subject(token, _refresh_secret(), "refresh")


def create_token_pair(user_id: int) -> TokenWithRefresh:
    """Create a token pair (access + refresh) for a user."""
    return TokenWithRefresh(
        access_token=create_access_token(user_id),
        refresh_token=create_refresh_token(user_id),
        token_type="bearer",  # noqa: S106
        expires_in=get_settings().ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
