import os
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import jwt

SECRET_KEY = os.environ.get("DB_SEO_SECRET_KEY", "dev-secret-unsafe")
ALGORITHM = "HS256"
NONCE_EXPIRE_MINUTES = 60 * 24

NONCE_TOKEN_TYPE = "nonce"


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
    now_utc: datetime | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Claims to encode in the token
        expires_delta: Optional custom expiration delta
        now_utc: Current UTC time (for testing/determinism). Defaults to datetime.now(UTC).
    """
    to_encode = data.copy()
    current_time = now_utc if now_utc is not None else datetime.now(UTC)

    if expires_delta:
        expire = current_time + expires_delta
    else:
        expire = current_time + timedelta(minutes=15)

    to_encode.update({"exp": expire})
    encoded_jwt: str = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        return cast(dict[str, Any], payload)
    except jwt.JWTError:
        return None


def create_nonce(
    action: str,
    user_id: Any,
    ttl_minutes: int = NONCE_EXPIRE_MINUTES,
    now_utc: datetime | None = None,
) -> str:
    """Issue a form nonce bound to an action and a user."""
    return create_access_token(
        {"typ": NONCE_TOKEN_TYPE, "act": action, "sub": str(user_id)},
        timedelta(minutes=ttl_minutes),
        now_utc=now_utc,
    )


def verify_nonce(token: str, action: str, user_id: Any) -> bool:
    """
    Check a form nonce.

    Fails on a bad signature, expiry, another action or another user.
    Access tokens are not accepted as nonces.
    """
    payload = decode_access_token(token)
    if not payload:
        return False
    return (
        payload.get("typ") == NONCE_TOKEN_TYPE
        and payload.get("act") == action
        and payload.get("sub") == str(user_id)
    )
