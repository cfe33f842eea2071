from datetime import timedelta
from typing import Any

from src.api.auth_utils import (
    create_access_token,
    create_nonce,
    decode_access_token,
    verify_nonce,
)
from src.domain.entities import User


class JWTAuthAdapter:
    """Auth adapter that issues and validates JWT access tokens."""

    def create_token(self, user_id: Any, ttl_minutes: int) -> str:
        return create_access_token({"sub": str(user_id)}, timedelta(minutes=ttl_minutes))

    def validate_token(self, token: str) -> Any | None:
        payload = decode_access_token(token)
        if not payload or payload.get("typ") is not None:
            return None
        return payload.get("sub")


class JWTNonceAdapter:
    """Form nonces as short-lived JWTs bound to (action, user)."""

    def __init__(self, ttl_minutes: int = 60 * 24):
        self.ttl_minutes = ttl_minutes

    def create_nonce(self, action: str, user: User) -> str:
        return create_nonce(action, user.id, self.ttl_minutes)

    def verify_nonce(self, token: str, action: str, user: User) -> bool:
        return verify_nonce(token, action, user.id)
