"""
JWT session token management.
"""
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from achilles_auth.config import Settings


def create_access_token(
    settings: Settings,
    user_id: str,
    is_admin: bool = False,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token.
    
    Args:
        settings: Application settings holding the signing secret
        user_id: Account identifier, stored in the ``sub`` and ``userId`` claims
        is_admin: Add an ``isAdmin: true`` claim (admin login only)
        expires_delta: Optional custom expiration time
        
    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)
    
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": user_id,
        "userId": user_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    if is_admin:
        payload["isAdmin"] = True
    
    return jwt.encode(
        payload,
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(settings: Settings, token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.
    
    Args:
        settings: Application settings holding the signing secret
        token: The JWT token string to decode
        
    Returns:
        Decoded payload dictionary with keys: sub, userId, exp, iat (and isAdmin)
        
    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
    )


__all__ = ["create_access_token", "decode_token", "JWTError"]
