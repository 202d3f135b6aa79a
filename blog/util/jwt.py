"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from blog.config import AuthSettings


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(claims: dict[str, Any], settings: AuthSettings) -> str:
    """Sign a JWT.

    iat and exp are filled in from the expiry setting unless present.

    Args:
        claims: Token claims
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    payload = {
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.jwt_expiry_minutes)).timestamp()),
        **claims,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> dict[str, Any]:
    """Verify and decode a JWT.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Decoded claims

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
