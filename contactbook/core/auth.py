"""Bearer token issuing and checking for the contact editors."""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from contactbook.settings import settings

DEV_SECRET_KEY = "dev-secret-key-change-in-production"

if settings.environment == "production" and settings.jwt_secret_key == DEV_SECRET_KEY:
    raise RuntimeError("JWT_SECRET_KEY must be set when ENVIRONMENT=production")


def create_access_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """Sign a token carrying ``data``.

    Args:
        data: Claims to sign, normally ``{"sub": str(user.id)}``
        expires_delta: Lifetime; defaults to the configured expiry minutes

    Returns:
        Encoded JWT
    """
    lifetime = expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    claims = {**data, "exp": datetime.now(timezone.utc) + lifetime}
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Claims of a valid token, or None when it is malformed, forged or expired."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
