# Standard library imports
from datetime import UTC, datetime, timedelta
import secrets
from typing import Any
from uuid import uuid4

# Third-party imports
import jwt

# Local application imports
from app.settings import settings

ADMIN_ROLE = "admin"


def verify_admin_password(password: str | None) -> bool:
    """
    Compare the supplied password with the configured admin secret.
    """
    if not password:
        return False
    return secrets.compare_digest(password.encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8"))


def create_admin_token(
    issued_at: datetime | None = None,
    expires_delta: timedelta | None = None,
    role: str = ADMIN_ROLE,
) -> str:
    """
    Create a signed JWT asserting the admin role.

    Args:
        issued_at: Optional issue time, defaults to now
        expires_delta: Optional custom lifetime, defaults to ADMIN_TOKEN_EXPIRE_MINUTES
        role: Role claim to embed

    Returns:
        The encoded token
    """
    now = issued_at or datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.ADMIN_TOKEN_EXPIRE_MINUTES))

    to_encode = {
        "role": role,
        "exp": expire,  # Expiration time
        "iat": now,  # Issued at time
        "token_type": "access",  # nosec B105
        "jti": str(uuid4()),  # JWT ID for tracking
    }

    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_admin_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.PyJWTError: If the token is malformed or signed with another key
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )


def is_admin(payload: dict[str, Any]) -> bool:
    return payload.get("role") == ADMIN_ROLE
