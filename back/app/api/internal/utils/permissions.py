# Standard library imports
from typing import Any

# Third-party imports
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import jwt

# Local application imports
from app.core.monitoring.logging import get_request_logger
from app.services.auth import decode_admin_token, is_admin

bearer_scheme = HTTPBearer(auto_error=False)

# Standard auth error responses
AUTH_ERROR_MISSING_TOKEN = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Missing token",
    headers={"WWW-Authenticate": "Bearer"},
)

AUTH_ERROR_INVALID_TOKEN = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid token",
    headers={"WWW-Authenticate": "Bearer"},
)

AUTH_ERROR_TOKEN_EXPIRED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Token has expired",
    headers={"WWW-Authenticate": "Bearer"},
)

AUTH_ERROR_NOT_ADMIN = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Admin access required",
)


async def admin_only(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any]:
    """
    Dependency for endpoints reserved to the administrator.

    Fully stateless: the bearer token is checked for signature, expiry
    and the admin role claim. Returns the token claims.
    """
    logger = get_request_logger(__name__, request)

    if credentials is None or not credentials.credentials:
        raise AUTH_ERROR_MISSING_TOKEN

    try:
        payload = decode_admin_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        logger.warning("Rejected expired admin token")
        raise AUTH_ERROR_TOKEN_EXPIRED
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected invalid admin token: {e}")
        raise AUTH_ERROR_INVALID_TOKEN

    if not is_admin(payload):
        logger.warning("Rejected token without admin role")
        raise AUTH_ERROR_NOT_ADMIN

    request.state.admin = payload
    return payload
