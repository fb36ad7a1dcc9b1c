# Third-party imports
from fastapi import APIRouter, HTTPException, Request, status

# Local application imports
from app.core.monitoring.logging import get_request_logger
from app.schemas.auth import AdminLoginRequest, AdminTokenResponse
from app.services.auth import create_admin_token, verify_admin_password

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/login", response_model=AdminTokenResponse)
async def admin_login(request: Request, login_data: AdminLoginRequest | None = None) -> AdminTokenResponse:
    """
    Exchange the admin password for a bearer token valid for 8 hours.

    A missing body is treated like a missing password.

    Raises:
        HTTPException: 401 if the password does not match
    """
    logger = get_request_logger(__name__, request)

    if not verify_admin_password(login_data.password if login_data else None):
        logger.warning("Failed admin login attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin password")

    logger.info("Admin logged in")
    return AdminTokenResponse(token=create_admin_token())
