# Local application imports
from app.schemas.auth.admin_schemas import AdminLoginRequest, AdminTokenResponse

__all__ = [
    "AdminLoginRequest",
    "AdminTokenResponse",
]
