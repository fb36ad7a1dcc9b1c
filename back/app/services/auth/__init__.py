# Local application imports
from app.services.auth.token_services import (
    ADMIN_ROLE,
    create_admin_token,
    decode_admin_token,
    is_admin,
    verify_admin_password,
)

__all__ = [
    "ADMIN_ROLE",
    "create_admin_token",
    "decode_admin_token",
    "is_admin",
    "verify_admin_password",
]
