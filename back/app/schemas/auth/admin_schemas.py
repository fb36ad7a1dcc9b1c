# Third-party imports
from pydantic import BaseModel

# ============================
# ----- Request schemas ------
# ============================


class AdminLoginRequest(BaseModel):
    """Admin login payload. A missing password is treated as a wrong one."""

    password: str | None = None

    model_config = {"json_schema_extra": {"example": {"password": "admin123"}}}


# ============================
# ----- Response schemas -----
# ============================


class AdminTokenResponse(BaseModel):
    token: str
