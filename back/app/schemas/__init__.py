"""
Pydantic schemas package.

This package contains all Pydantic schemas for request/response
validation and serialization.
"""

# Local application imports
from app.schemas.auth import AdminLoginRequest, AdminTokenResponse
from app.schemas.common import BaseResponse, FieldError, HealthResponse, StatusResponse
from app.schemas.complaints import ComplaintCreate, ComplaintStatusUpdate

__all__ = [
    # Auth schemas
    "AdminLoginRequest",
    "AdminTokenResponse",
    # Common schemas
    "BaseResponse",
    "FieldError",
    "HealthResponse",
    "StatusResponse",
    # Complaint schemas
    "ComplaintCreate",
    "ComplaintStatusUpdate",
]
