# Local application imports
from app.schemas.common.response_schemas import BaseResponse, ErrorDetails, FieldError, HealthResponse, StatusResponse

__all__ = ["BaseResponse", "ErrorDetails", "FieldError", "HealthResponse", "StatusResponse"]
