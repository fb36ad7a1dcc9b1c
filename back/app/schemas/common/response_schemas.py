# Standard library imports
from typing import Any

# Third-party imports
from pydantic import BaseModel

class FieldError(BaseModel):
    field: str
    message: str


# Error details: a message string, a list of field errors, or a dict.
DetailsType = str | list[FieldError] | dict[str, Any]


class ErrorDetails(BaseModel):
    code: str
    message: str
    details: DetailsType | None = None


class BaseResponse(BaseModel):
    ok: bool
    error: ErrorDetails | None = None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        kwargs.setdefault("mode", "json")
        data = super().model_dump(**kwargs)

        # Drop empty error details
        error = data.get("error")
        if isinstance(error, dict) and error.get("details") is None:
            error.pop("details", None)
        if data.get("error") is None:
            data.pop("error", None)

        return data

    @classmethod
    def failure(cls, code: str, message: str, details: DetailsType | None = None) -> "BaseResponse":
        return cls(ok=False, error=ErrorDetails(code=code, message=message, details=details))


class StatusResponse(BaseModel):
    status: str
    message: str


class HealthResponse(BaseModel):
    status: str
    version: str
    complaints: int
