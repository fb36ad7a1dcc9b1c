# Third-party imports
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import sentry_sdk
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from app.core.monitoring.logging import get_request_logger
from app.schemas.common import BaseResponse, FieldError

# Map specific HTTP status codes to error codes
ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    413: "payload_too_large",
    422: "unprocessable_entity",
    429: "too_many_requests",
    500: "internal_server_error",
}


def error_response(
    status_code: int,
    message: str,
    details: list[FieldError] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    response = BaseResponse.failure(code=ERROR_CODES.get(status_code, "error"), message=message, details=details)
    return JSONResponse(status_code=status_code, content=response.model_dump(), headers=headers)


def format_validation_errors(exc: RequestValidationError) -> list[FieldError]:
    """Turn pydantic errors into a flat `{field, message}` list."""
    field_errors = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix from the location
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        field = ".".join(loc) or "body"

        message = error.get("msg", "")
        val_error_prefix = "Value error, "
        if message.startswith(val_error_prefix):
            message = message[len(val_error_prefix) :]

        field_errors.append(FieldError(field=field, message=message))
    return field_errors


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger = get_request_logger(__name__, request)
    logger.error("Unexpected error", exc_info=exc)
    # Capture the exception in Sentry for monitoring
    sentry_sdk.capture_exception(exc)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,  # noqa
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        # Ensure the detail is a string; if not, convert it
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return error_response(exc.status_code, detail, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,  # noqa
        exc: RequestValidationError,
    ) -> JSONResponse:
        return error_response(400, "Validation failed", details=format_validation_errors(exc))

    # Last resort for failures raised by the middleware stack itself
    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        return unhandled_error_response(request, exc)
