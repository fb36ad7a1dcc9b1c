# Standard library imports
import time
from uuid import uuid4

# Third-party imports
from fastapi import Request
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

# Local application imports
from app.api.internal.utils.exceptions import error_response, unhandled_error_response
from app.core.monitoring.logging import get_request_logger

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;form-action 'self';"
        "frame-ancestors 'self';img-src 'self' data:;object-src 'none';script-src 'self';"
        "script-src-attr 'none';style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}

PAYLOAD_TOO_LARGE_MESSAGE = "Request entity too large"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds hardening headers to every response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs its outcome and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = request.headers.get("x-request-id") or uuid4().hex
        start = time.perf_counter()
        response = await call_next(request)
        duration = int((time.perf_counter() - start) * 1000)

        response.headers["X-Request-ID"] = request.state.request_id
        logger = get_request_logger(__name__, request)
        logger.info(f"{response.status_code} in {duration}ms")
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns unexpected exceptions into the generic 500 envelope.

    Installed innermost so the error response still passes through CORS,
    request context and security headers on its way out.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return unhandled_error_response(request, exc)


class BodySizeLimitMiddleware:
    """
    Rejects bodies larger than `max_body_size` bytes with 413.

    The declared Content-Length is checked up front; bodies without one
    (chunked uploads) are counted as they are received.
    """

    def __init__(self, app: ASGIApp, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                response = error_response(400, "Invalid Content-Length header")
                await response(scope, receive, send)
                return
            if declared > self.max_body_size:
                get_request_logger(__name__, request).warning(f"Rejected body of {declared} bytes")
                response = error_response(413, PAYLOAD_TOO_LARGE_MESSAGE)
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    get_request_logger(__name__, request).warning(
                        f"Rejected streamed body after {received} bytes"
                    )
                    # Re-raised by the route body parser and rendered by the HTTP error handler
                    raise HTTPException(status_code=413, detail=PAYLOAD_TOO_LARGE_MESSAGE)
            return message

        await self.app(scope, limited_receive, send)
