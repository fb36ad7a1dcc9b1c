# Standard library imports
from collections.abc import Awaitable, Callable

# Third-party imports
from fastapi import Depends, HTTPException, Request, status

# Local application imports
from app.core.monitoring.logging import get_request_logger
from app.core.storage import ComplaintStore
from app.services.rate_limit import SlidingWindowRateLimiter
from app.settings import settings

UNKNOWN_CLIENT = "unknown"


def get_complaint_store(request: Request) -> ComplaintStore:
    """The store owned by the running application."""
    return request.app.state.complaint_store


def get_client_address(request: Request) -> str:
    """
    Address used for rate limiting and upvote de-duplication.

    The socket peer by default; the first X-Forwarded-For hop only when
    TRUST_PROXY_HEADERS is enabled.
    """
    if settings.TRUST_PROXY_HEADERS:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            first_hop = forwarded_for.split(",")[0].strip()
            if first_hop:
                return first_hop
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def rate_limit(name: str, message: str) -> Callable[[Request, str], Awaitable[None]]:
    """
    Dependency enforcing the application's `name` rate limiter.

    Rejections carry a Retry-After header and have no other side effects.
    """

    async def _check_rate_limit(
        request: Request,
        client_address: str = Depends(get_client_address),
    ) -> None:
        limiter: SlidingWindowRateLimiter = request.app.state.rate_limiters[name]
        result = limiter.hit(client_address)
        if not result.allowed:
            logger = get_request_logger(__name__, request, client=client_address, limiter=name)
            logger.warning("Rate limit exceeded")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=message,
                headers={"Retry-After": str(result.retry_after)},
            )

    return _check_rate_limit
