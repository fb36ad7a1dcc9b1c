# Local application imports
from app.services.rate_limit.rate_limiter import RateLimitResult, SlidingWindowRateLimiter

__all__ = ["RateLimitResult", "SlidingWindowRateLimiter"]
