from app.infrastructure.rate_limit.limiter import (
    FixedWindowRateLimiter,
    RateLimiter,
    RateLimitResult,
    get_client_ip,
)


__all__ = ["FixedWindowRateLimiter", "RateLimiter", "RateLimitResult", "get_client_ip"]
