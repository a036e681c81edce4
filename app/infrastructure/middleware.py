import time

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.infrastructure.logging import get_logger
from app.infrastructure.rate_limit import RateLimiter, get_client_ip


logger = get_logger(__name__)

GLOBAL_RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
            client=request.client.host if request.client else None,
        )
        return response


class GlobalRateLimitMiddleware(BaseHTTPMiddleware):
    """Loose per-client limit applied to every request."""

    def __init__(self, app: ASGIApp, limiter: RateLimiter, trust_proxy: bool = False):
        super().__init__(app)
        self.limiter = limiter
        self.trust_proxy = trust_proxy

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client_ip = get_client_ip(request, self.trust_proxy)
        result = await self.limiter.hit(client_ip)
        if not result.allowed:
            logger.warning("global_rate_limit_exceeded", client=client_ip, path=request.url.path)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"success": False, "message": GLOBAL_RATE_LIMIT_MESSAGE},
                headers={"Retry-After": str(result.retry_after)},
            )
        return await call_next(request)
