"""
Request-count-per-window limiting.

Counters are process-local and reset on restart.
"""
import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from starlette.requests import Request


@dataclass
class RateLimitResult:
    allowed: bool
    remaining: int
    retry_after: int


@dataclass
class _Window:
    started_at: float
    count: int = 0


class RateLimiter(ABC):

    @abstractmethod
    async def hit(self, key: str) -> RateLimitResult:
        """Count one request for ``key`` and report whether it may proceed."""

    @abstractmethod
    async def reset(self, key: str | None = None) -> None: ...


class FixedWindowRateLimiter(RateLimiter):
    """
    Allows ``max_requests`` per ``window_seconds`` for each key.

    Every request counts, including rejected ones, so a client hammering the
    endpoint stays blocked until its window ends.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._last_sweep = clock()
        self._lock = asyncio.Lock()

    async def hit(self, key: str) -> RateLimitResult:
        now = self._clock()
        async with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._drop_stale(now)
                self._last_sweep = now

            window = self._windows.get(key)
            if window is None or self._is_stale(window, now):
                window = _Window(started_at=now)
                self._windows[key] = window

            window.count += 1
            retry_after = int(window.started_at + self.window_seconds - now) + 1

            if window.count > self.max_requests:
                return RateLimitResult(allowed=False, remaining=0, retry_after=retry_after)
            return RateLimitResult(
                allowed=True,
                remaining=self.max_requests - window.count,
                retry_after=0,
            )

    async def reset(self, key: str | None = None) -> None:
        async with self._lock:
            if key is None:
                self._windows.clear()
            else:
                self._windows.pop(key, None)

    def __len__(self) -> int:
        return len(self._windows)

    def _is_stale(self, window: _Window, now: float) -> bool:
        return now - window.started_at >= self.window_seconds

    def _drop_stale(self, now: float) -> None:
        stale = [key for key, window in self._windows.items() if self._is_stale(window, now)]
        for key in stale:
            del self._windows[key]


def get_client_ip(request: Request, trust_proxy: bool = False) -> str:
    """Client key for rate limiting; honours X-Forwarded-For only behind a trusted proxy."""
    if trust_proxy:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"
