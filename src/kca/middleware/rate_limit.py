"""In-process fixed window rate limiting middleware."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = structlog.get_logger()

# Paths exempt from rate limiting
_EXEMPT_PATHS = frozenset({"/health", "/ready"})


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    remaining: int
    retry_after: int


class FixedWindowRateLimiter:
    """Count hits per key in fixed windows that start at a key's first hit.

    Expired windows are pruned at most once per window length, so memory is
    bounded by the number of keys seen in the last two windows.
    """

    def __init__(
        self,
        limit: int = 100,
        window_seconds: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, tuple[float, int]] = {}
        self._last_prune = clock()

    def __len__(self) -> int:
        return len(self._windows)

    def hit(self, key: str) -> RateLimitDecision:
        """Record one request for ``key`` and decide whether it may proceed."""
        now = self._clock()
        self._maybe_prune(now)

        start, count = self._windows.get(key, (now, 0))
        if now - start >= self.window_seconds:
            start, count = now, 0
        count += 1
        self._windows[key] = (start, count)

        retry_after = max(1, math.ceil(start + self.window_seconds - now))
        return RateLimitDecision(
            allowed=count <= self.limit,
            remaining=max(0, self.limit - count),
            retry_after=retry_after,
        )

    def reset(self) -> None:
        self._windows.clear()
        self._last_prune = self._clock()

    def _maybe_prune(self, now: float) -> None:
        if now - self._last_prune < self.window_seconds:
            return
        self._windows = {k: v for k, v in self._windows.items() if now - v[0] < self.window_seconds}
        self._last_prune = now


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rate limit requests per client IP using an injected limiter."""

    def __init__(self, app: Any, limiter: FixedWindowRateLimiter) -> None:  # noqa: ANN401
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Check rate limit, return 429 if exceeded."""
        if request.url.path in _EXEMPT_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        decision = self.limiter.hit(client_ip)

        if not decision.allowed:
            logger.warning("rate_limit_exceeded", client_ip=client_ip, path=request.url.path)
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests, please try again later."},
                headers={
                    "Retry-After": str(decision.retry_after),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Limit": str(self.limiter.limit),
                },
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
        response.headers["X-RateLimit-Limit"] = str(self.limiter.limit)
        return response
