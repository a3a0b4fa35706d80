"""Middleware registration."""

from fastapi import FastAPI

from kca.config import Settings
from kca.middleware.cors import setup_cors
from kca.middleware.error_handler import setup_error_handlers
from kca.middleware.logging import setup_logging
from kca.middleware.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from kca.middleware.request_id import RequestIdMiddleware


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware in the correct order.

    FastAPI/Starlette executes middleware in reverse-add order (last added = outermost).
    CORS must be outermost so it wraps error responses from inner middleware (e.g. 429).
    The limiter is kept on ``app.state.rate_limiter`` so it can be inspected or reset.
    """
    setup_logging(settings)
    setup_error_handlers(app)
    limiter = FixedWindowRateLimiter(
        limit=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
    app.state.rate_limiter = limiter
    app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.add_middleware(RequestIdMiddleware)
    setup_cors(app, settings)  # added last, so outermost, so it wraps 429 responses
