"""CORS for the web frontend."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kca.config import Settings

# Any local origin is accepted when debug is on.
_LOCAL_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the configured frontend origins to call the API with a bearer token."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=_LOCAL_ORIGIN_REGEX if settings.debug else None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-Id"],
        expose_headers=["X-Request-Id", "X-RateLimit-Remaining", "X-RateLimit-Limit", "Retry-After"],
        max_age=600,
    )
