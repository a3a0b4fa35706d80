"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from kca.analytics.router import router as analytics_router
from kca.auth.router import router as auth_router
from kca.config import get_settings
from kca.database import close_store, init_store
from kca.gamification.router import router as gamification_router
from kca.hackathons.router import router as hackathons_router
from kca.health.router import router as health_router
from kca.mentors.router import router as mentors_router
from kca.middleware import setup_middleware
from kca.problems.grader import close_grader, init_grader
from kca.problems.router import router as problems_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    store = init_store(seed=settings.seed_demo_data, daily_bonus_xp=settings.daily_challenge_bonus_xp)
    init_grader(settings.grader_seed)
    logger.info(
        "Store ready: %d users, %d problems (demo data %s)",
        len(store.users), len(store.problems), "on" if settings.seed_demo_data else "off",
    )

    yield

    close_grader()
    close_store()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="KidsCode Arena API",
        description="Backend API for KidsCode Arena, a gamified coding-education platform",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(problems_router)
    app.include_router(hackathons_router)
    app.include_router(mentors_router)
    app.include_router(gamification_router)
    app.include_router(analytics_router)

    return app


app = create_app()
