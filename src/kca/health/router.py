"""Health, readiness, and version endpoints."""

from fastapi import APIRouter

from kca.config import get_settings
from kca.database import get_store
from kca.db.models import utcnow

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 if the process is alive."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness() -> dict[str, object]:
    """Readiness probe: checks the data store is initialized."""
    checks: dict[str, object] = {}
    try:
        store = get_store()
        checks["store"] = "ok"
        checks["problems"] = len(store.problems)
    except RuntimeError as exc:
        checks["store"] = f"error: {exc}"

    return {"status": "ready" if checks["store"] == "ok" else "degraded", "checks": checks}


@router.get("/version")
async def version() -> dict[str, str]:
    """Return API version and environment."""
    settings = get_settings()
    return {
        "version": settings.app_version,
        "environment": settings.environment,
    }


@router.get("/api/health")
async def api_health() -> dict[str, str]:
    """Frontend-facing status check."""
    return {
        "status": "ok",
        "timestamp": utcnow().isoformat(),
        "version": get_settings().app_version,
    }
