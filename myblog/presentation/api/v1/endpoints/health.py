"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from myblog.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report liveness along with the running service name, version and environment."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
