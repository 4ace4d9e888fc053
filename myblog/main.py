"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from myblog.config import get_settings
from myblog.application.services import CategoryService
from myblog.domain.entities import DEFAULT_CATEGORY_NAMES
from myblog.infrastructure.database import Base, engine
from myblog.infrastructure.database.session import async_session_factory
from myblog.infrastructure.database.repositories import SQLAlchemyCategoryRepository
from myblog.infrastructure.logging.log_config import setup_logging
from myblog.presentation.api.router import router as api_router
from myblog.presentation.middleware.security_headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    Non-PostgreSQL URLs are skipped.
    """
    from urllib.parse import urlparse

    import asyncpg

    settings = get_settings()
    if not settings.database_url.startswith("postgresql"):
        return
    parsed = urlparse(settings.database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    # asyncpg wants a plain postgresql:// DSN pointing at the maintenance database
    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"
    maintenance_url = maintenance_url.replace("postgresql+asyncpg://", "postgresql://", 1)

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_default_categories() -> None:
    """Insert the default category list into an empty categories table.

    Idempotent — safe to call on every startup.
    """
    try:
        async with async_session_factory() as session:
            service = CategoryService(SQLAlchemyCategoryRepository(session))
            await service.seed_defaults(DEFAULT_CATEGORY_NAMES)
            await session.commit()
    except Exception as exc:
        logger.warning("Could not seed default categories: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — prepare the database before serving requests."""
    settings = get_settings()
    setup_logging(settings)

    # 0. Ensure the PostgreSQL database exists (auto-create if missing)
    await _ensure_database_exists()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Seed default categories
    if settings.seed_default_categories:
        await _seed_default_categories()

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    # Shutdown
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.security_headers_enabled:
        app.add_middleware(SecurityHeadersMiddleware)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "myblog.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
