"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from myblog.application.services import ArticleService, CategoryService
from myblog.infrastructure.database.session import get_db_session
from myblog.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with article and category repositories on one session."""
    yield ArticleService(
        SQLAlchemyArticleRepository(session),
        SQLAlchemyCategoryRepository(session),
    )


async def get_category_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CategoryService, None]:
    """Provides a CategoryService instance with its repository wired up."""
    yield CategoryService(SQLAlchemyCategoryRepository(session))
