"""Application service (use case) for Article operations."""

import logging
from datetime import datetime

from myblog.application.interfaces import ArticleRepository, CategoryRepository
from myblog.application.schemas import ArticleCreate, ArticleUpdate
from myblog.domain.entities import Article
from myblog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from myblog.domain.slug import get_slug

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository ports (DI)."""

    def __init__(self, repository: ArticleRepository, category_repository: CategoryRepository):
        self._repository = repository
        self._categories = category_repository

    async def get_article(self, article_id: str) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            logger.warning("Article not found: %s", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_article_by_slug(self, slug: str) -> Article:
        article = await self._repository.get_by_slug(slug)
        if article is None:
            logger.warning("Article not found for slug: %s", slug)
            raise EntityNotFoundError("Article", slug)
        return article

    async def list_articles(
        self,
        skip: int = 0,
        limit: int = 100,
        exclude_archived: bool = False,
        category_id: str | None = None,
    ) -> list[Article]:
        return await self._repository.get_all(
            skip=skip,
            limit=limit,
            exclude_archived=exclude_archived,
            category_id=category_id,
        )

    async def create_article(self, data: ArticleCreate) -> Article:
        slug = (data.slug or "").strip() or get_slug(data.title)
        # Constructing the entity validates title/content before any lookup.
        article = Article(
            title=data.title,
            introduction=data.introduction,
            content=data.content,
            cover_image_url=data.cover_image_url,
            slug=slug,
            author_id=data.author_id,
            category_id=data.category_id,
        )
        if not article.slug:
            article.slug = article.id
        await self._ensure_category_exists(data.category_id)
        await self._ensure_slug_available(article.slug)

        created = await self._repository.create(article)
        logger.info("Article created: %s (%s)", created.title, created.id)
        return created

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        Article.validate(data.title, data.content)
        slug = (data.slug or "").strip() or article.slug
        if slug != article.slug:
            await self._ensure_slug_available(slug, exclude_id=article.id)
        if data.category_id != article.category_id:
            await self._ensure_category_exists(data.category_id)

        article.update(
            title=data.title,
            introduction=data.introduction,
            content=data.content,
            cover_image_url=data.cover_image_url,
            slug=slug,
            category_id=data.category_id,
            is_archived=data.is_archived,
            published_on=data.published_on,
            is_published=data.is_published,
        )
        updated = await self._repository.update(article)
        logger.info("Article updated: %s (archived=%s)", updated.title, updated.is_archived)
        return updated

    async def publish_article(self, article_id: str, published_on: datetime | None = None) -> Article:
        article = await self.get_article(article_id)
        article.publish(published_on)
        return await self._repository.update(article)

    async def unpublish_article(self, article_id: str) -> Article:
        article = await self.get_article(article_id)
        article.unpublish()
        return await self._repository.update(article)

    async def _ensure_category_exists(self, category_id: str) -> None:
        if await self._categories.get_by_id(category_id) is None:
            logger.warning("Category not found: %s", category_id)
            raise EntityNotFoundError("Category", category_id)

    async def _ensure_slug_available(self, slug: str, exclude_id: str | None = None) -> None:
        existing = await self._repository.get_by_slug(slug)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEntityError("Article", "slug", slug)
