"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from myblog.application.interfaces import ArticleRepository
from myblog.domain.entities import Article
from myblog.domain.exceptions import DuplicateEntityError
from myblog.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            introduction=model.introduction,
            content=model.content,
            cover_image_url=model.cover_image_url,
            slug=model.slug,
            author_id=model.author_id,
            category_id=model.category_id,
            is_published=model.is_published,
            published_on=model.published_on,
            is_archived=model.is_archived,
            created_on=model.created_on,
            modified_on=model.modified_on,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            id=entity.id,
            title=entity.title,
            introduction=entity.introduction,
            content=entity.content,
            cover_image_url=entity.cover_image_url,
            slug=entity.slug,
            author_id=entity.author_id,
            category_id=entity.category_id,
            is_published=entity.is_published,
            published_on=entity.published_on,
            is_archived=entity.is_archived,
            created_on=entity.created_on,
            modified_on=entity.modified_on,
        )

    async def get_by_id(self, article_id: str) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        exclude_archived: bool = False,
        category_id: str | None = None,
    ) -> list[Article]:
        stmt = select(ArticleModel)
        if exclude_archived:
            stmt = stmt.where(ArticleModel.is_archived.is_(False))
        if category_id is not None:
            stmt = stmt.where(ArticleModel.category_id == category_id)
        stmt = stmt.order_by(ArticleModel.created_on.desc()).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._flush(article)
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.introduction = article.introduction
        model.content = article.content
        model.cover_image_url = article.cover_image_url
        model.slug = article.slug
        model.category_id = article.category_id
        model.is_published = article.is_published
        model.published_on = article.published_on
        model.is_archived = article.is_archived
        model.modified_on = article.modified_on
        await self._flush(article)
        return self._to_entity(model)

    async def _flush(self, article: Article) -> None:
        """Flush pending changes; a slug taken by a concurrent write surfaces as a duplicate."""
        try:
            await self._session.flush()
        except IntegrityError as e:
            if "slug" not in str(e.orig):
                raise
            raise DuplicateEntityError("Article", "slug", article.slug) from e
