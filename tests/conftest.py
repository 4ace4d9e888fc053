"""Shared in-memory fakes for the repository ports."""

import pytest

from myblog.application.interfaces import ArticleRepository, CategoryRepository
from myblog.domain.entities import Article, Category


class FakeCategoryRepository(CategoryRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._categories: dict[str, Category] = {}

    async def get_by_id(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)

    async def get_all(self, exclude_archived: bool = False) -> list[Category]:
        categories = sorted(self._categories.values(), key=lambda c: c.category_name)
        if exclude_archived:
            categories = [c for c in categories if not c.is_archived]
        return categories

    async def count(self) -> int:
        return len(self._categories)

    async def create(self, category: Category) -> Category:
        self._categories[category.id] = category
        return category

    async def update(self, category: Category) -> Category:
        if category.id not in self._categories:
            raise ValueError(f"Category {category.id} not found")
        self._categories[category.id] = category
        return category


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[str, Article] = {}

    async def get_by_id(self, article_id: str) -> Article | None:
        return self._articles.get(article_id)

    async def get_by_slug(self, slug: str) -> Article | None:
        return next((a for a in self._articles.values() if a.slug == slug), None)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        exclude_archived: bool = False,
        category_id: str | None = None,
    ) -> list[Article]:
        articles = sorted(self._articles.values(), key=lambda a: a.created_on, reverse=True)
        if exclude_archived:
            articles = [a for a in articles if not a.is_archived]
        if category_id is not None:
            articles = [a for a in articles if a.category_id == category_id]
        return articles[skip : skip + limit]

    async def create(self, article: Article) -> Article:
        self._articles[article.id] = article
        return article

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = article
        return article


@pytest.fixture
def category_repo() -> FakeCategoryRepository:
    return FakeCategoryRepository()


@pytest.fixture
def article_repo() -> FakeArticleRepository:
    return FakeArticleRepository()
