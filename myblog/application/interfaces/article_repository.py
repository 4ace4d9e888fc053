"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from myblog.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None:
        """Retrieve a single article by its URL slug."""
        ...

    @abstractmethod
    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        exclude_archived: bool = False,
        category_id: str | None = None,
    ) -> list[Article]:
        """Retrieve a paginated list of articles, newest first."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Write every mutable field of an existing article."""
        ...
