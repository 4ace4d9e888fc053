"""Application service (use case) for Category operations."""

import logging
from collections.abc import Iterable

from myblog.application.interfaces import CategoryRepository
from myblog.application.schemas import CategoryCreate, CategoryUpdate
from myblog.domain.entities import Category
from myblog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class CategoryService:
    """Orchestrates category CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: CategoryRepository):
        self._repository = repository

    async def get_category(self, category_id: str) -> Category:
        category = await self._repository.get_by_id(category_id)
        if category is None:
            logger.warning("Category not found: %s", category_id)
            raise EntityNotFoundError("Category", category_id)
        return category

    async def list_categories(self, exclude_archived: bool = False) -> list[Category]:
        return await self._repository.get_all(exclude_archived=exclude_archived)

    async def create_category(self, data: CategoryCreate) -> Category:
        category = await self._repository.create(Category(category_name=data.category_name))
        logger.info("Category created: %s", category.category_name)
        return category

    async def update_category(self, category_id: str, data: CategoryUpdate) -> Category:
        category = await self.get_category(category_id)
        # Archiving a category leaves its articles untouched.
        category.update(data.category_name, data.is_archived)
        updated = await self._repository.update(category)
        logger.info("Category updated: %s", updated.category_name)
        return updated

    async def seed_defaults(self, names: Iterable[str]) -> int:
        """Create ``names`` as categories when none exist yet. Returns how many were added."""
        if await self._repository.count() > 0:
            logger.debug("Categories already present, skipping seed")
            return 0
        added = 0
        for name in names:
            await self._repository.create(Category(category_name=name))
            added += 1
        logger.info("Seeded %d default categories", added)
        return added
