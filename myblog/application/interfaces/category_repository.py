"""Port for category persistence."""

from abc import ABC, abstractmethod

from myblog.domain.entities import Category


class CategoryRepository(ABC):
    """Port for category persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, category_id: str) -> Category | None:
        ...

    @abstractmethod
    async def get_all(self, exclude_archived: bool = False) -> list[Category]:
        """Retrieve all categories ordered by name."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def create(self, category: Category) -> Category:
        ...

    @abstractmethod
    async def update(self, category: Category) -> Category:
        ...
