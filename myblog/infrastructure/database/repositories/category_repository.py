"""SQLAlchemy-backed category repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from myblog.application.interfaces import CategoryRepository
from myblog.domain.entities import Category
from myblog.infrastructure.database.models import CategoryModel


class SQLAlchemyCategoryRepository(CategoryRepository):
    """Implements the CategoryRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            category_name=model.category_name,
            is_archived=model.is_archived,
            created_on=model.created_on,
            modified_on=model.modified_on,
        )

    async def get_by_id(self, category_id: str) -> Category | None:
        result = await self._session.get(CategoryModel, category_id)
        return self._to_entity(result) if result else None

    async def get_all(self, exclude_archived: bool = False) -> list[Category]:
        stmt = select(CategoryModel)
        if exclude_archived:
            stmt = stmt.where(CategoryModel.is_archived.is_(False))
        stmt = stmt.order_by(CategoryModel.category_name)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(CategoryModel))
        return result.scalar_one()

    async def create(self, category: Category) -> Category:
        model = CategoryModel(
            id=category.id,
            category_name=category.category_name,
            is_archived=category.is_archived,
            created_on=category.created_on,
            modified_on=category.modified_on,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, category: Category) -> Category:
        model = await self._session.get(CategoryModel, category.id)
        if model is None:
            raise ValueError(f"Category {category.id} not found in database")
        model.category_name = category.category_name
        model.is_archived = category.is_archived
        model.modified_on = category.modified_on
        await self._session.flush()
        return self._to_entity(model)
