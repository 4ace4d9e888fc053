from .article_repository import SQLAlchemyArticleRepository
from .category_repository import SQLAlchemyCategoryRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyCategoryRepository",
]
