from .article_repository import ArticleRepository
from .category_repository import CategoryRepository

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
]
