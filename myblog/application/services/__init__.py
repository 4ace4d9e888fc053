from .article_service import ArticleService
from .category_service import CategoryService

__all__ = [
    "ArticleService",
    "CategoryService",
]
