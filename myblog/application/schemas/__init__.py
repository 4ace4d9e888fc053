from .article import ArticleCreate, ArticleUpdate, ArticlePublish, ArticleResponse
from .category import CategoryCreate, CategoryUpdate, CategoryResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticlePublish",
    "ArticleResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
]
