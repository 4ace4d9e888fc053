from .article import Article
from .category import Category, DEFAULT_CATEGORY_NAMES

__all__ = [
    "Article",
    "Category",
    "DEFAULT_CATEGORY_NAMES",
]
