from .article_repository import InMemoryArticleRepository
from .seed import SAMPLE_ARTICLES

__all__ = [
    "InMemoryArticleRepository",
    "SAMPLE_ARTICLES",
]
