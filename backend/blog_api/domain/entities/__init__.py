from .article import UNSET, Article, ArticleDraft, ArticlePatch
from .listing import ArticleFilters, ArticlePage, PaginationMeta, QuickSearchResult

__all__ = [
    "UNSET",
    "Article",
    "ArticleDraft",
    "ArticlePatch",
    "ArticleFilters",
    "ArticlePage",
    "PaginationMeta",
    "QuickSearchResult",
]
