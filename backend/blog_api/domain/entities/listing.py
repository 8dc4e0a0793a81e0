"""Domain entities for article listings: filters, pages, quick search."""

import math
from dataclasses import dataclass, field

from .article import Article


@dataclass(frozen=True)
class ArticleFilters:
    """Listing criteria. Predicates combine with AND; tags match any-of."""

    published: bool | None = None
    tags: tuple[str, ...] | None = None
    search: str | None = None

    def matches(self, article: Article) -> bool:
        if self.published is not None and article.published != self.published:
            return False
        if self.tags and not any(tag in article.tags for tag in self.tags):
            return False
        if self.search:
            needle = self.search.lower()
            haystacks = [article.title, article.content]
            if article.excerpt:
                haystacks.append(article.excerpt)
            if not any(needle in text.lower() for text in haystacks):
                return False
        return True


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def compute(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """Clamp the requested page into [1, total_pages]; an empty result still has one page."""
        total_pages = max(1, math.ceil(total / limit))
        safe_page = min(max(1, page), total_pages)
        return cls(page=safe_page, limit=limit, total=total, total_pages=total_pages)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class ArticlePage:
    """One page of a filtered, newest-first listing."""

    articles: list[Article]
    pagination: PaginationMeta


@dataclass
class QuickSearchResult:
    query: str
    articles: list[Article] = field(default_factory=list)
    total: int = 0

    @property
    def returned(self) -> int:
        return len(self.articles)
