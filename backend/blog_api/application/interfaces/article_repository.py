"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import Article, ArticleDraft, ArticleFilters, ArticlePage, ArticlePatch


class ArticleRepository(ABC):
    """Port for article storage — implemented in the infrastructure layer.

    Lookups signal a missing article by returning ``None`` / ``False``;
    turning that into an error is the caller's job.
    """

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def find_all(self, filters: ArticleFilters | None = None) -> list[Article]:
        """Return every matching article, newest first."""
        ...

    @abstractmethod
    async def paginate(
        self, page: int, limit: int, filters: ArticleFilters | None = None
    ) -> ArticlePage:
        """Return one page of matching articles; out-of-range pages are clamped."""
        ...

    @abstractmethod
    async def count(self, filters: ArticleFilters | None = None) -> int:
        """Number of articles matching the filters."""
        ...

    @abstractmethod
    async def create(self, draft: ArticleDraft) -> Article:
        """Store a new article and return it with its generated ID and timestamps."""
        ...

    @abstractmethod
    async def update(self, article_id: str, patch: ArticlePatch) -> Article | None:
        """Merge a patch into an existing article. Returns None if not found."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
