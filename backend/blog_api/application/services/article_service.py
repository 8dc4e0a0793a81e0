"""Application service (use case) for Article operations."""

import logging

from blog_api.application.interfaces import ArticleRepository
from blog_api.application.schemas import ArticleCreate, ArticleUpdate, PaginationParams, SearchParams
from blog_api.domain.entities import Article, ArticleFilters, ArticlePage, QuickSearchResult
from blog_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

QUICK_SEARCH_MIN_LENGTH = 2
QUICK_SEARCH_MAX_RESULTS = 10


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: str) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(
        self,
        pagination: PaginationParams | None = None,
        search: SearchParams | None = None,
    ) -> ArticlePage:
        pagination = pagination or PaginationParams()
        filters = search.to_filters() if search else None
        return await self._repository.paginate(pagination.page, pagination.limit, filters)

    async def count_articles(self, filters: ArticleFilters | None = None) -> int:
        return await self._repository.count(filters)

    async def create_article(self, data: ArticleCreate) -> Article:
        article = await self._repository.create(data.to_draft())
        logger.info("Created article %s", article.id)
        return article

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        article = await self._repository.update(article_id, data.to_patch())
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        logger.info("Updated article %s", article_id)
        return article

    async def delete_article(self, article_id: str) -> bool:
        deleted = await self._repository.delete(article_id)
        if not deleted:
            raise EntityNotFoundError("Article", article_id)
        logger.info("Deleted article %s", article_id)
        return deleted

    async def quick_search(self, query: str | None) -> QuickSearchResult | None:
        """Search published articles by free text.

        Returns ``None`` when the trimmed query is shorter than
        ``QUICK_SEARCH_MIN_LENGTH``; callers answer that with an empty
        result rather than an error.
        """
        term = (query or "").strip()
        if len(term) < QUICK_SEARCH_MIN_LENGTH:
            return None

        matches = await self._repository.find_all(ArticleFilters(published=True, search=term))
        return QuickSearchResult(
            query=term,
            articles=matches[:QUICK_SEARCH_MAX_RESULTS],
            total=len(matches),
        )
