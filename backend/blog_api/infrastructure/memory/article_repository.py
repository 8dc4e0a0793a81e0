"""In-memory ArticleRepository: the process-local article collection.

The collection lives only as long as the process. Every mutation and every
snapshot read happens under a single lock, so handlers running in a thread
pool never observe a half-applied change. Records handed out are copies;
callers cannot modify stored articles behind the repository's back.
"""

import logging
import threading
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from blog_api.application.interfaces import ArticleRepository
from blog_api.domain.entities import (
    Article,
    ArticleDraft,
    ArticleFilters,
    ArticlePage,
    ArticlePatch,
    PaginationMeta,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port over a plain Python list."""

    def __init__(
        self,
        seed: Iterable[ArticleDraft] = (),
        clock: Clock = _utcnow,
        id_factory: IdFactory = _new_id,
    ):
        self._articles: list[Article] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._id_factory = id_factory
        for draft in seed:
            self._insert(draft)

    # ── Internal helpers (caller holds the lock, or is __init__) ─────

    def _insert(self, draft: ArticleDraft) -> Article:
        article_id = self._id_factory()
        while self._index_of(article_id) is not None:
            article_id = self._id_factory()
        now = self._clock()
        article = Article(
            id=article_id,
            title=draft.title,
            content=draft.content,
            excerpt=draft.excerpt,
            published=draft.published,
            tags=list(draft.tags),
            created_at=now,
            updated_at=now,
        )
        self._articles.append(article)
        return article

    def _index_of(self, article_id: str) -> int | None:
        for index, article in enumerate(self._articles):
            if article.id == article_id:
                return index
        return None

    def _snapshot(self) -> list[Article]:
        with self._lock:
            return [article.copy() for article in self._articles]

    # ── Port implementation ──────────────────────────────────────────

    async def get_by_id(self, article_id: str) -> Article | None:
        with self._lock:
            index = self._index_of(article_id)
            return self._articles[index].copy() if index is not None else None

    async def find_all(self, filters: ArticleFilters | None = None) -> list[Article]:
        filters = filters or ArticleFilters()
        matches = [article for article in self._snapshot() if filters.matches(article)]
        # sorted() is stable, so equal timestamps keep insertion order.
        return sorted(matches, key=lambda article: article.created_at, reverse=True)

    async def paginate(
        self, page: int, limit: int, filters: ArticleFilters | None = None
    ) -> ArticlePage:
        matches = await self.find_all(filters)
        meta = PaginationMeta.compute(page=page, limit=limit, total=len(matches))
        return ArticlePage(
            articles=matches[meta.offset : meta.offset + meta.limit],
            pagination=meta,
        )

    async def count(self, filters: ArticleFilters | None = None) -> int:
        return len(await self.find_all(filters))

    async def create(self, draft: ArticleDraft) -> Article:
        with self._lock:
            article = self._insert(draft)
        logger.debug("Stored article %s (%d total)", article.id, len(self._articles))
        return article.copy()

    async def update(self, article_id: str, patch: ArticlePatch) -> Article | None:
        with self._lock:
            index = self._index_of(article_id)
            if index is None:
                return None
            updated = self._articles[index].apply(patch, now=self._clock())
            self._articles[index] = updated
        logger.debug("Merged %s into article %s", sorted(patch.changes()), article_id)
        return updated.copy()

    async def delete(self, article_id: str) -> bool:
        with self._lock:
            index = self._index_of(article_id)
            if index is None:
                return False
            del self._articles[index]
        logger.debug("Removed article %s", article_id)
        return True
