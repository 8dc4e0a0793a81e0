"""Pydantic schemas for listing query parameters: pagination and search filters.

Query-string values arrive as raw strings (or not at all). Pagination values
are parsed leniently and then bounds-checked; search values are normalised
into an :class:`ArticleFilters` the repository can apply directly.
"""

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from blog_api.domain.entities import ArticleFilters

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _lenient_int(value: Any, default: int) -> Any:
    """Parse the leading integer of a string; missing, non-numeric or zero means *default*.

    Anything that is neither a string nor an int is passed through so the
    field's own type check reports it.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value or default
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return default
        return int(match.group(1)) or default
    return value


class PaginationParams(BaseModel):
    """Requested page number and page size. Out-of-range values fail, they are not clamped."""

    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)

    @field_validator("page", mode="before")
    @classmethod
    def _parse_page(cls, value: Any) -> Any:
        return _lenient_int(value, DEFAULT_PAGE)

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> Any:
        return _lenient_int(value, DEFAULT_LIMIT)


class SearchParams(BaseModel):
    """Optional listing filters taken from ``q``, ``published`` and ``tags``."""

    q: str | None = None
    published: bool | None = None
    tags: list[str] | None = None

    @field_validator("published", mode="before")
    @classmethod
    def _parse_published(cls, value: Any) -> bool | None:
        # Only the literal "true" turns the filter on.
        return True if value is True or value == "true" else None

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, str):
            tokens = [token.strip() for token in value.split(",")]
            return [token for token in tokens if token] or None
        return value

    def to_filters(self) -> ArticleFilters:
        return ArticleFilters(
            published=self.published,
            tags=tuple(self.tags) if self.tags else None,
            search=self.q or None,
        )
