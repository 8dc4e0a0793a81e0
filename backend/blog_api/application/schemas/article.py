"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from blog_api.domain.entities import Article, ArticleDraft, ArticlePatch

from .common import ApiModel, ApiResponse, PaginationResponse

TITLE_MAX_LENGTH = 255
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 50_000
EXCERPT_MAX_LENGTH = 500
MAX_TAGS = 10

Title = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH)
]
Content = Annotated[
    str, StringConstraints(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
]
Excerpt = Annotated[str, StringConstraints(max_length=EXCERPT_MAX_LENGTH)]
Tag = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Tags = Annotated[list[Tag], Field(max_length=MAX_TAGS)]


# ── Request Schemas ──────────────────────────────────────────────────


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    model_config = ConfigDict(strict=True)

    title: Title = Field(..., examples=["Getting Started"])
    content: Content = Field(..., examples=["This is the body of a blog article."])
    excerpt: Excerpt | None = None
    published: bool = False
    tags: Tags = Field(default_factory=list)

    def to_draft(self) -> ArticleDraft:
        return ArticleDraft(
            title=self.title,
            content=self.content,
            excerpt=self.excerpt,
            published=self.published,
            tags=tuple(self.tags),
        )


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    Omitting a field leaves it untouched. Sending ``null`` is rejected so that
    "not supplied" and "supplied" never get confused.
    """

    model_config = ConfigDict(strict=True)

    title: Title | None = None
    content: Content | None = None
    excerpt: Excerpt | None = None
    published: bool | None = None
    tags: Tags | None = None

    @field_validator("title", "content", "excerpt", "published", "tags", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value

    def to_patch(self) -> ArticlePatch:
        values = {name: getattr(self, name) for name in self.model_fields_set}
        if "tags" in values:
            values["tags"] = tuple(values["tags"])
        return ArticlePatch(**values)


# ── Response Schemas ─────────────────────────────────────────────────


class ArticleResponse(ApiModel):
    """Schema returned to the client."""

    id: str
    title: str
    content: str
    excerpt: str | None = None
    published: bool
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleResponse":
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            excerpt=article.excerpt,
            published=article.published,
            tags=list(article.tags),
            created_at=article.created_at,
            updated_at=article.updated_at,
        )


class SearchStats(ApiModel):
    total: int
    returned: int
    query: str


class ArticleEnvelope(ApiResponse[ArticleResponse]):
    """Single-article envelope."""


class ArticleListEnvelope(ApiResponse[list[ArticleResponse]]):
    """Paginated listing envelope."""

    pagination: PaginationResponse


class QuickSearchEnvelope(ApiResponse[list[ArticleResponse]]):
    """Quick-search envelope; ``stats`` is absent when the query was too short."""

    stats: SearchStats | None = None
