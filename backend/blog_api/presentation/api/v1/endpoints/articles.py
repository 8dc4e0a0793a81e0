"""Article CRUD, listing and quick-search endpoints."""

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError

from blog_api.application.errors import ApiError, violations_from_validation_error
from blog_api.application.schemas import (
    ApiResponse,
    ArticleCreate,
    ArticleEnvelope,
    ArticleListEnvelope,
    ArticleResponse,
    ArticleUpdate,
    PaginationParams,
    PaginationResponse,
    QuickSearchEnvelope,
    SearchParams,
    SearchStats,
)
from blog_api.application.services import ArticleService
from blog_api.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


# ── Query-string parsing ─────────────────────────────────────────────


def get_pagination_params(page: str | None = None, limit: str | None = None) -> PaginationParams:
    try:
        return PaginationParams.model_validate({"page": page, "limit": limit})
    except ValidationError as e:
        raise ApiError.validation(
            "Invalid pagination parameters", violations_from_validation_error(e)
        ) from e


def get_search_params(
    q: str | None = None,
    published: str | None = None,
    tags: str | None = None,
) -> SearchParams:
    try:
        return SearchParams.model_validate({"q": q, "published": published, "tags": tags})
    except ValidationError as e:
        raise ApiError.validation(
            "Invalid search parameters", violations_from_validation_error(e)
        ) from e


# ── Endpoints ────────────────────────────────────────────────────────


@router.get("", response_model=ArticleListEnvelope, response_model_exclude_none=True)
async def list_articles(
    pagination: PaginationParams = Depends(get_pagination_params),
    search: SearchParams = Depends(get_search_params),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListEnvelope:
    """Retrieve a filtered, paginated list of articles, newest first."""
    page = await service.list_articles(pagination, search)
    return ArticleListEnvelope(
        data=[ArticleResponse.from_entity(a) for a in page.articles],
        pagination=PaginationResponse.from_meta(page.pagination),
    )


@router.post(
    "",
    response_model=ArticleEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleEnvelope:
    """Create a new article."""
    article = await service.create_article(data)
    return ArticleEnvelope(
        data=ArticleResponse.from_entity(article),
        message="Article created successfully",
    )


@router.get("/search", response_model=QuickSearchEnvelope, response_model_exclude_none=True)
async def quick_search(
    q: str | None = None,
    service: ArticleService = Depends(get_article_service),
) -> QuickSearchEnvelope:
    """Search published articles; at most 10 results."""
    result = await service.quick_search(q)
    if result is None:
        return QuickSearchEnvelope(data=[], message="Query too short (minimum 2 characters)")
    return QuickSearchEnvelope(
        data=[ArticleResponse.from_entity(a) for a in result.articles],
        stats=SearchStats(total=result.total, returned=result.returned, query=result.query),
    )


@router.get("/{article_id}", response_model=ArticleEnvelope, response_model_exclude_none=True)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleEnvelope:
    """Retrieve a single article by ID."""
    article = await service.get_article(article_id)
    return ArticleEnvelope(data=ArticleResponse.from_entity(article))


@router.put("/{article_id}", response_model=ArticleEnvelope, response_model_exclude_none=True)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleEnvelope:
    """Merge the supplied fields into an existing article."""
    article = await service.update_article(article_id, data)
    return ArticleEnvelope(
        data=ArticleResponse.from_entity(article),
        message="Article updated successfully",
    )


@router.delete("/{article_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse[None]:
    """Delete an article by ID."""
    await service.delete_article(article_id)
    return ApiResponse[None](message="Article deleted successfully")
