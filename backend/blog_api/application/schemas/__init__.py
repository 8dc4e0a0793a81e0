from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleEnvelope,
    ArticleListEnvelope,
    QuickSearchEnvelope,
    SearchStats,
)
from .common import ApiModel, ApiResponse, ErrorResponse, FieldViolation, PaginationResponse
from .listing import PaginationParams, SearchParams

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleEnvelope",
    "ArticleListEnvelope",
    "QuickSearchEnvelope",
    "SearchStats",
    "ApiModel",
    "ApiResponse",
    "ErrorResponse",
    "FieldViolation",
    "PaginationResponse",
    "PaginationParams",
    "SearchParams",
]
