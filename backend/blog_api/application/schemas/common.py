"""Shared response envelopes: success and error shapes used by every endpoint."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blog_api.domain.entities import PaginationMeta

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for outbound schemas: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(ApiModel, Generic[T]):
    """``{success, data?, message?}`` envelope."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class PaginationResponse(ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationResponse":
        return cls(
            page=meta.page,
            limit=meta.limit,
            total=meta.total,
            total_pages=meta.total_pages,
        )


class FieldViolation(BaseModel):
    """One violated rule: dot-joined field path plus a human-readable reason."""

    path: str
    message: str


class ErrorResponse(BaseModel):
    """``{success: false, error, message, details?}`` envelope."""

    success: bool = False
    error: str
    message: str
    details: Any = None
