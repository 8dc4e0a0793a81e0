"""API error vocabulary: stable error codes and the exception that carries them.

Every failure that reaches a client is expressed as one of the ``ErrorCode``
members. ``ApiError`` is raised at the request boundary; domain code keeps
raising its own exceptions (see ``blog_api.domain.exceptions``) and the
presentation layer maps them onto this vocabulary.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError

from blog_api.application.schemas import FieldViolation


class ErrorCode(str, Enum):
    """Stable error identifiers returned in the ``error`` field."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.ALREADY_EXISTS: 409,
    ErrorCode.INTERNAL_ERROR: 500,
}

# Request locations FastAPI prepends to error paths.
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


class ApiError(Exception):
    """An error with a client-facing code, message and optional details."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Any = None,
        status_code: int | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code or code.http_status
        super().__init__(message)

    @classmethod
    def validation(cls, message: str, violations: list[FieldViolation]) -> "ApiError":
        return cls(ErrorCode.VALIDATION_ERROR, message, details=violations)

    @classmethod
    def not_found(cls, message: str = "Article not found") -> "ApiError":
        return cls(ErrorCode.NOT_FOUND, message)


def violations_from_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldViolation]:
    """Flatten pydantic-style error dicts into ``FieldViolation`` entries.

    A leading request location (``body``, ``query``, ...) is dropped from the
    path unless it is the only element.
    """
    violations = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        violations.append(FieldViolation(path=".".join(loc), message=error.get("msg", "")))
    return violations


def violations_from_validation_error(exc: ValidationError) -> list[FieldViolation]:
    return violations_from_errors(exc.errors())
