"""Error Handlers: the single place failures become client responses.

Invariants:
    - Every error response is ``{success: false, error, message, details?}``
    - ApiError / domain errors keep their code and message
    - RequestValidationError → VALIDATION_ERROR with field-level details
    - Exception (catch-all) → INTERNAL_ERROR, never leaks internal details
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.application.errors import ApiError, ErrorCode, violations_from_errors
from blog_api.application.schemas import ErrorResponse
from blog_api.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"

_CODE_BY_STATUS: dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.ALREADY_EXISTS,
}


@dataclass(frozen=True)
class NormalizedError:
    status_code: int
    body: dict[str, Any]

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body)


def _body(code: ErrorCode, message: str, details: Any = None) -> dict[str, Any]:
    return ErrorResponse(error=code.value, message=message, details=details).model_dump(
        mode="json", exclude_none=True
    )


def normalize_error(exc: Exception) -> NormalizedError:
    """Map any exception onto a status code and the uniform error body."""
    if isinstance(exc, ApiError):
        return NormalizedError(exc.status_code, _body(exc.code, exc.message, exc.details))

    if isinstance(exc, RequestValidationError):
        violations = violations_from_errors(exc.errors())
        return NormalizedError(
            ErrorCode.VALIDATION_ERROR.http_status,
            _body(ErrorCode.VALIDATION_ERROR, "Invalid request data", violations),
        )

    if isinstance(exc, EntityNotFoundError):
        return NormalizedError(
            ErrorCode.NOT_FOUND.http_status,
            _body(ErrorCode.NOT_FOUND, f"{exc.entity_type} not found"),
        )

    if isinstance(exc, DuplicateEntityError):
        return NormalizedError(
            ErrorCode.ALREADY_EXISTS.http_status,
            _body(ErrorCode.ALREADY_EXISTS, str(exc)),
        )

    if isinstance(exc, StarletteHTTPException):
        code = _CODE_BY_STATUS.get(exc.status_code)
        if code is None:
            code = ErrorCode.INTERNAL_ERROR if exc.status_code >= 500 else ErrorCode.VALIDATION_ERROR
        return NormalizedError(exc.status_code, _body(code, str(exc.detail)))

    return NormalizedError(
        ErrorCode.INTERNAL_ERROR.http_status,
        _body(ErrorCode.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_domain_error_handlers(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register the handler for errors raised at the request boundary."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning(
            f"ApiError on {request.url.path}: {exc.message}",
            extra={"error_code": exc.code.value, "path": request.url.path},
        )
        return normalize_error(exc).to_response()


def _register_domain_error_handlers(app: FastAPI) -> None:
    """Register handlers for framework-independent domain exceptions."""

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info(f"Not found on {request.url.path}: {exc}")
        return normalize_error(exc).to_response()

    @app.exception_handler(DuplicateEntityError)
    async def duplicate_handler(request: Request, exc: DuplicateEntityError):
        logger.info(f"Conflict on {request.url.path}: {exc}")
        return normalize_error(exc).to_response()


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return normalize_error(exc).to_response()


def _register_http_error_handler(app: FastAPI) -> None:
    """Unknown routes and disallowed methods get the same envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return normalize_error(exc).to_response()


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
        )
        return normalize_error(exc).to_response()
