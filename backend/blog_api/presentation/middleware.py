"""HTTP middleware: request logging for the /api namespace."""

import logging
from datetime import datetime, timezone

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from blog_api.infrastructure.logging.log_config import REQUEST_LOGGER_NAME

request_logger = logging.getLogger(REQUEST_LOGGER_NAME)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log ``METHOD path - timestamp`` for every request under a path prefix."""

    def __init__(self, app, path_prefix: str = "/api/"):
        super().__init__(app)
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next):
        if request.url.path.startswith(self.path_prefix):
            request_logger.info(
                "%s %s - %s",
                request.method,
                request.url.path,
                datetime.now(timezone.utc).isoformat(),
            )
        return await call_next(request)
