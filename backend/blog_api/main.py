"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.application.interfaces import ArticleRepository
from blog_api.config import Settings, get_settings
from blog_api.infrastructure.logging.log_config import setup_logging
from blog_api.infrastructure.memory import SAMPLE_ARTICLES, InMemoryArticleRepository
from blog_api.presentation.api.error_handlers import register_error_handlers
from blog_api.presentation.api.router import router as api_router
from blog_api.presentation.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def _build_article_repository(settings: Settings) -> ArticleRepository:
    """Create the process-local article store, seeded unless disabled."""
    seed = SAMPLE_ARTICLES if settings.seed_sample_data else ()
    return InMemoryArticleRepository(seed=seed)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report the store size."""
    setup_logging(app.state.settings)
    count = await app.state.article_repository.count()
    logger.info("Article store ready: %d articles", count)

    yield

    logger.info("Shutting down; in-memory articles are discarded")


def create_app(
    settings: Settings | None = None,
    repository: ArticleRepository | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.article_repository = repository or _build_article_repository(settings)

    # Request logging for /api/*
    app.add_middleware(RequestLoggingMiddleware, path_prefix="/api/")

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog_api.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
