"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from blog_api.application.interfaces import ArticleRepository
from blog_api.application.services import ArticleService


def get_article_repository(request: Request) -> ArticleRepository:
    """The article store owned by the running application (see ``create_app``)."""
    return request.app.state.article_repository


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)
