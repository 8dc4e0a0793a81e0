"""Root conftest — shared test configuration and fixtures."""

import os
from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Tests never depend on a developer's .env values
os.environ.setdefault("APP_ENV", "test")

from blog_api.config import Settings  # noqa: E402
from blog_api.infrastructure.memory import SAMPLE_ARTICLES, InMemoryArticleRepository  # noqa: E402
from blog_api.main import create_app  # noqa: E402


class FakeClock:
    """Deterministic clock; each call advances by one second."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        self.now += self.step
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repository(clock: FakeClock) -> InMemoryArticleRepository:
    """Store seeded with the three sample articles, oldest first."""
    return InMemoryArticleRepository(seed=SAMPLE_ARTICLES, clock=clock)


@pytest.fixture
def empty_repository(clock: FakeClock) -> InMemoryArticleRepository:
    return InMemoryArticleRepository(clock=clock)


@pytest.fixture
def app(repository: InMemoryArticleRepository):
    return create_app(settings=Settings(), repository=repository)


@pytest_asyncio.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
