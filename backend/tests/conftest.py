"""Shared fixtures: an app wired to a throwaway SQLite database per test."""

from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.domain.entities import Article
from app.infrastructure.database import Database
from app.infrastructure.database.repositories import SQLAlchemyArticleRepository
from app.main import create_app

SEED_ARTICLES = [
    {
        "id": 100001,
        "title": "Article 1",
        "description": "Description 1",
        "body": "Body 1",
        "published": True,
    },
    {
        "id": 100002,
        "title": "Article 2",
        "description": "Description 2",
        "body": "Body 2",
        "published": False,
    },
]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        app_env="test",
        database_url=f"sqlite:///{tmp_path / 'articles.db'}",
        database_shutdown_timeout=1.0,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def database(app: FastAPI) -> Database:
    return app.state.database


@pytest_asyncio.fixture
async def seeded(database: Database) -> list[Article]:
    created = []
    async with database.session() as session:
        repository = SQLAlchemyArticleRepository(session)
        for data in SEED_ARTICLES:
            created.append(await repository.create(Article(**data)))
    return created


@pytest.fixture
def article_count(database: Database) -> Callable[[], Awaitable[int]]:
    """Counts rows straight through the gateway, bypassing HTTP."""

    async def _count() -> int:
        async with database.session() as session:
            return await SQLAlchemyArticleRepository(session).count()

    return _count
