"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import ArticleService
from app.infrastructure.database import Database
from app.infrastructure.database.repositories import SQLAlchemyArticleRepository


def get_database(request: Request) -> Database:
    """The gateway owned by the running application."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """Yields an async DB session per request; commits when the request succeeds."""
    async with database.session() as session:
        yield session


def get_article_service(
    # function scope: the commit runs before the response is sent, and a
    # failed commit still reaches the exception handlers
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> ArticleService:
    """Provides an ArticleService instance with its repository wired up."""
    return ArticleService(SQLAlchemyArticleRepository(session))
