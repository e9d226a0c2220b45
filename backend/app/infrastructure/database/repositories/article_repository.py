"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Writes are flushed immediately so constraint violations surface inside
    the request that caused them; the session owner commits.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            description=model.description,
            body=model.body,
            published=model.published,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation). Keeps an explicit id."""
        return ArticleModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            body=entity.body,
            published=entity.published,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def list_by_published(
        self, published: bool, skip: int = 0, limit: int = 100
    ) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.published.is_(published))
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id)
        model.title = article.title
        model.description = article.description
        model.body = article.body
        model.published = article.published
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def count(self, published: bool | None = None) -> int:
        stmt = select(func.count()).select_from(ArticleModel)
        if published is not None:
            stmt = stmt.where(ArticleModel.published.is_(published))
        result = await self._session.execute(stmt)
        return result.scalar_one()
