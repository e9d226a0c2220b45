"""Unit tests for the ArticleService."""

import pytest

from app.application.schemas import ArticleCreate, ArticleUpdate
from app.application.services import ArticleService
from app.domain.entities import Article
from app.domain.exceptions import EntityNotFoundError
from app.application.interfaces import ArticleRepository


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    async def list_by_published(
        self, published: bool, skip: int = 0, limit: int = 100
    ) -> list[Article]:
        articles = [a for a in self._articles.values() if a.published is published]
        return articles[skip : skip + limit]

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise EntityNotFoundError("Article", article.id)
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False

    async def count(self, published: bool | None = None) -> int:
        if published is None:
            return len(self._articles)
        return sum(1 for a in self._articles.values() if a.published is published)


@pytest.fixture
def service() -> ArticleService:
    return ArticleService(FakeArticleRepository())


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    data = ArticleCreate(title="Test Article", body="Some content")
    article = await service.create_article(data)
    assert article.id is not None
    assert article.title == "Test Article"
    assert article.published is False
    assert article.description is None


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_published_and_drafts_are_listed_separately(service: ArticleService):
    await service.create_article(ArticleCreate(title="A1", body="C1", published=True))
    await service.create_article(ArticleCreate(title="A2", body="C2"))
    await service.create_article(ArticleCreate(title="A3", body="C3"))

    published = await service.list_published()
    drafts = await service.list_drafts()

    assert [a.title for a in published] == ["A1"]
    assert sorted(a.title for a in drafts) == ["A2", "A3"]
    assert await service.count_articles() == 3
    assert await service.count_articles(published=False) == 2


@pytest.mark.asyncio
async def test_update_article(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="Old", body="Old content"))
    updated = await service.update_article(created.id, ArticleUpdate(title="New", published=True))
    assert updated.title == "New"
    assert updated.body == "Old content"
    assert updated.published is True


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="Delete Me", body="..."))
    result = await service.delete_article(created.id)
    assert result is True
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id)


@pytest.mark.asyncio
async def test_delete_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(42)


def test_create_schema_requires_non_empty_title():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        ArticleCreate(title="", body="text")
    with pytest.raises(ValidationError):
        ArticleCreate(body="text")


@pytest.mark.asyncio
async def test_update_clears_description_only_when_sent(service: ArticleService):
    created = await service.create_article(
        ArticleCreate(title="Described", body="text", description="summary")
    )

    untouched = await service.update_article(created.id, ArticleUpdate(title="Renamed"))
    assert untouched.description == "summary"

    cleared = await service.update_article(created.id, ArticleUpdate(description=None))
    assert cleared.description is None
    assert cleared.title == "Renamed"


def test_update_schema_rejects_null_for_required_fields():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        ArticleUpdate(title=None)
    with pytest.raises(ValidationError):
        ArticleUpdate(published=None)
    assert ArticleUpdate(description=None).model_dump(exclude_unset=True) == {"description": None}
