"""Unit tests for the ArticleService."""

import pytest

from blogful.application.schemas import ArticleCreate, ArticleUpdate
from blogful.application.services import ArticleService, parse_article_id
from blogful.domain.entities import ArticleStyle
from blogful.domain.exceptions import (
    EmptyUpdateError,
    EntityNotFoundError,
    MissingFieldError,
)
from tests.fakes import FakeArticleRepository
from tests.fixtures.articles import make_articles_array, make_malicious_article


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository(make_articles_array())


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    data = ArticleCreate(title="Test Article", style="News", content="Some content")
    article = await service.create_article(data)
    assert article.id == 5
    assert article.title == "Test Article"
    assert article.style is ArticleStyle.NEWS


@pytest.mark.asyncio
async def test_create_article_validates_before_writing(service, repository):
    with pytest.raises(MissingFieldError) as exc_info:
        await service.create_article(ArticleCreate(title="Only a title"))
    assert exc_info.value.field == "style"
    assert repository.writes == []


@pytest.mark.asyncio
async def test_service_returns_raw_content():
    malicious = make_malicious_article()
    service = ArticleService(FakeArticleRepository([malicious]))
    article = await service.get_article(malicious.id)
    assert article.title == malicious.title


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_get_article_accepts_path_string(service: ArticleService):
    article = await service.get_article("2")
    assert article.id == 2


@pytest.mark.asyncio
async def test_list_articles(service: ArticleService):
    articles = await service.list_articles()
    assert [a.id for a in articles] == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_update_article(service: ArticleService):
    original = await service.get_article(1)
    updated = await service.update_article(1, ArticleUpdate(title="New"))
    assert updated.title == "New"
    assert updated.content == original.content
    assert updated.date_published == original.date_published

    stored = await service.get_article(1)
    assert stored == updated


@pytest.mark.asyncio
async def test_update_missing_article_never_writes(service, repository):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(999, ArticleUpdate(title="New"))
    assert repository.writes == []


@pytest.mark.asyncio
async def test_update_missing_article_reports_not_found_before_empty_body(service):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(999, ArticleUpdate())


@pytest.mark.asyncio
async def test_update_with_empty_body_never_writes(service, repository):
    with pytest.raises(EmptyUpdateError):
        await service.update_article(1, ArticleUpdate())
    assert repository.writes == []


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    await service.delete_article(2)
    with pytest.raises(EntityNotFoundError):
        await service.get_article(2)


@pytest.mark.asyncio
async def test_delete_missing_article_never_writes(service, repository):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article("nope")
    assert repository.writes == []


@pytest.mark.parametrize("raw", ["1", "42", " 7 ", 3, "2147483647"])
def test_parse_article_id_accepts_valid_ids(raw):
    assert parse_article_id(raw) == int(str(raw).strip())


@pytest.mark.parametrize("raw", ["", "abc", "0", "-3", "1e3", "2147483648", "²"])
def test_parse_article_id_rejects_as_not_found(raw):
    with pytest.raises(EntityNotFoundError):
        parse_article_id(raw)


@pytest.mark.asyncio
async def test_update_accepts_raw_json_body(service: ArticleService):
    updated = await service.update_article("3", {"style": "Interview"})
    assert updated.style is ArticleStyle.INTERVIEW


@pytest.mark.asyncio
async def test_update_missing_article_reports_not_found_before_malformed_body(
    service, repository
):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(999, [1, 2])
    assert repository.writes == []
