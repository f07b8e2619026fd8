"""Application service (use case) for Article operations."""

import logging
from typing import Any

from blogful.application.interfaces import ArticleRepository
from blogful.application.schemas import ArticleCreate
from blogful.application.validation import validate_article_update, validate_new_article
from blogful.domain.entities import Article
from blogful.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Upper bound of the INTEGER primary key column.
MAX_ARTICLE_ID = 2**31 - 1


def parse_article_id(raw: str | int) -> int:
    """Parse a path parameter into an article ID.

    Anything that cannot be a stored ID (non-numeric, non-positive, or
    beyond the column range) is reported as not found.
    """
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        raise EntityNotFoundError("Article", raw)
    article_id = int(text)
    if not 0 < article_id <= MAX_ARTICLE_ID:
        raise EntityNotFoundError("Article", raw)
    return article_id


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Returns raw (unsanitized) entities; the presentation layer sanitizes at
    every response-construction point.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: str | int) -> Article:
        resolved_id = parse_article_id(article_id)
        article = await self._repository.get_by_id(resolved_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.list_all()

    async def create_article(self, data: ArticleCreate) -> Article:
        draft = validate_new_article(data)
        article = await self._repository.insert(draft)
        logger.info("Created article id=%s style=%s", article.id, article.style.value)
        return article

    async def update_article(self, article_id: str | int, data: Any) -> Article:
        """Merge the supplied fields onto an existing article.

        ``data`` is an ``ArticleUpdate`` or the raw decoded JSON body. The
        article is resolved first, so an unknown ID is reported before a
        malformed or empty body. Both checks happen before ``update_by_id``.
        """
        article = await self.get_article(article_id)
        command = validate_article_update(data)
        merged = command.apply_to(article)
        await self._repository.update_by_id(article.id, command.changes())
        logger.info(
            "Updated article id=%s fields=%s", article.id, sorted(command.changes())
        )
        return merged

    async def delete_article(self, article_id: str | int) -> None:
        article = await self.get_article(article_id)
        await self._repository.delete_by_id(article.id)
        logger.info("Deleted article id=%s", article.id)
