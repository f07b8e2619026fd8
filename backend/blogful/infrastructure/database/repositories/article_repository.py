"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.application.interfaces import ArticleRepository
from blogful.domain.entities import Article, ArticleDraft
from blogful.domain.exceptions import StorageError
from blogful.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tz info on read; treat naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Each write commits before returning, so a failed commit surfaces as
    ``StorageError`` while the request is still being handled. The session
    must be created with ``expire_on_commit=False``.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            style=model.style,
            content=model.content,
            date_published=_as_utc(model.date_published),
        )

    def _to_model(self, draft: ArticleDraft) -> ArticleModel:
        """Map a validated draft → ORM model (for creation)."""
        return ArticleModel(
            title=draft.title,
            style=draft.style,
            content=draft.content,
            date_published=datetime.now(timezone.utc),
        )

    async def list_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("list_all") from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, article_id: int) -> Article | None:
        try:
            result = await self._session.get(ArticleModel, article_id)
        except SQLAlchemyError as exc:
            raise StorageError("get_by_id") from exc
        return self._to_entity(result) if result else None

    async def insert(self, draft: ArticleDraft) -> Article:
        model = self._to_model(draft)
        self._session.add(model)
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageError("insert") from exc
        return self._to_entity(model)

    async def update_by_id(self, article_id: int, changes: dict) -> int:
        if not changes:
            return 0
        stmt = update(ArticleModel).where(ArticleModel.id == article_id).values(**changes)
        try:
            result = await self._session.execute(stmt)
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageError("update_by_id") from exc
        logger.debug("update_by_id(%s) affected %s row(s)", article_id, result.rowcount)
        return result.rowcount

    async def delete_by_id(self, article_id: int) -> int:
        stmt = delete(ArticleModel).where(ArticleModel.id == article_id)
        try:
            result = await self._session.execute(stmt)
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageError("delete_by_id") from exc
        logger.debug("delete_by_id(%s) affected %s row(s)", article_id, result.rowcount)
        return result.rowcount
