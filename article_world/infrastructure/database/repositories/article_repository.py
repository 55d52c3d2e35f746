"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from article_world.application.interfaces import ArticleRepository
from article_world.domain.entities import Article
from article_world.domain.exceptions import PersistenceError
from article_world.infrastructure.database.models import ArticleModel

# Range of the INTEGER primary key column.
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _is_storable_id(article_id: int) -> bool:
    return _MIN_ID <= article_id <= _MAX_ID


def _stamp_after(previous: datetime | None) -> datetime:
    """Current UTC time, nudged forward so it is strictly later than ``previous``."""
    now = datetime.now(timezone.utc)
    previous = _as_utc(previous)
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            user_id=model.user_id,
            posted_date=_as_utc(model.posted_date),
            updated_date=_as_utc(model.updated_date),
        )

    async def save(self, article: Article) -> Article:
        if article.id is None:
            return await self._insert(article)
        return await self._update(article)

    async def _insert(self, article: Article) -> Article:
        model = ArticleModel(
            title=article.title,
            content=article.content,
            user_id=article.user_id,
            posted_date=datetime.now(timezone.utc),
        )
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError("insert article") from e
        return self._to_entity(model)

    async def _update(self, article: Article) -> Article:
        if not _is_storable_id(article.id):
            raise PersistenceError("update article")
        try:
            model = await self._session.get(ArticleModel, article.id)
            if model is None:
                raise PersistenceError("update article")
            model.title = article.title
            model.content = article.content
            model.user_id = article.user_id
            model.updated_date = _stamp_after(model.updated_date or model.posted_date)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError("update article") from e
        return self._to_entity(model)

    async def find_by_id(self, article_id: int) -> Article | None:
        if not _is_storable_id(article_id):
            return None
        try:
            result = await self._session.get(ArticleModel, article_id)
        except SQLAlchemyError as e:
            raise PersistenceError("find article") from e
        return self._to_entity(result) if result else None

    async def find_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("list articles") from e
        return [self._to_entity(row) for row in result.scalars().all()]

    async def exists_by_id(self, article_id: int) -> bool:
        if not _is_storable_id(article_id):
            return False
        stmt = select(exists().where(ArticleModel.id == article_id))
        try:
            return bool(await self._session.scalar(stmt))
        except SQLAlchemyError as e:
            raise PersistenceError("check article") from e

    async def delete_by_id(self, article_id: int) -> None:
        if not _is_storable_id(article_id):
            return
        stmt = delete(ArticleModel).where(ArticleModel.id == article_id)
        try:
            await self._session.execute(stmt)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError("delete article") from e
