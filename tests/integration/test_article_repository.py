"""Integration tests for SQLAlchemyArticleRepository against in-memory SQLite."""

import pytest

from article_world.domain.entities import Article
from article_world.domain.exceptions import PersistenceError
from article_world.infrastructure.database.repositories import SQLAlchemyArticleRepository


@pytest.mark.asyncio
async def test_save_new_article_assigns_id_and_posted_date(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        saved = await repo.save(Article(title="T1", content="C1", user_id=1))
        await session.commit()

    assert saved.id is not None
    assert saved.posted_date is not None
    assert saved.posted_date.tzinfo is not None
    assert saved.updated_date is None


@pytest.mark.asyncio
async def test_save_existing_article_stamps_updated_date_only(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.save(Article(title="T1", content="C1", user_id=1))
        await session.commit()

    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        article = await repo.find_by_id(created.id)
        article.update(title="T1b", content="C1b", user_id=9)
        first = await repo.save(article)
        second = await repo.save(first)
        await session.commit()

    assert first.id == created.id
    assert first.posted_date == created.posted_date
    assert first.updated_date > first.posted_date
    assert second.updated_date > first.updated_date
    assert (first.title, first.content, first.user_id) == ("T1b", "C1b", 9)


@pytest.mark.asyncio
async def test_save_ignores_entity_timestamps(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.save(Article(title="T1", content="C1", user_id=1))
        tampered = Article(
            id=created.id,
            title="T1",
            content="C2",
            user_id=1,
            posted_date=None,
            updated_date=None,
        )
        updated = await repo.save(tampered)

    assert updated.posted_date == created.posted_date
    assert updated.updated_date is not None


@pytest.mark.asyncio
async def test_duplicate_title_raises_persistence_error(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        await repo.save(Article(title="Same", content="C1", user_id=1))
        with pytest.raises(PersistenceError) as exc_info:
            await repo.save(Article(title="Same", content="C2", user_id=2))
        await session.rollback()

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_update_of_missing_row_raises_persistence_error(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        with pytest.raises(PersistenceError):
            await repo.save(Article(id=404, title="Ghost", content="C", user_id=1))


@pytest.mark.asyncio
async def test_find_all_returns_store_order(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        for title in ("A", "B", "C"):
            await repo.save(Article(title=title, content="c", user_id=1))
        await session.commit()

    async with session_factory() as session:
        articles = await SQLAlchemyArticleRepository(session).find_all()

    assert [a.title for a in articles] == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_exists_and_delete(session_factory):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.save(Article(title="T", content="C", user_id=1))
        await session.commit()

    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        assert await repo.exists_by_id(created.id) is True
        assert await repo.exists_by_id(999) is False
        await repo.delete_by_id(created.id)
        await session.commit()

    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        assert await repo.find_by_id(created.id) is None
        assert await repo.exists_by_id(created.id) is False


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", [2**31, 10**20, -(10**20)])
async def test_out_of_range_id_is_treated_as_missing(session_factory, article_id):
    async with session_factory() as session:
        repo = SQLAlchemyArticleRepository(session)
        assert await repo.find_by_id(article_id) is None
        assert await repo.exists_by_id(article_id) is False
        await repo.delete_by_id(article_id)
