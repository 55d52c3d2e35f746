"""Application service (use case) for Article operations."""

import logging

from article_world.application.interfaces import ArticleRepository
from article_world.application.schemas import ArticleCreate, ArticleUpdate
from article_world.domain.entities import Article
from article_world.domain.exceptions import ArticleNotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def add_article(self, data: ArticleCreate) -> Article:
        article = Article(title=data.title, content=data.content, user_id=data.user_id)
        try:
            created = await self._repository.save(article)
        except PersistenceError:
            logger.exception("Exception occurred while adding article '%s'", data.title)
            raise
        logger.info("Article %s created (title=%r, user_id=%s)", created.id, created.title, created.user_id)
        return created

    async def list_articles(self) -> list[Article]:
        """Return all articles, most recently posted first.

        The sort is stable, so articles sharing a ``posted_date`` keep the
        order in which the store returned them.
        """
        try:
            articles = await self._repository.find_all()
        except PersistenceError:
            logger.exception("Exception occurred while fetching all articles")
            raise
        return sorted(articles, key=lambda a: a.posted_date, reverse=True)

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.find_by_id(article_id)
        if article is None:
            raise ArticleNotFoundError(article_id)
        return article

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        # Last write wins: there is no version check between read and save.
        article = await self.get_article(article_id)
        article.update(title=data.title, content=data.content, user_id=data.user_id)
        updated = await self._repository.save(article)
        logger.info("Article %s updated", updated.id)
        return updated

    async def delete_article(self, article_id: int) -> bool:
        if not await self._repository.exists_by_id(article_id):
            logger.debug("Delete skipped: article %s does not exist", article_id)
            return False
        await self._repository.delete_by_id(article_id)
        logger.info("Article %s deleted", article_id)
        return True
