"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from article_world.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations stamp ``posted_date`` on insert and ``updated_date`` on
    update, enforce title uniqueness, and raise ``PersistenceError`` for any
    storage failure.
    """

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Insert a new article (``id is None``) or update an existing one."""
        ...

    @abstractmethod
    async def find_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def find_all(self) -> list[Article]:
        """Retrieve every stored article in store order."""
        ...

    @abstractmethod
    async def exists_by_id(self, article_id: int) -> bool:
        """Return True if an article with this ID is stored."""
        ...

    @abstractmethod
    async def delete_by_id(self, article_id: int) -> None:
        """Remove the article with the given ID."""
        ...
