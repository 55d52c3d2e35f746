"""Domain-specific exceptions — framework-independent."""


class ArticleNotFoundError(Exception):
    """Raised when an operation references an article id that does not exist."""

    message = "Invalid Article ID"

    def __init__(self, article_id: int):
        self.article_id = article_id
        super().__init__(self.message)


class PersistenceError(Exception):
    """Raised by a repository when the underlying store rejects an operation.

    The driver/ORM exception is chained as ``__cause__``; callers only see
    that the operation failed.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Persistence operation '{operation}' failed")
