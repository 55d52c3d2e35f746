"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Article:
    """Core domain entity representing a published article.

    ``id`` and both timestamps are owned by the store: ``id`` and
    ``posted_date`` are assigned on insert, ``updated_date`` on every update.
    """

    title: str
    content: str
    user_id: int
    id: int | None = None
    posted_date: datetime | None = None
    updated_date: datetime | None = None

    def update(self, title: str, content: str, user_id: int) -> None:
        """Replace the editable fields; identity and timestamps stay untouched."""
        self.title = title
        self.content = content
        self.user_id = user_id
