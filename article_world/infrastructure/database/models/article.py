"""SQLAlchemy ORM model for the Article entity."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from article_world.infrastructure.database.base import Base


class ArticleModel(Base):
    """ORM model — maps to the 'article' table.

    Timestamps carry no column defaults; the repository stamps them.
    """

    __tablename__ = "article"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    content: Mapped[str] = mapped_column(String(999), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    posted_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}')>"
