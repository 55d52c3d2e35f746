"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TITLE_MAX_LENGTH = 120
CONTENT_MAX_LENGTH = 999


class ArticleCreate(BaseModel):
    """Schema for creating a new article. Client-supplied id/timestamps are ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, examples=["Getting Started"])
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH, examples=["Article body."])
    user_id: int = Field(..., examples=[1])


class ArticleUpdate(ArticleCreate):
    """Schema for a full update of title, content and author."""


class ArticleResponse(BaseModel):
    """Schema returned to the client (camelCase field names)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    title: str
    content: str
    user_id: int
    posted_date: datetime | None = None
    updated_date: datetime | None = None
