"""SQLAlchemy declarative base shared by the ORM models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models; ``Base.metadata`` drives ``create_all``."""
