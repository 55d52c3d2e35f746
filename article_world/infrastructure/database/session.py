"""SQLAlchemy database session and engine configuration."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from article_world.config import get_settings


_ASYNC_PREFIXES = ("sqlite+aiosqlite://", "postgresql+asyncpg://")


def get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one.

    Only SQLite (aiosqlite) and PostgreSQL (asyncpg) are supported; any other
    scheme raises ``ValueError``.
    """
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith(_ASYNC_PREFIXES):
        return url
    raise ValueError(f"Unsupported database URL scheme: {url.split(':', 1)[0]!r}")


settings = get_settings()
_async_url = get_async_url(settings.database_url)

engine = create_async_engine(
    _async_url,
    echo=(settings.app_env == "development"),
    future=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
