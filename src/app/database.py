"""Database setup and connection management."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


class DatabaseNotConfigured(RuntimeError):
    """No database URL has been set."""


def async_url(url: str) -> str:
    """Rewrite a libpq-style Postgres URL for the asyncpg driver.

    ``postgres://`` and ``postgresql://`` become ``postgresql+asyncpg://``
    and ``sslmode`` becomes asyncpg's ``ssl``. Other URLs pass through.
    """
    parts = urlsplit(url)
    if parts.scheme not in ("postgres", "postgresql"):
        return url
    query = []
    for key, value in parse_qsl(parts.query):
        if key == "sslmode":
            query.append(("ssl", value))
        elif key == "channel_binding":
            continue  # not understood by asyncpg
        else:
            query.append((key, value))
    return urlunsplit(
        ("postgresql+asyncpg", parts.netloc, parts.path, urlencode(query), parts.fragment)
    )


_engine: AsyncEngine | None = None


def create_engine_for(url: str) -> AsyncEngine:
    return create_async_engine(async_url(url), echo=settings.debug, future=True)


def get_engine() -> AsyncEngine | None:
    """Dependency: the shared async engine, or None if no URL is configured."""
    global _engine
    if _engine is None and settings.database_dsn:
        _engine = create_engine_for(settings.database_dsn)
    return _engine


def require_engine(engine: AsyncEngine | None) -> AsyncEngine:
    if engine is None:
        raise DatabaseNotConfigured("NEON_DATABASE_URL not configured")
    return engine


async def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
