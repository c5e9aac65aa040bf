"""Tests for database URL handling."""
from __future__ import annotations

import pytest

from app.database import DatabaseNotConfigured, async_url, require_engine


@pytest.mark.unit
class TestAsyncUrl:
    def test_postgres_scheme(self):
        assert async_url("postgres://u:p@host/db") == "postgresql+asyncpg://u:p@host/db"

    def test_neon_style_query(self):
        url = async_url(
            "postgresql://u:p@ep-x.neon.tech/neondb?sslmode=require&channel_binding=require"
        )
        assert url == "postgresql+asyncpg://u:p@ep-x.neon.tech/neondb?ssl=require"

    def test_other_schemes_untouched(self):
        assert async_url("sqlite+aiosqlite:///tmp/x.db") == "sqlite+aiosqlite:///tmp/x.db"


@pytest.mark.unit
def test_require_engine_without_url():
    with pytest.raises(DatabaseNotConfigured, match="NEON_DATABASE_URL not configured"):
        require_engine(None)
