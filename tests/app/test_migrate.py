"""Tests for the pages-table migration script."""
from __future__ import annotations

import pytest

from app.migrate import bundled_sql, main, split_statements

# SQLite spelling of the bundled script's table
SQLITE_SCRIPT = """
-- pages table
CREATE TABLE IF NOT EXISTS pages (
    id INTEGER PRIMARY KEY,
    type VARCHAR(50) UNIQUE NOT NULL,
    title VARCHAR(200) NOT NULL,
    content TEXT
);

INSERT INTO pages (type, title, content) VALUES
    ('login', 'Login', 'Sign in'),
    ('admin', 'Admin Panel', 'Manage overlays')
ON CONFLICT (type) DO NOTHING;
"""


@pytest.mark.unit
class TestSplitStatements:
    def test_drops_comments_and_blanks(self):
        stmts = split_statements(SQLITE_SCRIPT)
        assert len(stmts) == 2
        assert stmts[0].startswith("CREATE TABLE IF NOT EXISTS pages")
        assert stmts[1].startswith("INSERT INTO pages")
        assert all("--" not in s for s in stmts)

    def test_empty_script(self):
        assert split_statements("-- nothing\n;\n\n") == []

    def test_bundled_script(self):
        sql = bundled_sql()
        stmts = split_statements(sql)
        assert any(s.startswith("CREATE TABLE IF NOT EXISTS pages") for s in stmts)
        assert "'login'" in sql and "'admin'" in sql


@pytest.mark.unit
class TestMain:
    def test_runs_against_sqlite(self, tmp_path, capsys):
        script = tmp_path / "init.sql"
        script.write_text(SQLITE_SCRIPT, encoding="utf-8")
        url = f"sqlite+aiosqlite:///{tmp_path / 'pages.db'}"

        assert main(["--database-url", url, "--sql", str(script)]) == 0
        out = capsys.readouterr().out
        assert "Running migration..." in out
        assert "✓ Migration complete" in out
        assert '✓ Table "pages" contains 2 rows:' in out
        assert '  - login: "Login"' in out

        # Re-running is a no-op for the seed rows
        assert main(["--database-url", url, "--sql", str(script)]) == 0
        assert "contains 2 rows" in capsys.readouterr().out

    def test_missing_database_url(self, capsys):
        assert main(["--database-url", ""]) == 1
        assert "NEON_DATABASE_URL not configured" in capsys.readouterr().err

    def test_bad_sql_reports_error(self, tmp_path, capsys):
        script = tmp_path / "bad.sql"
        script.write_text("CREATE TABLE;", encoding="utf-8")
        url = f"sqlite+aiosqlite:///{tmp_path / 'bad.db'}"
        assert main(["--database-url", url, "--sql", str(script)]) == 1
        assert "✗ Error:" in capsys.readouterr().err
