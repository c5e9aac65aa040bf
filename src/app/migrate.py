"""Create and seed the pages table.

Runs the bundled init-db.sql against the configured database, then lists
the rows it finds so the operator can see what the login and admin screens
will show.

Usage:
    drrm-migrate
    drrm-migrate --database-url postgresql://... --sql ./custom.sql
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from importlib import resources
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.database import create_engine_for


def bundled_sql() -> str:
    return resources.files("app").joinpath("sql").joinpath("init-db.sql").read_text(
        encoding="utf-8"
    )


def split_statements(sql: str) -> list[str]:
    """Split a script on ';' and drop comment-only / blank chunks.

    Prepared-statement drivers accept one statement per call. Semicolons
    inside string literals are not supported.
    """
    statements = []
    for chunk in sql.split(";"):
        lines = [
            line for line in chunk.splitlines()
            if line.strip() and not line.strip().startswith("--")
        ]
        if lines:
            statements.append("\n".join(lines).strip())
    return statements


async def migrate(database_url: str, sql: str) -> list[dict]:
    """Run the script and return the pages rows ordered by id."""
    engine = create_engine_for(database_url)
    try:
        async with engine.begin() as conn:
            for statement in split_statements(sql):
                await conn.exec_driver_sql(statement)
        async with engine.connect() as conn:
            result = await conn.exec_driver_sql(
                "SELECT id, type, title FROM pages ORDER BY id"
            )
            return [dict(row) for row in result.mappings().all()]
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create and seed the pages table")
    parser.add_argument(
        "--database-url",
        default=settings.database_dsn,
        help="Database URL (default: NEON_DATABASE_URL / DATABASE_URL)",
    )
    parser.add_argument(
        "--sql", type=Path, default=None,
        help="SQL script to run instead of the bundled init-db.sql",
    )
    args = parser.parse_args(argv)

    if not args.database_url:
        print("✗ Error: NEON_DATABASE_URL not configured", file=sys.stderr)
        return 1

    sql = args.sql.read_text(encoding="utf-8") if args.sql else bundled_sql()

    print("Running migration...")
    try:
        rows = asyncio.run(migrate(args.database_url, sql))
    except (SQLAlchemyError, OSError) as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    print("✓ Migration complete")
    print(f'✓ Table "pages" contains {len(rows)} rows:')
    for row in rows:
        print(f'  - {row["type"]}: "{row["title"]}"')
    return 0


if __name__ == "__main__":
    sys.exit(main())
