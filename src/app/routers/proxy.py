"""Database proxy — page content lookup and pass-through SQL.

Endpoints:
    GET  /api/health              Liveness probe
    GET  /api/page?type=<type>    One row of the pages table
    POST /api/query               Run {sql, params} and return the rows

Positional params go to the database driver unchanged, so placeholders follow
the driver's style ($1, $2 ... for Postgres). Named params (a JSON object)
use :name placeholders on every database. There is no whitelist.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel
from sqlalchemy import TextClause, select, text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.database import DatabaseNotConfigured, get_engine, require_engine
from app.models import Page

router = APIRouter(prefix="/api", tags=["proxy"])


class QueryRequest(BaseModel):
    """Raw SQL plus optional parameters."""
    sql: Optional[str] = None
    params: Optional[Union[list[Any], dict[str, Any]]] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _db_message(exc: Exception) -> str:
    """The driver's own message where there is one."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def named_statement(sql: str) -> TextClause:
    """Wrap SQL with ``:name`` placeholders so the dialect rewrites them.

    Positional params skip this and reach the driver as written.
    """
    return text(sql)


@router.get("/health")
async def health():
    return {"ok": True}


@router.get("/page")
async def get_page(
    type: Optional[str] = None,
    engine: Optional[AsyncEngine] = Depends(get_engine),
):
    """Fetch page content by type (login, admin)."""
    if not type:
        return _error(400, "Missing `type` query parameter")

    try:
        async with AsyncSession(require_engine(engine)) as session:
            result = await session.execute(select(Page).where(Page.type == type))
            page = result.scalars().first()
    except (DatabaseNotConfigured, SQLAlchemyError) as e:
        logger.error(f"Page fetch error: {e}")
        return _error(500, _db_message(e))

    if page is None:
        return _error(404, f'Page type "{type}" not found')
    return {"success": True, "page": page.to_dict()}


@router.post("/query")
async def run_query(
    body: Optional[QueryRequest] = None,
    engine: Optional[AsyncEngine] = Depends(get_engine),
):
    """Forward a SQL statement to the database verbatim."""
    if body is None or not body.sql:
        return _error(400, "Missing `sql` in request body")

    try:
        async with require_engine(engine).begin() as conn:
            if isinstance(body.params, dict):
                result = await conn.execute(named_statement(body.sql), body.params)
            else:
                result = await conn.exec_driver_sql(body.sql, tuple(body.params or ()))
            if result.returns_rows:
                rows = [dict(row) for row in result.mappings().all()]
                row_count = len(rows)
            else:
                rows = []
                row_count = result.rowcount
    except (DatabaseNotConfigured, SQLAlchemyError) as e:
        logger.error(f"Query error: {e}")
        return _error(500, _db_message(e))

    return {"rows": jsonable_encoder(rows), "rowCount": row_count}
