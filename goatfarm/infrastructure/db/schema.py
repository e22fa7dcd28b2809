"""Create-if-absent application of the farm schema.

Two equivalent routes exist: the ORM metadata (``apply_schema``) and the
packaged ``schema.sql`` script (``apply_schema_script``). Both leave an
already-initialised database untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from goatfarm.application.errors import InfrastructureError
from goatfarm.infrastructure.db.base import Base
from goatfarm.infrastructure.db.orm import (  # noqa: F401
    disease,
    equipment,
    goat,
    goat_disease,
    goat_vaccine,
    sensor,
    space,
    vaccine,
    worker,
)

logger = logging.getLogger(__name__)

SCHEMA_SQL_PATH = Path(__file__).with_name("schema.sql")


def table_names() -> list[str]:
    """Managed tables in dependency order."""
    return [table.name for table in Base.metadata.sorted_tables]


def load_schema_statements(path: Path | None = None) -> list[str]:
    text = (path or SCHEMA_SQL_PATH).read_text(encoding="utf-8")
    lines = [line for line in text.splitlines() if not line.strip().startswith("--")]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


async def apply_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    logger.info("Schema applied from ORM metadata (%d tables)", len(Base.metadata.tables))


async def apply_schema_script(engine: AsyncEngine, path: Path | None = None) -> None:
    """Run the packaged DDL script statement by statement.

    The script is written in the SQLite dialect (`AUTOINCREMENT`), so other
    engines are refused; use `apply_schema` or the Alembic chain there.
    """
    if engine.dialect.name != "sqlite":
        raise InfrastructureError(
            "The schema script only supports SQLite",
            details={"dialect": engine.dialect.name},
        )
    statements = load_schema_statements(path)
    try:
        async with engine.begin() as conn:
            for stmt in statements:
                await conn.exec_driver_sql(stmt)
    except SQLAlchemyError as exc:
        raise InfrastructureError(
            "Failed to apply schema script", details={"reason": str(exc)}
        ) from exc
    logger.info("Schema script applied (%d statements)", len(statements))
