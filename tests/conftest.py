from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from goatfarm.config.settings import Settings
from goatfarm.infrastructure.db.schema import apply_schema
from goatfarm.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
async def raw_engine(test_settings: Settings) -> AsyncIterator[AsyncEngine]:
    """Engine on an empty database; no tables yet."""
    engine = create_engine(
        test_settings.database_url, journal_mode=test_settings.sqlite_journal_mode
    )
    yield engine
    await engine.dispose()


@pytest.fixture()
async def engine(raw_engine: AsyncEngine) -> AsyncEngine:
    await apply_schema(raw_engine)
    return raw_engine


@pytest.fixture()
def uow_factory(engine: AsyncEngine) -> Callable[[], SQLAlchemyUnitOfWork]:
    session_factory = create_session_factory(engine)
    return lambda: SQLAlchemyUnitOfWork(session_factory)
