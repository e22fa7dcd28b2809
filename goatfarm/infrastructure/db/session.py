from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from goatfarm.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def _install_sqlite_pragmas(engine: AsyncEngine, journal_mode: str | None) -> None:
    # SQLite ships with foreign keys disabled per connection; cascades and
    # reference checks only apply once the pragma is on.
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
            if journal_mode:
                cursor.execute(f"PRAGMA journal_mode={journal_mode}")
        finally:
            cursor.close()


def create_engine(
    database_url: str, *, echo: bool = False, journal_mode: str | None = "WAL"
) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=echo, future=True)
    if engine.dialect.name == "sqlite":
        _install_sqlite_pragmas(engine, journal_mode)
    logger.info("Database engine created for dialect %s", engine.dialect.name)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.goats = None
        self.vaccines = None
        self.diseases = None
        self.workers = None
        self.equipment = None
        self.sensors = None
        self.spaces = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from goatfarm.infrastructure.repos.diseases_sqlalchemy import DiseasesSQLAlchemyRepository
        from goatfarm.infrastructure.repos.equipment_sqlalchemy import (
            EquipmentSQLAlchemyRepository,
        )
        from goatfarm.infrastructure.repos.goats_sqlalchemy import GoatsSQLAlchemyRepository
        from goatfarm.infrastructure.repos.sensors_sqlalchemy import SensorsSQLAlchemyRepository
        from goatfarm.infrastructure.repos.spaces_sqlalchemy import SpacesSQLAlchemyRepository
        from goatfarm.infrastructure.repos.vaccines_sqlalchemy import VaccinesSQLAlchemyRepository
        from goatfarm.infrastructure.repos.workers_sqlalchemy import WorkersSQLAlchemyRepository

        self.goats = GoatsSQLAlchemyRepository(self.session)
        self.vaccines = VaccinesSQLAlchemyRepository(self.session)
        self.diseases = DiseasesSQLAlchemyRepository(self.session)
        self.workers = WorkersSQLAlchemyRepository(self.session)
        self.equipment = EquipmentSQLAlchemyRepository(self.session)
        self.sensors = SensorsSQLAlchemyRepository(self.session)
        self.spaces = SpacesSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.goats = None
            self.vaccines = None
            self.diseases = None
            self.workers = None
            self.equipment = None
            self.sensors = None
            self.spaces = None

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
