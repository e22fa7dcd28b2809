from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from goatfarm.application.interfaces.repositories.workers import WorkerRepository
from goatfarm.domain.models.worker import Worker
from goatfarm.infrastructure.db.errors import translate_integrity_error
from goatfarm.infrastructure.db.orm.worker import WorkerORM

UPDATABLE_FIELDS = frozenset({"name", "hours_worked", "leaves", "role", "contact"})


class WorkersSQLAlchemyRepository(WorkerRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: WorkerORM) -> Worker:
        return Worker(
            id=orm.id,
            name=orm.name,
            hours_worked=orm.hours_worked if orm.hours_worked is not None else 0,
            leaves=orm.leaves if orm.leaves is not None else 0,
            role=orm.role,
            contact=orm.contact,
            created_at=orm.created_at,
        )

    async def add(self, worker: Worker) -> Worker:
        orm = WorkerORM(
            name=worker.name,
            hours_worked=worker.hours_worked,
            leaves=worker.leaves,
            role=worker.role,
            contact=worker.contact,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Worker") from exc
        return self._to_domain(orm)

    async def get(self, worker_id: int) -> Worker | None:
        orm = await self.session.get(WorkerORM, worker_id)
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Worker]:
        res = await self.session.execute(select(WorkerORM).order_by(WorkerORM.id))
        return [self._to_domain(orm) for orm in res.scalars().all()]

    async def update(self, worker_id: int, data: dict) -> Worker | None:
        unknown = set(data) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown worker fields: {sorted(unknown)}")
        orm = await self.session.get(WorkerORM, worker_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Worker") from exc
        return self._to_domain(orm)

    async def delete(self, worker_id: int) -> bool:
        res = await self.session.execute(delete(WorkerORM).where(WorkerORM.id == worker_id))
        return res.rowcount > 0
