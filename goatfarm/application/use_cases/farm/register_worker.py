from __future__ import annotations

from dataclasses import dataclass

from goatfarm.application.errors import ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.worker import Worker


@dataclass(slots=True)
class RegisterWorkerInput:
    name: str
    hours_worked: int = 0
    leaves: int = 0
    role: str | None = None
    contact: str | None = None


async def execute(uow: UnitOfWork, payload: RegisterWorkerInput) -> Worker:
    if not payload.name or not payload.name.strip():
        raise ValidationError("Worker name is required", details={"field": "name"})
    worker = Worker.create(
        payload.name,
        hours_worked=payload.hours_worked,
        leaves=payload.leaves,
        role=payload.role,
        contact=payload.contact,
    )
    created = await uow.workers.add(worker)
    await uow.commit()
    return created
