from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from goatfarm.application.errors import ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.equipment import Equipment


@dataclass(slots=True)
class RegisterEquipmentInput:
    name: str
    description: str | None = None
    purchase_date: date | None = None
    condition: str | None = None
    last_maintenance: date | None = None


async def execute(uow: UnitOfWork, payload: RegisterEquipmentInput) -> Equipment:
    if not payload.name or not payload.name.strip():
        raise ValidationError("Equipment name is required", details={"field": "name"})
    equipment = Equipment.create(
        payload.name,
        description=payload.description,
        purchase_date=payload.purchase_date,
        condition=payload.condition,
        last_maintenance=payload.last_maintenance,
    )
    created = await uow.equipment.add(equipment)
    await uow.commit()
    return created
