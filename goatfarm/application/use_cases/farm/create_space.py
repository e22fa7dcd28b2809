from __future__ import annotations

from dataclasses import dataclass

from goatfarm.application.errors import InvalidEnumValue, ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.space import Space
from goatfarm.domain.value_objects.space_type import SpaceType


@dataclass(slots=True)
class CreateSpaceInput:
    name: str
    type: str | None = None
    capacity: int | None = None
    grass_condition: str | None = None
    health: str | None = None


def ensure_valid_space_type(value: str | SpaceType | None) -> str | None:
    if value is None:
        return None
    try:
        return SpaceType.parse(value).value
    except ValueError as exc:
        raise InvalidEnumValue(str(exc), details={"field": "type", "value": value}) from exc


async def execute(uow: UnitOfWork, payload: CreateSpaceInput) -> Space:
    if not payload.name or not payload.name.strip():
        raise ValidationError("Space name is required", details={"field": "name"})
    space = Space.create(
        payload.name,
        type=ensure_valid_space_type(payload.type),
        capacity=payload.capacity,
        grass_condition=payload.grass_condition,
        health=payload.health,
    )
    created = await uow.spaces.add(space)
    await uow.commit()
    return created
