from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from goatfarm.application.errors import InvalidEnumValue, ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.application.use_cases.goats.links import link_references
from goatfarm.domain.models.goat import DiseaseRef, Goat, VaccineRef
from goatfarm.domain.value_objects.gender import Gender

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateGoatInput:
    breed: str
    name: str
    gender: str
    offspring: int = 0
    cost: float | None = None
    weight: float | None = None
    current_price: float | None = None
    diet: str | None = None
    last_bred: date | None = None
    health_status: str | None = None
    vaccinations: list[VaccineRef] = field(default_factory=list)
    diseases: list[DiseaseRef] = field(default_factory=list)


def ensure_valid_gender(value: str | Gender) -> str:
    try:
        return Gender.parse(value).value
    except ValueError as exc:
        raise InvalidEnumValue(str(exc), details={"field": "gender", "value": value}) from exc


def ensure_required_text(field_name: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"Goat {field_name} is required", details={"field": field_name})
    return value


async def execute(uow: UnitOfWork, payload: CreateGoatInput) -> Goat:
    gender = ensure_valid_gender(payload.gender)
    goat = Goat.create(
        breed=ensure_required_text("breed", payload.breed),
        name=ensure_required_text("name", payload.name),
        gender=gender,
        offspring=payload.offspring,
        cost=payload.cost,
        weight=payload.weight,
        current_price=payload.current_price,
        diet=payload.diet,
        last_bred=payload.last_bred,
        health_status=payload.health_status,
    )
    created = await uow.goats.add(goat)
    await link_references(uow, created.id, payload.vaccinations, payload.diseases)
    result = await uow.goats.get(created.id)
    await uow.commit()
    logger.info("Added goat %s (%s) with associations", created.id, created.name)
    return result
