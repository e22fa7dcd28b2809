from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from goatfarm.application.errors import NotFound
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.application.use_cases.goats.create_goat import (
    ensure_required_text,
    ensure_valid_gender,
)
from goatfarm.application.use_cases.goats.links import link_references
from goatfarm.domain.models.goat import DiseaseRef, Goat, VaccineRef

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateGoatInput:
    """Full replacement of a goat record, including both link sets."""

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


async def execute(uow: UnitOfWork, goat_id: int, payload: UpdateGoatInput) -> Goat:
    data = {
        "breed": ensure_required_text("breed", payload.breed),
        "name": ensure_required_text("name", payload.name),
        "gender": ensure_valid_gender(payload.gender),
        "offspring": payload.offspring,
        "cost": payload.cost,
        "weight": payload.weight,
        "current_price": payload.current_price,
        "diet": payload.diet,
        "last_bred": payload.last_bred,
        "health_status": payload.health_status,
    }
    updated = await uow.goats.update(goat_id, data)
    if updated is None:
        logger.warning("No goat found for update id=%s", goat_id)
        raise NotFound(f"No goat found with id {goat_id}")
    await uow.goats.clear_links(goat_id)
    await link_references(uow, goat_id, payload.vaccinations, payload.diseases)
    result = await uow.goats.get(goat_id)
    await uow.commit()
    logger.info("Updated goat %s and its associations", goat_id)
    return result
