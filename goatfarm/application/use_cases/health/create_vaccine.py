from __future__ import annotations

import logging

from goatfarm.application.errors import ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.vaccine import Vaccine

logger = logging.getLogger(__name__)


def normalize_name(name: str | None, *, entity: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"{entity} name is required", details={"field": "name"})
    return cleaned


async def execute(uow: UnitOfWork, name: str) -> Vaccine:
    created = await uow.vaccines.add(Vaccine.create(normalize_name(name, entity="Vaccine")))
    await uow.commit()
    logger.info("Vaccine %r created with id=%s", created.name, created.id)
    return created
