from __future__ import annotations

import logging

from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.application.use_cases.health.create_vaccine import normalize_name
from goatfarm.domain.models.disease import Disease

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, name: str) -> Disease:
    created = await uow.diseases.add(Disease.create(normalize_name(name, entity="Disease")))
    await uow.commit()
    logger.info("Disease %r created with id=%s", created.name, created.id)
    return created
