from __future__ import annotations

import logging

from goatfarm.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, goat_id: int, disease_id: int) -> None:
    await uow.goats.link_disease(goat_id, disease_id)
    await uow.commit()
    logger.info("Disease %s recorded for goat %s", disease_id, goat_id)
