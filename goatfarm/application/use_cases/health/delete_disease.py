from __future__ import annotations

import logging

from goatfarm.application.errors import NotFound
from goatfarm.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, disease_id: int) -> None:
    deleted = await uow.diseases.delete(disease_id)
    if not deleted:
        raise NotFound(f"No disease found with id {disease_id}")
    await uow.commit()
    logger.info("Disease %s deleted", disease_id)
