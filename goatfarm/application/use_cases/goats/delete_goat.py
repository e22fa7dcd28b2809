from __future__ import annotations

import logging

from goatfarm.application.errors import NotFound
from goatfarm.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, goat_id: int) -> None:
    deleted = await uow.goats.delete(goat_id)
    if not deleted:
        logger.warning("Goat not found for deletion id=%s", goat_id)
        raise NotFound(f"No goat found with id {goat_id}")
    await uow.commit()
    logger.info("Goat %s deleted", goat_id)
