from __future__ import annotations

import logging

from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.goat import Goat

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork) -> list[Goat]:
    goats = await uow.goats.list()
    logger.info("Returning %d goats", len(goats))
    return goats
