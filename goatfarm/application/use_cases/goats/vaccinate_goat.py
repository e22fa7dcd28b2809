from __future__ import annotations

import logging

from goatfarm.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, goat_id: int, vaccine_id: int) -> None:
    """Record that a goat received a vaccine.

    Raises MissingReferenceError when either id is unknown and DuplicateError
    when the pair is already recorded.
    """
    await uow.goats.link_vaccine(goat_id, vaccine_id)
    await uow.commit()
    logger.info("Goat %s vaccinated with %s", goat_id, vaccine_id)
