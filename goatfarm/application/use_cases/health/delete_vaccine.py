from __future__ import annotations

import logging

from goatfarm.application.errors import NotFound
from goatfarm.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, vaccine_id: int) -> None:
    # Links in goat_vaccines cascade; the goats themselves are untouched.
    deleted = await uow.vaccines.delete(vaccine_id)
    if not deleted:
        raise NotFound(f"No vaccine found with id {vaccine_id}")
    await uow.commit()
    logger.info("Vaccine %s deleted", vaccine_id)
