from __future__ import annotations

from goatfarm.application.errors import NotFound
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.goat import Goat


async def execute(uow: UnitOfWork, goat_id: int) -> Goat:
    goat = await uow.goats.get(goat_id)
    if goat is None:
        raise NotFound(f"No goat found with id {goat_id}")
    return goat
