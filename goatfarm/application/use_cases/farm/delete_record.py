from __future__ import annotations

import logging

from goatfarm.application.errors import NotFound
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.application.use_cases.farm.records import RecordKind, parse_kind, repository_for

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, kind: RecordKind | str, record_id: int) -> None:
    kind = parse_kind(kind)
    deleted = await repository_for(uow, kind).delete(record_id)
    if not deleted:
        raise NotFound(f"No {kind.value} found with id {record_id}")
    await uow.commit()
    logger.info("Deleted %s %s", kind.value, record_id)
