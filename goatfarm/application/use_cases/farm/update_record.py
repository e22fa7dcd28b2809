from __future__ import annotations

from typing import Any

from goatfarm.application.errors import NotFound, ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.application.use_cases.farm.create_space import ensure_valid_space_type
from goatfarm.application.use_cases.farm.records import (
    REQUIRED_TEXT_FIELDS,
    RecordKind,
    parse_kind,
    repository_for,
)


async def execute(
    uow: UnitOfWork, kind: RecordKind | str, record_id: int, data: dict[str, Any]
) -> Any:
    kind = parse_kind(kind)
    required = REQUIRED_TEXT_FIELDS[kind]
    if required in data:
        value = data[required]
        if value is None or not str(value).strip():
            raise ValidationError(
                f"{kind.value.capitalize()} {required} is required",
                details={"kind": kind.value, "field": required},
            )
    if kind is RecordKind.SPACE and "type" in data:
        data = {**data, "type": ensure_valid_space_type(data["type"])}
    repo = repository_for(uow, kind)
    try:
        updated = await repo.update(record_id, data)
    except ValueError as exc:
        raise ValidationError(str(exc), details={"kind": kind.value}) from exc
    if updated is None:
        raise NotFound(f"No {kind.value} found with id {record_id}")
    await uow.commit()
    return updated
