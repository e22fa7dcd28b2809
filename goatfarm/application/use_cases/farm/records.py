from __future__ import annotations

from enum import Enum

from goatfarm.application.errors import ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork


class RecordKind(str, Enum):
    """Farm tables without foreign keys; deleting from them never cascades."""

    WORKER = "worker"
    EQUIPMENT = "equipment"
    SENSOR = "sensor"
    SPACE = "space"


_REPO_ATTRS = {
    RecordKind.WORKER: "workers",
    RecordKind.EQUIPMENT: "equipment",
    RecordKind.SENSOR: "sensors",
    RecordKind.SPACE: "spaces",
}

# Column that must stay non-blank on each table
REQUIRED_TEXT_FIELDS = {
    RecordKind.WORKER: "name",
    RecordKind.EQUIPMENT: "name",
    RecordKind.SENSOR: "sensor_type",
    RecordKind.SPACE: "name",
}


def parse_kind(kind: RecordKind | str) -> RecordKind:
    try:
        return RecordKind(kind)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown record kind: {kind!r}", details={"kind": kind}
        ) from exc


def repository_for(uow: UnitOfWork, kind: RecordKind | str):
    return getattr(uow, _REPO_ATTRS[parse_kind(kind)])
