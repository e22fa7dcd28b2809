from __future__ import annotations

from types import SimpleNamespace

import pytest

from goatfarm.application.errors import InvalidEnumValue, NotFound, ValidationError
from goatfarm.application.use_cases.farm import (
    create_space,
    delete_record,
    register_worker,
    update_record,
)
from goatfarm.application.use_cases.farm.records import RecordKind
from goatfarm.domain.models.space import Space
from goatfarm.domain.models.worker import Worker


class StubRepo:
    def __init__(self) -> None:
        self.added = []
        self.deleted: list[int] = []
        self.updates: list[tuple[int, dict]] = []

    async def add(self, item):
        item.id = len(self.added) + 1
        self.added.append(item)
        return item

    async def update(self, record_id, data):
        self.updates.append((record_id, data))
        return None

    async def delete(self, record_id):
        self.deleted.append(record_id)
        return False


def make_uow():
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    return SimpleNamespace(
        workers=StubRepo(),
        equipment=StubRepo(),
        sensors=StubRepo(),
        spaces=StubRepo(),
        commit=commit,
        commits=commits,
    )


@pytest.mark.asyncio
async def test_create_space_rejects_unknown_type():
    uow = make_uow()
    with pytest.raises(InvalidEnumValue):
        await create_space.execute(uow, create_space.CreateSpaceInput(name="Pen", type="barn"))
    assert uow.spaces.added == []


@pytest.mark.asyncio
async def test_create_space_allows_missing_type():
    uow = make_uow()
    space = await create_space.execute(uow, create_space.CreateSpaceInput(name="Pen"))
    assert isinstance(space, Space)
    assert space.type is None
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_register_worker_defaults():
    uow = make_uow()
    worker = await register_worker.execute(
        uow, register_worker.RegisterWorkerInput(name="Asha", role="Feeder")
    )
    assert isinstance(worker, Worker)
    assert worker.hours_worked == 0
    assert worker.leaves == 0


@pytest.mark.asyncio
async def test_register_worker_requires_name():
    uow = make_uow()
    with pytest.raises(ValidationError):
        await register_worker.execute(uow, register_worker.RegisterWorkerInput(name=""))


@pytest.mark.asyncio
async def test_delete_record_routes_to_repository():
    uow = make_uow()
    with pytest.raises(NotFound):
        await delete_record.execute(uow, RecordKind.SENSOR, 3)
    assert uow.sensors.deleted == [3]
    assert uow.workers.deleted == []
    assert uow.commits == []


@pytest.mark.asyncio
async def test_delete_record_accepts_kind_string():
    uow = make_uow()

    async def delete_stub(record_id):
        return True

    uow.equipment.delete = delete_stub  # type: ignore
    await delete_record.execute(uow, "equipment", 1)
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_update_record_validates_space_type():
    uow = make_uow()
    with pytest.raises(InvalidEnumValue):
        await update_record.execute(uow, RecordKind.SPACE, 1, {"type": "pasture"})
    assert uow.spaces.updates == []


@pytest.mark.asyncio
async def test_update_record_missing_raises_not_found():
    uow = make_uow()
    with pytest.raises(NotFound):
        await update_record.execute(uow, RecordKind.WORKER, 9, {"hours_worked": 12})
    assert uow.workers.updates == [(9, {"hours_worked": 12})]


@pytest.mark.asyncio
async def test_unknown_record_kind_is_rejected():
    uow = make_uow()
    with pytest.raises(ValidationError) as info:
        await delete_record.execute(uow, "goat", 1)
    assert info.value.details == {"kind": "goat"}
    with pytest.raises(ValidationError):
        await update_record.execute(uow, "goat", 1, {"name": "Billy"})
    assert uow.commits == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("kind", "data"),
    [
        (RecordKind.WORKER, {"name": ""}),
        (RecordKind.EQUIPMENT, {"name": "   "}),
        (RecordKind.SPACE, {"name": None}),
        (RecordKind.SENSOR, {"sensor_type": ""}),
    ],
)
async def test_update_record_rejects_blank_required_text(kind, data):
    uow = make_uow()
    with pytest.raises(ValidationError):
        await update_record.execute(uow, kind, 1, data)
    assert uow.workers.updates == []
    assert uow.equipment.updates == []
    assert uow.sensors.updates == []
    assert uow.spaces.updates == []
