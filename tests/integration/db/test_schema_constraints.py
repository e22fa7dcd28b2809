from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from goatfarm.application.errors import (
    DuplicateError,
    InvalidEnumValue,
    MissingReferenceError,
    NotFound,
)
from goatfarm.application.use_cases.farm import delete_record
from goatfarm.application.use_cases.health import create_disease, delete_disease, delete_vaccine
from goatfarm.domain.models.disease import Disease
from goatfarm.domain.models.goat import Goat
from goatfarm.domain.models.space import Space
from goatfarm.domain.models.vaccine import Vaccine
from goatfarm.domain.models.worker import Worker


async def add_goat(uow_factory, name="Daisy", gender="Female") -> int:
    async with uow_factory() as uow:
        goat = await uow.goats.add(Goat.create(breed="Beetal", name=name, gender=gender))
        await uow.commit()
    return goat.id


async def count(engine, table: str) -> int:
    async with engine.connect() as conn:
        return (await conn.execute(text(f"SELECT COUNT(*) FROM {table}"))).scalar_one()


@pytest.mark.asyncio
async def test_goat_gender_outside_enumeration_is_rejected(engine, uow_factory):
    async with uow_factory() as uow:
        with pytest.raises(InvalidEnumValue):
            await uow.goats.add(Goat.create(breed="Boer", name="X", gender="Unknown"))
    assert await count(engine, "goats") == 0


@pytest.mark.asyncio
async def test_lowercase_gender_is_rejected_by_storage(engine):
    with pytest.raises(IntegrityError):
        async with engine.begin() as conn:
            await conn.execute(
                text("INSERT INTO goats (breed, name, gender) VALUES ('Boer', 'X', 'male')")
            )


@pytest.mark.asyncio
async def test_space_type_outside_enumeration_is_rejected(engine, uow_factory):
    async with uow_factory() as uow:
        with pytest.raises(InvalidEnumValue):
            await uow.spaces.add(Space.create("Shed", type="barn"))
    assert await count(engine, "spaces") == 0


@pytest.mark.asyncio
async def test_space_type_may_be_null(uow_factory):
    async with uow_factory() as uow:
        space = await uow.spaces.add(Space.create("Corner"))
        await uow.commit()
    assert space.id is not None
    assert space.type is None


@pytest.mark.asyncio
async def test_vaccine_names_are_unique(engine, uow_factory):
    async with uow_factory() as uow:
        await uow.vaccines.add(Vaccine.create("Rabies"))
        await uow.commit()
    async with uow_factory() as uow:
        with pytest.raises(DuplicateError):
            await uow.vaccines.add(Vaccine.create("Rabies"))
    assert await count(engine, "vaccines") == 1


@pytest.mark.asyncio
async def test_disease_names_are_unique(engine, uow_factory):
    async with uow_factory() as uow:
        await create_disease.execute(uow, "Mastitis")
    async with uow_factory() as uow:
        with pytest.raises(DuplicateError):
            await uow.diseases.add(Disease.create("Mastitis"))
    async with uow_factory() as uow:
        with pytest.raises(DuplicateError):
            await create_disease.execute(uow, " Mastitis ")
    assert await count(engine, "diseases") == 1


@pytest.mark.asyncio
async def test_link_to_missing_vaccine_is_rejected(engine, uow_factory):
    goat_id = await add_goat(uow_factory)
    async with uow_factory() as uow:
        with pytest.raises(MissingReferenceError):
            await uow.goats.link_vaccine(goat_id, 999)
    assert await count(engine, "goat_vaccines") == 0


@pytest.mark.asyncio
async def test_link_to_missing_goat_is_rejected(uow_factory):
    async with uow_factory() as uow:
        vaccine = await uow.vaccines.add(Vaccine.create("CDT"))
        await uow.commit()
    async with uow_factory() as uow:
        with pytest.raises(MissingReferenceError):
            await uow.goats.link_vaccine(12345, vaccine.id)


@pytest.mark.asyncio
async def test_duplicate_link_pair_is_rejected(engine, uow_factory):
    goat_id = await add_goat(uow_factory)
    async with uow_factory() as uow:
        disease = await uow.diseases.get_or_create("Mastitis")
        await uow.goats.link_disease(goat_id, disease.id)
        await uow.commit()
    async with uow_factory() as uow:
        with pytest.raises(DuplicateError):
            await uow.goats.link_disease(goat_id, disease.id)
    assert await count(engine, "goat_diseases") == 1


@pytest.mark.asyncio
async def test_deleting_goat_cascades_to_links_only(engine, uow_factory):
    goat_id = await add_goat(uow_factory)
    other_id = await add_goat(uow_factory, name="Bella")
    async with uow_factory() as uow:
        rabies = await uow.vaccines.get_or_create("Rabies")
        cdt = await uow.vaccines.get_or_create("CDT")
        rot = await uow.diseases.get_or_create("FootRot")
        await uow.goats.link_vaccine(goat_id, rabies.id)
        await uow.goats.link_vaccine(goat_id, cdt.id)
        await uow.goats.link_vaccine(other_id, cdt.id)
        await uow.goats.link_disease(goat_id, rot.id)
        await uow.commit()

    async with uow_factory() as uow:
        assert await uow.goats.delete(goat_id)
        await uow.commit()

    assert await count(engine, "goat_vaccines") == 1
    assert await count(engine, "goat_diseases") == 0
    assert await count(engine, "vaccines") == 2
    assert await count(engine, "diseases") == 1
    async with uow_factory() as uow:
        assert await uow.vaccines.list_goat_ids(cdt.id) == [other_id]


@pytest.mark.asyncio
async def test_deleting_vaccine_cascades_to_links_and_keeps_goats(engine, uow_factory):
    goat_id = await add_goat(uow_factory)
    async with uow_factory() as uow:
        rabies = await uow.vaccines.get_or_create("Rabies")
        cdt = await uow.vaccines.get_or_create("CDT")
        await uow.goats.link_vaccine(goat_id, rabies.id)
        await uow.goats.link_vaccine(goat_id, cdt.id)
        await uow.commit()

    async with uow_factory() as uow:
        await delete_vaccine.execute(uow, rabies.id)

    async with uow_factory() as uow:
        goat = await uow.goats.get(goat_id)
    assert goat is not None
    assert [ref.name for ref in goat.vaccinations] == ["CDT"]
    assert await count(engine, "goat_vaccines") == 1


@pytest.mark.asyncio
async def test_deleting_disease_cascades_to_links(engine, uow_factory):
    goat_id = await add_goat(uow_factory)
    async with uow_factory() as uow:
        disease = await uow.diseases.get_or_create("Pneumonia")
        await uow.goats.link_disease(goat_id, disease.id)
        await uow.commit()
    async with uow_factory() as uow:
        await delete_disease.execute(uow, disease.id)
    assert await count(engine, "goat_diseases") == 0
    assert await count(engine, "goats") == 1


@pytest.mark.asyncio
async def test_deleting_missing_catalogue_rows_raises_not_found(uow_factory):
    async with uow_factory() as uow:
        with pytest.raises(NotFound):
            await delete_vaccine.execute(uow, 77)
    async with uow_factory() as uow:
        with pytest.raises(NotFound):
            await delete_disease.execute(uow, 77)


@pytest.mark.asyncio
async def test_defaults_applied_when_columns_omitted(engine):
    async with engine.begin() as conn:
        await conn.execute(
            text("INSERT INTO goats (breed, name, gender) VALUES ('Boer', 'Nanny', 'Female')")
        )
        await conn.execute(text("INSERT INTO workers (name) VALUES ('Asha')"))
        goat = (await conn.execute(text("SELECT offspring, created_at FROM goats"))).one()
        worker = (
            await conn.execute(text("SELECT hours_worked, leaves, created_at FROM workers"))
        ).one()
    assert goat.offspring == 0
    assert goat.created_at is not None
    assert worker.hours_worked == 0
    assert worker.leaves == 0
    assert worker.created_at is not None


@pytest.mark.asyncio
async def test_repository_reads_back_server_defaults(uow_factory):
    async with uow_factory() as uow:
        worker = await uow.workers.add(Worker.create("Ravi"))
        await uow.commit()
    assert worker.hours_worked == 0
    assert worker.created_at is not None


@pytest.mark.asyncio
async def test_deleted_ids_are_not_reused(uow_factory):
    first = await add_goat(uow_factory, name="One")
    second = await add_goat(uow_factory, name="Two")
    async with uow_factory() as uow:
        await uow.goats.delete(second)
        await uow.commit()
    third = await add_goat(uow_factory, name="Three")
    assert first < second < third


@pytest.mark.asyncio
async def test_unlinked_tables_delete_without_side_effects(engine, uow_factory):
    goat_id = await add_goat(uow_factory)
    async with uow_factory() as uow:
        worker = await uow.workers.add(Worker.create("Asha"))
        space = await uow.spaces.add(Space.create("Enclosure 1", type="enclosure"))
        await uow.commit()

    async with uow_factory() as uow:
        await delete_record.execute(uow, "worker", worker.id)
    async with uow_factory() as uow:
        await delete_record.execute(uow, "space", space.id)

    assert await count(engine, "workers") == 0
    assert await count(engine, "spaces") == 0
    async with uow_factory() as uow:
        assert await uow.goats.get(goat_id) is not None
