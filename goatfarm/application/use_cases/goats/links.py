from __future__ import annotations

import logging

from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.application.use_cases.health.create_vaccine import normalize_name
from goatfarm.domain.models.goat import DiseaseRef, VaccineRef

logger = logging.getLogger(__name__)


async def resolve_vaccine_id(uow: UnitOfWork, ref: VaccineRef) -> int:
    # A supplied id is trusted as-is; the foreign key rejects it if it does not exist.
    if ref.id is not None:
        return ref.id
    vaccine = await uow.vaccines.get_or_create(normalize_name(ref.name, entity="Vaccine"))
    return vaccine.id


async def resolve_disease_id(uow: UnitOfWork, ref: DiseaseRef) -> int:
    if ref.id is not None:
        return ref.id
    disease = await uow.diseases.get_or_create(normalize_name(ref.name, entity="Disease"))
    return disease.id


async def link_references(
    uow: UnitOfWork,
    goat_id: int,
    vaccinations: list[VaccineRef],
    diseases: list[DiseaseRef],
) -> None:
    for ref in vaccinations:
        vaccine_id = await resolve_vaccine_id(uow, ref)
        await uow.goats.link_vaccine(goat_id, vaccine_id)
    for ref in diseases:
        disease_id = await resolve_disease_id(uow, ref)
        await uow.goats.link_disease(goat_id, disease_id)
    logger.debug(
        "Goat %s linked to %d vaccines and %d diseases",
        goat_id,
        len(vaccinations),
        len(diseases),
    )
