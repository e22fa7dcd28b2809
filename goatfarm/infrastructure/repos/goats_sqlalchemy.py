from __future__ import annotations

import logging
from collections import defaultdict

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from goatfarm.application.interfaces.repositories.goats import GoatRepository
from goatfarm.domain.models.goat import DiseaseRef, Goat, VaccineRef
from goatfarm.infrastructure.db.errors import translate_integrity_error
from goatfarm.infrastructure.db.orm.disease import DiseaseORM
from goatfarm.infrastructure.db.orm.goat import GoatORM
from goatfarm.infrastructure.db.orm.goat_disease import GoatDiseaseORM
from goatfarm.infrastructure.db.orm.goat_vaccine import GoatVaccineORM
from goatfarm.infrastructure.db.orm.vaccine import VaccineORM

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "breed",
        "name",
        "gender",
        "offspring",
        "cost",
        "weight",
        "current_price",
        "diet",
        "last_bred",
        "health_status",
    }
)


class GoatsSQLAlchemyRepository(GoatRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(
        self,
        orm: GoatORM,
        vaccinations: list[VaccineRef] | None = None,
        diseases: list[DiseaseRef] | None = None,
    ) -> Goat:
        return Goat(
            id=orm.id,
            breed=orm.breed,
            name=orm.name,
            gender=orm.gender,
            offspring=orm.offspring if orm.offspring is not None else 0,
            cost=orm.cost,
            weight=orm.weight,
            current_price=orm.current_price,
            diet=orm.diet,
            last_bred=orm.last_bred,
            health_status=orm.health_status,
            created_at=orm.created_at,
            vaccinations=vaccinations or [],
            diseases=diseases or [],
        )

    async def add(self, goat: Goat) -> Goat:
        orm = GoatORM(
            breed=goat.breed,
            name=goat.name,
            gender=goat.gender,
            offspring=goat.offspring,
            cost=goat.cost,
            weight=goat.weight,
            current_price=goat.current_price,
            diet=goat.diet,
            last_bred=goat.last_bred,
            health_status=goat.health_status,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Goat") from exc
        logger.debug("Inserted goat base record id=%s", orm.id)
        return self._to_domain(orm)

    async def get(self, goat_id: int) -> Goat | None:
        stmt = select(GoatORM).where(GoatORM.id == goat_id)
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        if orm is None:
            return None
        vaccinations = await self.list_vaccines(goat_id)
        diseases = await self.list_diseases(goat_id)
        logger.debug(
            "Loaded goat id=%s with %d vaccines and %d diseases",
            goat_id,
            len(vaccinations),
            len(diseases),
        )
        return self._to_domain(orm, vaccinations, diseases)

    async def list(self) -> list[Goat]:
        res = await self.session.execute(select(GoatORM).order_by(GoatORM.id))
        goats = res.scalars().all()
        if not goats:
            return []

        vaccines_by_goat: dict[int, list[VaccineRef]] = defaultdict(list)
        vstmt = (
            select(GoatVaccineORM.goat_id, VaccineORM.id, VaccineORM.name)
            .join(VaccineORM, VaccineORM.id == GoatVaccineORM.vaccine_id)
            .order_by(GoatVaccineORM.goat_id, VaccineORM.id)
        )
        for goat_id, vaccine_id, name in (await self.session.execute(vstmt)).all():
            vaccines_by_goat[goat_id].append(VaccineRef(id=vaccine_id, name=name))

        diseases_by_goat: dict[int, list[DiseaseRef]] = defaultdict(list)
        dstmt = (
            select(GoatDiseaseORM.goat_id, DiseaseORM.id, DiseaseORM.name)
            .join(DiseaseORM, DiseaseORM.id == GoatDiseaseORM.disease_id)
            .order_by(GoatDiseaseORM.goat_id, DiseaseORM.id)
        )
        for goat_id, disease_id, name in (await self.session.execute(dstmt)).all():
            diseases_by_goat[goat_id].append(DiseaseRef(id=disease_id, name=name))

        return [
            self._to_domain(orm, vaccines_by_goat.get(orm.id), diseases_by_goat.get(orm.id))
            for orm in goats
        ]

    async def update(self, goat_id: int, data: dict) -> Goat | None:
        unknown = set(data) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown goat fields: {sorted(unknown)}")
        orm = await self.session.get(GoatORM, goat_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Goat") from exc
        return self._to_domain(orm)

    async def delete(self, goat_id: int) -> bool:
        # goat_vaccines/goat_diseases rows go with it through ON DELETE CASCADE
        res = await self.session.execute(delete(GoatORM).where(GoatORM.id == goat_id))
        return res.rowcount > 0

    async def link_vaccine(self, goat_id: int, vaccine_id: int) -> None:
        stmt = insert(GoatVaccineORM).values(goat_id=goat_id, vaccine_id=vaccine_id)
        try:
            await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Goat vaccine link") from exc
        logger.debug("Linked vaccine %s to goat %s", vaccine_id, goat_id)

    async def link_disease(self, goat_id: int, disease_id: int) -> None:
        stmt = insert(GoatDiseaseORM).values(goat_id=goat_id, disease_id=disease_id)
        try:
            await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Goat disease link") from exc
        logger.debug("Linked disease %s to goat %s", disease_id, goat_id)

    async def clear_links(self, goat_id: int) -> None:
        await self.session.execute(delete(GoatVaccineORM).where(GoatVaccineORM.goat_id == goat_id))
        await self.session.execute(delete(GoatDiseaseORM).where(GoatDiseaseORM.goat_id == goat_id))
        logger.debug("Cleared vaccine and disease links for goat %s", goat_id)

    async def list_vaccines(self, goat_id: int) -> list[VaccineRef]:
        stmt = (
            select(VaccineORM.id, VaccineORM.name)
            .join(GoatVaccineORM, GoatVaccineORM.vaccine_id == VaccineORM.id)
            .where(GoatVaccineORM.goat_id == goat_id)
            .order_by(VaccineORM.id)
        )
        res = await self.session.execute(stmt)
        return [VaccineRef(id=row.id, name=row.name) for row in res.all()]

    async def list_diseases(self, goat_id: int) -> list[DiseaseRef]:
        stmt = (
            select(DiseaseORM.id, DiseaseORM.name)
            .join(GoatDiseaseORM, GoatDiseaseORM.disease_id == DiseaseORM.id)
            .where(GoatDiseaseORM.goat_id == goat_id)
            .order_by(DiseaseORM.id)
        )
        res = await self.session.execute(stmt)
        return [DiseaseRef(id=row.id, name=row.name) for row in res.all()]
