from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from goatfarm.application.interfaces.repositories.vaccines import VaccineRepository
from goatfarm.domain.models.vaccine import Vaccine
from goatfarm.infrastructure.db.errors import translate_integrity_error
from goatfarm.infrastructure.db.orm.goat_vaccine import GoatVaccineORM
from goatfarm.infrastructure.db.orm.vaccine import VaccineORM

logger = logging.getLogger(__name__)


class VaccinesSQLAlchemyRepository(VaccineRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VaccineORM) -> Vaccine:
        return Vaccine(id=orm.id, name=orm.name)

    async def add(self, vaccine: Vaccine) -> Vaccine:
        orm = VaccineORM(name=vaccine.name)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Vaccine") from exc
        return self._to_domain(orm)

    async def get(self, vaccine_id: int) -> Vaccine | None:
        orm = await self.session.get(VaccineORM, vaccine_id)
        return self._to_domain(orm) if orm else None

    async def find_by_name(self, name: str) -> Vaccine | None:
        res = await self.session.execute(select(VaccineORM).where(VaccineORM.name == name))
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_or_create(self, name: str) -> Vaccine:
        existing = await self.find_by_name(name)
        if existing is not None:
            return existing
        created = await self.add(Vaccine.create(name))
        logger.debug("Inserted vaccine %r with id=%s", name, created.id)
        return created

    async def list(self) -> list[Vaccine]:
        res = await self.session.execute(select(VaccineORM).order_by(VaccineORM.id))
        return [self._to_domain(orm) for orm in res.scalars().all()]

    async def delete(self, vaccine_id: int) -> bool:
        res = await self.session.execute(delete(VaccineORM).where(VaccineORM.id == vaccine_id))
        return res.rowcount > 0

    async def list_goat_ids(self, vaccine_id: int) -> list[int]:
        stmt = (
            select(GoatVaccineORM.goat_id)
            .where(GoatVaccineORM.vaccine_id == vaccine_id)
            .order_by(GoatVaccineORM.goat_id)
        )
        res = await self.session.execute(stmt)
        return list(res.scalars().all())
