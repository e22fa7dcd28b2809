from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from goatfarm.application.interfaces.repositories.diseases import DiseaseRepository
from goatfarm.domain.models.disease import Disease
from goatfarm.infrastructure.db.errors import translate_integrity_error
from goatfarm.infrastructure.db.orm.disease import DiseaseORM
from goatfarm.infrastructure.db.orm.goat_disease import GoatDiseaseORM

logger = logging.getLogger(__name__)


class DiseasesSQLAlchemyRepository(DiseaseRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: DiseaseORM) -> Disease:
        return Disease(id=orm.id, name=orm.name)

    async def add(self, disease: Disease) -> Disease:
        orm = DiseaseORM(name=disease.name)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Disease") from exc
        return self._to_domain(orm)

    async def get(self, disease_id: int) -> Disease | None:
        orm = await self.session.get(DiseaseORM, disease_id)
        return self._to_domain(orm) if orm else None

    async def find_by_name(self, name: str) -> Disease | None:
        res = await self.session.execute(select(DiseaseORM).where(DiseaseORM.name == name))
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_or_create(self, name: str) -> Disease:
        existing = await self.find_by_name(name)
        if existing is not None:
            return existing
        created = await self.add(Disease.create(name))
        logger.debug("Inserted disease %r with id=%s", name, created.id)
        return created

    async def list(self) -> list[Disease]:
        res = await self.session.execute(select(DiseaseORM).order_by(DiseaseORM.id))
        return [self._to_domain(orm) for orm in res.scalars().all()]

    async def delete(self, disease_id: int) -> bool:
        res = await self.session.execute(delete(DiseaseORM).where(DiseaseORM.id == disease_id))
        return res.rowcount > 0

    async def list_goat_ids(self, disease_id: int) -> list[int]:
        stmt = (
            select(GoatDiseaseORM.goat_id)
            .where(GoatDiseaseORM.disease_id == disease_id)
            .order_by(GoatDiseaseORM.goat_id)
        )
        res = await self.session.execute(stmt)
        return list(res.scalars().all())
