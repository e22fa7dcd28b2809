from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from goatfarm.application.interfaces.repositories.equipment import EquipmentRepository
from goatfarm.domain.models.equipment import Equipment
from goatfarm.infrastructure.db.errors import translate_integrity_error
from goatfarm.infrastructure.db.orm.equipment import EquipmentORM

UPDATABLE_FIELDS = frozenset(
    {"name", "description", "purchase_date", "condition", "last_maintenance"}
)


class EquipmentSQLAlchemyRepository(EquipmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EquipmentORM) -> Equipment:
        return Equipment(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            purchase_date=orm.purchase_date,
            condition=orm.condition,
            last_maintenance=orm.last_maintenance,
            created_at=orm.created_at,
        )

    async def add(self, equipment: Equipment) -> Equipment:
        orm = EquipmentORM(
            name=equipment.name,
            description=equipment.description,
            purchase_date=equipment.purchase_date,
            condition=equipment.condition,
            last_maintenance=equipment.last_maintenance,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Equipment") from exc
        return self._to_domain(orm)

    async def get(self, equipment_id: int) -> Equipment | None:
        orm = await self.session.get(EquipmentORM, equipment_id)
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Equipment]:
        res = await self.session.execute(select(EquipmentORM).order_by(EquipmentORM.id))
        return [self._to_domain(orm) for orm in res.scalars().all()]

    async def update(self, equipment_id: int, data: dict) -> Equipment | None:
        unknown = set(data) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown equipment fields: {sorted(unknown)}")
        orm = await self.session.get(EquipmentORM, equipment_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Equipment") from exc
        return self._to_domain(orm)

    async def delete(self, equipment_id: int) -> bool:
        stmt = delete(EquipmentORM).where(EquipmentORM.id == equipment_id)
        res = await self.session.execute(stmt)
        return res.rowcount > 0
