from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from goatfarm.application.interfaces.repositories.spaces import SpaceRepository
from goatfarm.domain.models.space import Space
from goatfarm.infrastructure.db.errors import translate_integrity_error
from goatfarm.infrastructure.db.orm.space import SpaceORM

UPDATABLE_FIELDS = frozenset({"name", "type", "capacity", "grass_condition", "health"})


class SpacesSQLAlchemyRepository(SpaceRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SpaceORM) -> Space:
        return Space(
            id=orm.id,
            name=orm.name,
            type=orm.type,
            capacity=orm.capacity,
            grass_condition=orm.grass_condition,
            health=orm.health,
            created_at=orm.created_at,
        )

    async def add(self, space: Space) -> Space:
        orm = SpaceORM(
            name=space.name,
            type=space.type,
            capacity=space.capacity,
            grass_condition=space.grass_condition,
            health=space.health,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Space") from exc
        return self._to_domain(orm)

    async def get(self, space_id: int) -> Space | None:
        orm = await self.session.get(SpaceORM, space_id)
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Space]:
        res = await self.session.execute(select(SpaceORM).order_by(SpaceORM.id))
        return [self._to_domain(orm) for orm in res.scalars().all()]

    async def update(self, space_id: int, data: dict) -> Space | None:
        unknown = set(data) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown space fields: {sorted(unknown)}")
        orm = await self.session.get(SpaceORM, space_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Space") from exc
        return self._to_domain(orm)

    async def delete(self, space_id: int) -> bool:
        res = await self.session.execute(delete(SpaceORM).where(SpaceORM.id == space_id))
        return res.rowcount > 0
