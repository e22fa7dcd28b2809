from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from goatfarm.application.interfaces.repositories.sensors import SensorRepository
from goatfarm.domain.models.sensor import Sensor
from goatfarm.infrastructure.db.errors import translate_integrity_error
from goatfarm.infrastructure.db.orm.sensor import SensorORM

UPDATABLE_FIELDS = frozenset(
    {"sensor_type", "location", "last_reading", "last_reading_time", "status"}
)


class SensorsSQLAlchemyRepository(SensorRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SensorORM) -> Sensor:
        return Sensor(
            id=orm.id,
            sensor_type=orm.sensor_type,
            location=orm.location,
            last_reading=orm.last_reading,
            last_reading_time=orm.last_reading_time,
            status=orm.status,
            created_at=orm.created_at,
        )

    async def add(self, sensor: Sensor) -> Sensor:
        orm = SensorORM(
            sensor_type=sensor.sensor_type,
            location=sensor.location,
            last_reading=sensor.last_reading,
            last_reading_time=sensor.last_reading_time,
            status=sensor.status,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Sensor") from exc
        return self._to_domain(orm)

    async def get(self, sensor_id: int) -> Sensor | None:
        orm = await self.session.get(SensorORM, sensor_id)
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Sensor]:
        res = await self.session.execute(select(SensorORM).order_by(SensorORM.id))
        return [self._to_domain(orm) for orm in res.scalars().all()]

    async def update(self, sensor_id: int, data: dict) -> Sensor | None:
        unknown = set(data) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown sensor fields: {sorted(unknown)}")
        orm = await self.session.get(SensorORM, sensor_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, entity="Sensor") from exc
        return self._to_domain(orm)

    async def delete(self, sensor_id: int) -> bool:
        res = await self.session.execute(delete(SensorORM).where(SensorORM.id == sensor_id))
        return res.rowcount > 0
