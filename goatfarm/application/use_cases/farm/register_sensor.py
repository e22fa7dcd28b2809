from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from goatfarm.application.errors import ValidationError
from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.sensor import Sensor


@dataclass(slots=True)
class RegisterSensorInput:
    sensor_type: str
    location: str | None = None
    last_reading: float | None = None
    last_reading_time: datetime | None = None
    status: str | None = None


async def execute(uow: UnitOfWork, payload: RegisterSensorInput) -> Sensor:
    if not payload.sensor_type or not payload.sensor_type.strip():
        raise ValidationError("Sensor type is required", details={"field": "sensor_type"})
    sensor = Sensor.create(
        payload.sensor_type,
        location=payload.location,
        last_reading=payload.last_reading,
        last_reading_time=payload.last_reading_time,
        status=payload.status,
    )
    created = await uow.sensors.add(sensor)
    await uow.commit()
    return created
