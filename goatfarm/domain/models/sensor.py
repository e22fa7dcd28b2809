from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Sensor:
    id: int | None
    sensor_type: str
    location: str | None = None
    last_reading: float | None = None
    last_reading_time: datetime | None = None
    status: str | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        sensor_type: str,
        *,
        location: str | None = None,
        last_reading: float | None = None,
        last_reading_time: datetime | None = None,
        status: str | None = None,
    ) -> Sensor:
        return cls(
            id=None,
            sensor_type=sensor_type,
            location=location,
            last_reading=last_reading,
            last_reading_time=last_reading_time,
            status=status,
        )
