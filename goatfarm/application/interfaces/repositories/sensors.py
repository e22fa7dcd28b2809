from __future__ import annotations

from typing import Protocol

from goatfarm.domain.models.sensor import Sensor


class SensorRepository(Protocol):
    async def add(self, sensor: Sensor) -> Sensor: ...

    async def get(self, sensor_id: int) -> Sensor | None: ...

    async def list(self) -> list[Sensor]: ...

    async def update(self, sensor_id: int, data: dict) -> Sensor | None: ...

    async def delete(self, sensor_id: int) -> bool: ...
