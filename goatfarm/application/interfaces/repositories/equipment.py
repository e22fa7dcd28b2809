from __future__ import annotations

from typing import Protocol

from goatfarm.domain.models.equipment import Equipment


class EquipmentRepository(Protocol):
    async def add(self, equipment: Equipment) -> Equipment: ...

    async def get(self, equipment_id: int) -> Equipment | None: ...

    async def list(self) -> list[Equipment]: ...

    async def update(self, equipment_id: int, data: dict) -> Equipment | None: ...

    async def delete(self, equipment_id: int) -> bool: ...
