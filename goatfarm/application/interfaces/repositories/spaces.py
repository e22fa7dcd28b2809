from __future__ import annotations

from typing import Protocol

from goatfarm.domain.models.space import Space


class SpaceRepository(Protocol):
    async def add(self, space: Space) -> Space: ...

    async def get(self, space_id: int) -> Space | None: ...

    async def list(self) -> list[Space]: ...

    async def update(self, space_id: int, data: dict) -> Space | None: ...

    async def delete(self, space_id: int) -> bool: ...
