from __future__ import annotations

from typing import Protocol

from goatfarm.domain.models.disease import Disease


class DiseaseRepository(Protocol):
    async def add(self, disease: Disease) -> Disease: ...

    async def get(self, disease_id: int) -> Disease | None: ...

    async def find_by_name(self, name: str) -> Disease | None: ...

    async def get_or_create(self, name: str) -> Disease: ...

    async def list(self) -> list[Disease]: ...

    async def delete(self, disease_id: int) -> bool: ...

    async def list_goat_ids(self, disease_id: int) -> list[int]: ...
