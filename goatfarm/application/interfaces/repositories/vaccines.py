from __future__ import annotations

from typing import Protocol

from goatfarm.domain.models.vaccine import Vaccine


class VaccineRepository(Protocol):
    async def add(self, vaccine: Vaccine) -> Vaccine: ...

    async def get(self, vaccine_id: int) -> Vaccine | None: ...

    async def find_by_name(self, name: str) -> Vaccine | None: ...

    async def get_or_create(self, name: str) -> Vaccine: ...

    async def list(self) -> list[Vaccine]: ...

    async def delete(self, vaccine_id: int) -> bool: ...

    async def list_goat_ids(self, vaccine_id: int) -> list[int]: ...
