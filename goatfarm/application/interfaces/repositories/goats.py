from __future__ import annotations

from typing import Protocol

from goatfarm.domain.models.goat import DiseaseRef, Goat, VaccineRef


class GoatRepository(Protocol):
    async def add(self, goat: Goat) -> Goat: ...

    async def get(self, goat_id: int) -> Goat | None: ...

    async def list(self) -> list[Goat]: ...

    async def update(self, goat_id: int, data: dict) -> Goat | None: ...

    async def delete(self, goat_id: int) -> bool: ...

    async def link_vaccine(self, goat_id: int, vaccine_id: int) -> None: ...

    async def link_disease(self, goat_id: int, disease_id: int) -> None: ...

    async def clear_links(self, goat_id: int) -> None: ...

    async def list_vaccines(self, goat_id: int) -> list[VaccineRef]: ...

    async def list_diseases(self, goat_id: int) -> list[DiseaseRef]: ...
