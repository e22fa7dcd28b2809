from __future__ import annotations

from typing import Protocol

from goatfarm.application.interfaces.repositories.diseases import DiseaseRepository
from goatfarm.application.interfaces.repositories.equipment import EquipmentRepository
from goatfarm.application.interfaces.repositories.goats import GoatRepository
from goatfarm.application.interfaces.repositories.sensors import SensorRepository
from goatfarm.application.interfaces.repositories.spaces import SpaceRepository
from goatfarm.application.interfaces.repositories.vaccines import VaccineRepository
from goatfarm.application.interfaces.repositories.workers import WorkerRepository


class UnitOfWork(Protocol):
    goats: GoatRepository
    vaccines: VaccineRepository
    diseases: DiseaseRepository
    workers: WorkerRepository
    equipment: EquipmentRepository
    sensors: SensorRepository
    spaces: SpaceRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
