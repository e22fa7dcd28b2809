from __future__ import annotations

from typing import Protocol

from goatfarm.domain.models.worker import Worker


class WorkerRepository(Protocol):
    async def add(self, worker: Worker) -> Worker: ...

    async def get(self, worker_id: int) -> Worker | None: ...

    async def list(self) -> list[Worker]: ...

    async def update(self, worker_id: int, data: dict) -> Worker | None: ...

    async def delete(self, worker_id: int) -> bool: ...
