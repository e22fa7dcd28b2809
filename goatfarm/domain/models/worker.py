from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Worker:
    id: int | None
    name: str
    hours_worked: int = 0
    leaves: int = 0
    role: str | None = None
    contact: str | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: str,
        *,
        hours_worked: int = 0,
        leaves: int = 0,
        role: str | None = None,
        contact: str | None = None,
    ) -> Worker:
        return cls(
            id=None,
            name=name,
            hours_worked=hours_worked,
            leaves=leaves,
            role=role,
            contact=contact,
        )
