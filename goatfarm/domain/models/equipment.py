from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(slots=True)
class Equipment:
    id: int | None
    name: str
    description: str | None = None
    purchase_date: date | None = None
    condition: str | None = None
    last_maintenance: date | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: str,
        *,
        description: str | None = None,
        purchase_date: date | None = None,
        condition: str | None = None,
        last_maintenance: date | None = None,
    ) -> Equipment:
        return cls(
            id=None,
            name=name,
            description=description,
            purchase_date=purchase_date,
            condition=condition,
            last_maintenance=last_maintenance,
        )
