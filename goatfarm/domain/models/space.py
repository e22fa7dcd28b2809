from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Space:
    id: int | None
    name: str
    type: str | None = None  # SpaceType
    capacity: int | None = None
    grass_condition: str | None = None
    health: str | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: str,
        *,
        type: str | None = None,
        capacity: int | None = None,
        grass_condition: str | None = None,
        health: str | None = None,
    ) -> Space:
        return cls(
            id=None,
            name=name,
            type=type,
            capacity=capacity,
            grass_condition=grass_condition,
            health=health,
        )
