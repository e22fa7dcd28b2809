from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Vaccine:
    id: int | None
    name: str

    @classmethod
    def create(cls, name: str) -> Vaccine:
        return cls(id=None, name=name)
