from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Disease:
    id: int | None
    name: str

    @classmethod
    def create(cls, name: str) -> Disease:
        return cls(id=None, name=name)
