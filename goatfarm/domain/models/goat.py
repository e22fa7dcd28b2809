from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(slots=True)
class VaccineRef:
    """Vaccine reference carried on a goat; resolved by id first, then by name."""

    name: str
    id: int | None = None


@dataclass(slots=True)
class DiseaseRef:
    name: str
    id: int | None = None


@dataclass(slots=True)
class Goat:
    id: int | None
    breed: str
    name: str
    gender: str  # Gender
    offspring: int = 0
    cost: float | None = None
    weight: float | None = None
    current_price: float | None = None
    diet: str | None = None
    last_bred: date | None = None
    health_status: str | None = None
    created_at: datetime | None = None
    vaccinations: list[VaccineRef] = field(default_factory=list)
    diseases: list[DiseaseRef] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        *,
        breed: str,
        name: str,
        gender: str,
        offspring: int = 0,
        cost: float | None = None,
        weight: float | None = None,
        current_price: float | None = None,
        diet: str | None = None,
        last_bred: date | None = None,
        health_status: str | None = None,
        vaccinations: list[VaccineRef] | None = None,
        diseases: list[DiseaseRef] | None = None,
    ) -> Goat:
        return cls(
            id=None,
            breed=breed,
            name=name,
            gender=gender,
            offspring=offspring,
            cost=cost,
            weight=weight,
            current_price=current_price,
            diet=diet,
            last_bred=last_bred,
            health_status=health_status,
            vaccinations=list(vaccinations or []),
            diseases=list(diseases or []),
        )
