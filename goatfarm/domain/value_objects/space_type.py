from __future__ import annotations

from enum import Enum


class SpaceType(str, Enum):
    ENCLOSURE = "enclosure"
    GRAZING_FIELD = "grazing_field"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | SpaceType) -> SpaceType:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Value '{value}' is not a valid variant of enum 'SpaceType'"
            ) from None
