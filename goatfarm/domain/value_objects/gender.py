from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

    @classmethod
    def parse(cls, value: str | Gender) -> Gender:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Value '{value}' is not a valid variant of enum 'Gender'") from None
