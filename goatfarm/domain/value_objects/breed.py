from __future__ import annotations

from enum import Enum


class Breed(str, Enum):
    """Breeds the farm keeps records for.

    Storage keeps breed as free text; anything outside this list is still a
    valid breed, just not a catalogued one.
    """

    BEETAL = "Beetal"
    JAMUNAPARI = "Jamunapari"
    BARBARI = "Barbari"
    SIROHI = "Sirohi"
    OSMANABADI = "Osmanabadi"
    BLACK_BENGAL = "BlackBengal"
    KUTCHI = "Kutchi"
    KAGHANI = "Kaghani"
    CHEGU = "Chegu"
    JAKHRANA = "Jakhrana"

    @classmethod
    def is_known(cls, name: str) -> bool:
        return name in cls._value2member_map_
