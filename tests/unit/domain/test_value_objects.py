from __future__ import annotations

import pytest

from goatfarm.domain.models.goat import Goat
from goatfarm.domain.value_objects.breed import Breed
from goatfarm.domain.value_objects.gender import Gender
from goatfarm.domain.value_objects.space_type import SpaceType


def test_gender_parse_accepts_exact_literals():
    assert Gender.parse("Male") is Gender.MALE
    assert Gender.parse("Female") is Gender.FEMALE
    assert Gender.parse(Gender.MALE) is Gender.MALE


@pytest.mark.parametrize("value", ["male", "FEMALE", "", "Other"])
def test_gender_parse_rejects_other_values(value):
    with pytest.raises(ValueError, match="Gender"):
        Gender.parse(value)


def test_space_type_literals():
    assert {t.value for t in SpaceType} == {"enclosure", "grazing_field", "other"}
    assert SpaceType.parse("grazing_field") is SpaceType.GRAZING_FIELD
    with pytest.raises(ValueError, match="SpaceType"):
        SpaceType.parse("Grazing Field")


def test_breed_catalogue_is_open():
    assert Breed.is_known("BlackBengal")
    assert not Breed.is_known("Boer")


def test_goat_create_defaults():
    goat = Goat.create(breed="Boer", name="Daisy", gender="Female")
    assert goat.id is None
    assert goat.offspring == 0
    assert goat.vaccinations == []
    assert goat.diseases == []
