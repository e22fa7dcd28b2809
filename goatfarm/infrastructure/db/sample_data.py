"""Demo data for a fresh farm database.

Vaccines and diseases are fetched or created by name, so seeding twice never
duplicates the catalogue; every other table simply receives new rows.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from goatfarm.application.interfaces.unit_of_work import UnitOfWork
from goatfarm.domain.models.equipment import Equipment
from goatfarm.domain.models.goat import Goat
from goatfarm.domain.models.sensor import Sensor
from goatfarm.domain.models.space import Space
from goatfarm.domain.models.worker import Worker
from goatfarm.domain.value_objects.breed import Breed
from goatfarm.domain.value_objects.gender import Gender
from goatfarm.domain.value_objects.health_catalog import KNOWN_DISEASES, KNOWN_VACCINES
from goatfarm.domain.value_objects.space_type import SpaceType

logger = logging.getLogger(__name__)

DIETS = ("Hay", "Pasture", "Mixed")
SENSOR_TYPES = ("Camera", "RFID Scanner", "Health Monitor", "Temp Sensor", "Humidity Sensor")
SENSOR_LOCATIONS = ("Enclosure 1", "Field 3", "Barn", "Fence", "Water Station")

EQUIPMENT = (
    ("Feeder", "Automatic feed dispenser", date(2023, 5, 10), "Good", date(2025, 1, 15)),
    ("Pesticide Sprayer", "Field pesticide sprayer", date(2022, 7, 20), "Fair", date(2024, 11, 1)),
    ("Water Pump", "Irrigation water pump", date(2021, 9, 5), "Excellent", date(2025, 7, 12)),
    ("Tractor", "Farm tractor", date(2020, 3, 14), "Good", date(2025, 2, 28)),
    ("Milking Machine", "Automated milking", date(2023, 1, 22), "Good", date(2025, 6, 5)),
)

SPACES = (
    ("Enclosure 1", SpaceType.ENCLOSURE, 50, "Good", "Healthy"),
    ("Grazing Field A", SpaceType.GRAZING_FIELD, 100, "Fair", "Healthy"),
    ("Barn", SpaceType.OTHER, 10, "-", "-"),
    ("Enclosure 2", SpaceType.ENCLOSURE, 60, "Good", "Healthy"),
)


@dataclass(slots=True)
class SeedSummary:
    vaccines: int
    diseases: int
    goats: int
    goat_vaccines: int
    goat_diseases: int
    workers: int
    equipment: int
    sensors: int
    spaces: int


def random_date(rng: random.Random, start: date, end: date) -> date:
    return start + timedelta(days=rng.randint(0, (end - start).days))


async def seed_sample_data(
    uow: UnitOfWork,
    *,
    rng: random.Random | None = None,
    goats: int = 20,
    workers: int = 10,
    sensors: int = 100,
) -> SeedSummary:
    rng = rng or random.Random()

    vaccine_ids = [(await uow.vaccines.get_or_create(name)).id for name in KNOWN_VACCINES]
    disease_ids = [(await uow.diseases.get_or_create(name)).id for name in KNOWN_DISEASES]

    breeds = [b.value for b in Breed]
    genders = [g.value for g in Gender]
    goat_vaccine_links = 0
    goat_disease_links = 0
    for i in range(1, goats + 1):
        cost = rng.uniform(100.0, 250.0)
        goat = await uow.goats.add(
            Goat.create(
                breed=rng.choice(breeds),
                name=f"Goat{i}",
                gender=rng.choice(genders),
                offspring=rng.randrange(0, 5),
                cost=cost,
                weight=rng.uniform(40.0, 90.0),
                current_price=cost * rng.uniform(1.1, 1.5),
                diet=rng.choice(DIETS),
                last_bred=random_date(rng, date(2024, 1, 1), date(2025, 8, 1)),
                health_status="recovering" if i % 15 == 0 else "healthy",
            )
        )
        for vaccine_id in rng.sample(vaccine_ids, rng.randint(1, 3)):
            await uow.goats.link_vaccine(goat.id, vaccine_id)
            goat_vaccine_links += 1
        # Only every tenth goat has a disease history
        disease_count = rng.randint(1, 2)
        if i % 10 == 0:
            for disease_id in rng.sample(disease_ids, disease_count):
                await uow.goats.link_disease(goat.id, disease_id)
                goat_disease_links += 1

    for i in range(1, workers + 1):
        await uow.workers.add(
            Worker.create(
                f"Worker{i}",
                hours_worked=rng.randrange(120, 200),
                leaves=rng.randrange(0, 10),
                role="Feeder" if i % 2 == 0 else "Health Monitor",
                contact=f"worker{i}@farm.com",
            )
        )

    for name, description, purchased, condition, maintained in EQUIPMENT:
        await uow.equipment.add(
            Equipment.create(
                name,
                description=description,
                purchase_date=purchased,
                condition=condition,
                last_maintenance=maintained,
            )
        )

    for i in range(1, sensors + 1):
        reading_day = random_date(rng, date(2025, 1, 1), date(2025, 8, 20))
        await uow.sensors.add(
            Sensor.create(
                rng.choice(SENSOR_TYPES),
                location=rng.choice(SENSOR_LOCATIONS),
                last_reading=rng.uniform(0.0, 100.0),
                last_reading_time=datetime.combine(reading_day, time.min),
                status="Inactive" if i % 20 == 0 else "Active",
            )
        )

    for name, space_type, capacity, grass_condition, health in SPACES:
        await uow.spaces.add(
            Space.create(
                name,
                type=space_type.value,
                capacity=capacity,
                grass_condition=grass_condition,
                health=health,
            )
        )

    await uow.commit()
    summary = SeedSummary(
        vaccines=len(vaccine_ids),
        diseases=len(disease_ids),
        goats=goats,
        goat_vaccines=goat_vaccine_links,
        goat_diseases=goat_disease_links,
        workers=workers,
        equipment=len(EQUIPMENT),
        sensors=sensors,
        spaces=len(SPACES),
    )
    logger.info("Sample livestock data generated: %s", summary)
    return summary
