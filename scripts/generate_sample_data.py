#!/usr/bin/env python3
"""
Script to create the farm schema and fill it with sample livestock data.

This script:
1. Applies the schema (create-if-absent, safe on an existing database)
2. Inserts the vaccine and disease catalogue (skipping names already present)
3. Inserts goats with random vaccine/disease links, workers, equipment,
   sensors and spaces

Usage:
  python scripts/generate_sample_data.py [--database-url URL] [--seed N]
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from goatfarm.application.errors import AppError
from goatfarm.config.logging_config import configure_logging
from goatfarm.config.settings import Settings, get_settings
from goatfarm.infrastructure.db.sample_data import seed_sample_data
from goatfarm.infrastructure.db.schema import apply_schema
from goatfarm.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def generate(settings: Settings, *, seed: int | None, goats: int, workers: int, sensors: int):
    engine = create_engine(
        settings.database_url,
        echo=settings.sql_echo,
        journal_mode=settings.sqlite_journal_mode if settings.is_sqlite else None,
    )
    try:
        await apply_schema(engine)
        session_factory = create_session_factory(engine)
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            summary = await seed_sample_data(
                uow,
                rng=random.Random(seed),
                goats=goats,
                workers=workers,
                sensors=sensors,
            )
    finally:
        await engine.dispose()

    print("\n✅ Sample livestock database generated successfully.")
    print(f"   Database: {settings.database_url}")
    print(f"   Goats: {summary.goats} ({summary.goat_vaccines} vaccinations, "
          f"{summary.goat_diseases} disease records)")
    print(f"   Workers: {summary.workers}")
    print(f"   Equipment: {summary.equipment}")
    print(f"   Sensors: {summary.sensors}")
    print(f"   Spaces: {summary.spaces}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Create the farm schema and seed sample data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Seed the database from DATABASE_URL (default: ./livestock.db)
  python scripts/generate_sample_data.py

  # Seed a specific SQLite file reproducibly
  python scripts/generate_sample_data.py --database-url sqlite:///sample_livestock.db --seed 7
        """,
    )
    parser.add_argument("--database-url", help="Database URL (defaults to DATABASE_URL)")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible data")
    parser.add_argument("--goats", type=int, default=20, help="Number of goats (default: 20)")
    parser.add_argument("--workers", type=int, default=10, help="Number of workers (default: 10)")
    parser.add_argument("--sensors", type=int, default=100, help="Number of sensors (default: 100)")

    args = parser.parse_args()

    settings = get_settings()
    if args.database_url:
        settings = Settings.model_validate(
            {**settings.model_dump(), "database_url": args.database_url}
        )
    configure_logging(settings.log_level)

    try:
        asyncio.run(
            generate(
                settings,
                seed=args.seed,
                goats=args.goats,
                workers=args.workers,
                sensors=args.sensors,
            )
        )
    except AppError as exc:
        print(f"\n❌ Error generating sample data: {exc.message}")
        sys.exit(1)
