from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text

from goatfarm.infrastructure.db.base import Base

PROJECT_ROOT = Path(__file__).resolve().parents[3]


@pytest.fixture()
def db_path(tmp_path) -> Path:
    return tmp_path / "migrated.db"


@pytest.fixture()
def alembic_config(db_path: Path) -> Config:
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    return config


def inspect_tables(db_path: Path) -> dict[str, set[str]]:
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        return {
            name: {column["name"] for column in inspector.get_columns(name)}
            for name in inspector.get_table_names()
            if name != "alembic_version"
        }
    finally:
        engine.dispose()


def test_upgrade_head_matches_models(alembic_config, db_path):
    command.upgrade(alembic_config, "head")

    expected = {
        table.name: {column.name for column in table.columns}
        for table in Base.metadata.sorted_tables
    }
    assert inspect_tables(db_path) == expected

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        goat_checks = {c["name"] for c in inspector.get_check_constraints("goats")}
        space_checks = {c["name"] for c in inspector.get_check_constraints("spaces")}
        link_fks = inspector.get_foreign_keys("goat_vaccines")
    finally:
        engine.dispose()
    assert "ck_goats_gender" in goat_checks
    assert "ck_spaces_type" in space_checks
    assert {fk["referred_table"] for fk in link_fks} == {"goats", "vaccines"}
    assert all(fk["options"].get("ondelete") == "CASCADE" for fk in link_fks)


def test_revisions_apply_in_order(alembic_config, db_path):
    command.upgrade(alembic_config, "3f2a9c1d7b40")
    assert set(inspect_tables(db_path)) == {"goats"}

    command.upgrade(alembic_config, "8b61e4a0c2d9")
    assert set(inspect_tables(db_path)) == {
        "goats",
        "vaccines",
        "diseases",
        "goat_vaccines",
        "goat_diseases",
    }

    command.upgrade(alembic_config, "head")
    assert len(inspect_tables(db_path)) == 9


def test_downgrade_to_base_drops_everything(alembic_config, db_path):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")
    assert inspect_tables(db_path) == {}


def test_upgrade_keeps_existing_rows(alembic_config, db_path):
    command.upgrade(alembic_config, "3f2a9c1d7b40")
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        with engine.begin() as conn:
            conn.execute(
                text("INSERT INTO goats (breed, name, gender) VALUES ('Barbari', 'Old', 'Male')")
            )
    finally:
        engine.dispose()

    command.upgrade(alembic_config, "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        with engine.connect() as conn:
            names = conn.execute(text("SELECT name FROM goats")).scalars().all()
    finally:
        engine.dispose()
    assert names == ["Old"]
