from __future__ import annotations

import pytest
from pydantic import ValidationError

from goatfarm.config.settings import Settings


def make_settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgres://u:p@db/farm", "postgresql+asyncpg://u:p@db/farm"),
        ("postgresql://u:p@db/farm", "postgresql+asyncpg://u:p@db/farm"),
        ("postgresql+asyncpg://u:p@db/farm", "postgresql+asyncpg://u:p@db/farm"),
        ("sqlite:///livestock.db", "sqlite+aiosqlite:///livestock.db"),
        ("sqlite+aiosqlite:///livestock.db", "sqlite+aiosqlite:///livestock.db"),
    ],
)
def test_database_url_uses_async_driver(url, expected):
    assert make_settings(database_url=url).database_url == expected


def test_journal_mode_normalised():
    assert make_settings(sqlite_journal_mode="wal").sqlite_journal_mode == "WAL"
    assert make_settings(sqlite_journal_mode="").sqlite_journal_mode is None


def test_unknown_journal_mode_rejected():
    with pytest.raises(ValidationError):
        make_settings(sqlite_journal_mode="fast")


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "LOG_LEVEL", "SQLITE_JOURNAL_MODE"):
        monkeypatch.delenv(name, raising=False)
    settings = make_settings()
    assert settings.is_sqlite
    assert settings.database_url == "sqlite+aiosqlite:///livestock.db"
    assert settings.log_level == "INFO"
    assert settings.sqlite_journal_mode == "WAL"


def test_postgres_url_is_not_sqlite():
    assert not make_settings(database_url="postgres://u:p@db/farm").is_sqlite
