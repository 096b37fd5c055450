"""Alembic migrations build the same schema the models declare."""

import sqlite3
from pathlib import Path

import pytest

from src.pitchdesk.core.config import get_settings
from src.pitchdesk.core.db import run_migrations_async

pytestmark = pytest.mark.integration

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def migration_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    db_path = tmp_path / "migrations.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    monkeypatch.chdir(PROJECT_ROOT)
    get_settings.cache_clear()
    yield db_path
    monkeypatch.undo()
    get_settings.cache_clear()


async def test_upgrade_to_head_creates_tables_and_keyset_indexes(migration_db: Path):
    await run_migrations_async()

    with sqlite3.connect(migration_db) as conn:
        rows = conn.execute("SELECT type, name FROM sqlite_master").fetchall()
    tables = {name for kind, name in rows if kind == "table"}
    indexes = {name for kind, name in rows if kind == "index"}

    assert {"users", "organizations", "organization_members", "songs", "pitches"} <= tables
    assert "alembic_version" in tables
    assert {
        "ix_organizations_created_at_id",
        "ix_organization_members_org_joined_at_id",
        "ix_songs_org_created_at_id",
        "ix_pitches_song_created_at_id",
    } <= indexes
