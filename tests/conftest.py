from __future__ import annotations

import pytest

import config
import db_engine
from config import Settings
from repositories import MemoryStorage
from services import CardTracker


@pytest.fixture
def settings() -> Settings:
    return Settings(records_slot="testCards", theme_slot="testTheme", default_theme="light")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def tracker(storage, settings) -> CardTracker:
    return CardTracker(storage, settings=settings)


@pytest.fixture
def raw_card():
    """Factory for valid raw form input, overridable per test."""

    def _make(**overrides):
        raw = {
            "name": "2018 Topps Update Ohtani RC",
            "playerName": "Shohei Ohtani",
            "category": "baseball",
            "year": "2018",
            "grade": "psa10",
            "purchasePrice": "100",
            "salePrice": "150",
            "purchaseDate": "2024-01-05",
            "saleDate": "2024-02-01",
            "fees": "5",
            "taxRate": "20",
            "period": "week1",
            "notes": "",
        }
        raw.update(overrides)
        return raw

    return _make


@pytest.fixture
def sqlite_db(tmp_path, monkeypatch):
    """Point the global settings and engine at a throwaway SQLite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'cards.db'}")
    config.reload_settings()
    db_engine.reset_engine()
    engine = db_engine.get_engine()
    db_engine.init_db(engine)
    yield engine
    db_engine.reset_engine()
    config._settings = None
