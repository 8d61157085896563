"""Pytest fixtures for Arda Chronology tests."""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from src.memory.calendar_types import CalendarDate, CalendarSystem
from src.settings import Settings


@pytest.fixture(autouse=True, scope="function")
def cleanup_production_log_handlers():
    """Remove file handlers pointing to the production log after each test.

    Tests that call setup_logging() with the default log file would
    otherwise leave a handler writing to output/logs/arda_chronology.log.
    """
    yield

    root_logger = logging.getLogger()
    production_log_name = "arda_chronology.log"

    handlers_to_remove = []
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            if hasattr(handler, "baseFilename") and production_log_name in handler.baseFilename:
                handlers_to_remove.append(handler)

    for handler in handlers_to_remove:
        handler.close()
        root_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def clear_settings_cache_per_test():
    """Clear Settings cache before each test to ensure isolation.

    This is autouse because caching can cause test pollution when tests
    modify settings or patch SETTINGS_FILE to different paths.
    """
    Settings.clear_cache()
    yield
    Settings.clear_cache()


@pytest.fixture(autouse=True)
def isolate_settings_file(tmp_path, monkeypatch) -> Path:
    """Redirect the settings file to a temp directory.

    Without this, Settings.load()/save() in tests would read and write the
    real src/settings.json.
    """
    import src.settings._settings as settings_module

    settings_file = tmp_path / "settings.json"
    monkeypatch.setattr(settings_module, "SETTINGS_FILE", settings_file)
    return settings_file


@pytest.fixture
def settings() -> Settings:
    """Default settings, never read from disk."""
    return Settings()


@pytest.fixture
def make_date() -> Callable[..., CalendarDate]:
    """Factory for CalendarDate objects from a calendar token."""

    def _make(
        calendar: str, year: int, month: int | None = None, day: int | None = None
    ) -> CalendarDate:
        return CalendarDate(
            year=year, month=month, day=day, calendar=CalendarSystem(calendar)
        )

    return _make


def _event(name: str, date: str, **extra) -> dict:
    event = {
        "name": name,
        "date": date,
        "range": "",
        "era": "",
        "calendar": "",
        "description": "",
        "characters": [],
        "locations": [],
        "artifacts": [],
        "type": "other",
    }
    event.update(extra)
    return event


@pytest.fixture
def events_dir(tmp_path) -> Path:
    """A small event dataset laid out like the bundled one.

    Files are deliberately written out of chronological order inside
    3A-late.json, and one source is missing entirely.
    """
    directory = tmp_path / "events"
    directory.mkdir()
    files = {
        "B1A-events.json": [
            _event("The Valar enter Arda", "B1A-0001", characters=["Manwë"]),
        ],
        "1AT-events.json": [
            _event(
                "Forging of the Silmarils",
                "1AT-1450",
                characters=["Fëanor"],
                artifacts=["Silmarils"],
            ),
        ],
        "1AS-events.json": [
            _event("First Sunrise", "1AS-0001", locations=["Mithrim"]),
        ],
        "2A-events.json": [
            _event(
                "Downfall of Númenor",
                "2A-3319",
                description="Númenor is drowned",
                locations=["Númenor"],
            ),
        ],
        "3A-early.json": [
            _event("The Istari arrive", "3A-1000", characters=["Gandalf"]),
        ],
        "3A-late.json": [
            _event(
                "Destruction of the One Ring",
                "3A-3019-03-25",
                characters=["Frodo Baggins", "Gandalf"],
                artifacts=["One Ring"],
            ),
            _event(
                "Bilbo finds the Ring",
                "3A-2941-07-15",
                characters=["Bilbo Baggins"],
                artifacts=["One Ring"],
            ),
        ],
        "4A-events.json": [
            _event("Death of King Elessar", "4A-0120", characters=["Aragorn"]),
        ],
    }
    for name, events in files.items():
        (directory / name).write_text(json.dumps(events), encoding="utf-8")
    return directory


@pytest.fixture
def event_factory() -> Callable[..., dict]:
    """Factory for raw event dictionaries."""
    return _event


@pytest.fixture
def events_settings(events_dir) -> Settings:
    """Settings pointing at the temporary event dataset."""
    return Settings(events_dir=str(events_dir))
