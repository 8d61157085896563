"""Path constants for Arda Chronology settings and bundled data."""

import logging
from pathlib import Path

# Configure module logger
logger = logging.getLogger(__name__)

SETTINGS_FILE = Path(__file__).parent.parent / "settings.json"

# Bundled event dataset ships inside the package: src/data/events
EVENTS_DIR = Path(__file__).parent.parent / "data" / "events"

__all__ = [
    "EVENTS_DIR",
    "SETTINGS_FILE",
    "logger",
]
