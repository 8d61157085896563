"""Settings package for Arda Chronology.

This package provides application settings management.

All functionality is in focused modules:
- _paths.py: Path constants for the settings file and bundled event data
- _types.py: Constants used for validation
- _validation.py: Settings validation functions
- _settings.py: Main Settings dataclass
"""

# Re-export path constants
from src.settings._paths import EVENTS_DIR, SETTINGS_FILE

# Re-export main Settings class
from src.settings._settings import Settings

# Re-export type definitions
from src.settings._types import LOG_LEVELS, MAX_SEARCH_RESULTS

__all__ = [
    "EVENTS_DIR",
    "LOG_LEVELS",
    "MAX_SEARCH_RESULTS",
    "SETTINGS_FILE",
    "Settings",
]
