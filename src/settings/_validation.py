"""Validation functions for Settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from src.settings._types import LOG_LEVELS, MAX_SEARCH_RESULTS

if TYPE_CHECKING:
    from src.settings._settings import Settings

logger = logging.getLogger(__name__)


def validate(settings: Settings) -> bool:
    """Validate all settings fields.

    Delegates to individual validation functions for each category of settings.

    Returns:
        True if any settings were mutated during validation (e.g. a legacy value
        normalized), False otherwise. Callers can use this to decide whether to
        re-save the settings file.

    Raises:
        ValueError: If any field contains an invalid value.
    """
    _validate_log_level(settings)
    _validate_search(settings)
    changed = _validate_default_calendars(settings)
    _validate_events_dir(settings)
    return changed


def _validate_log_level(settings: Settings) -> None:
    """Validate log_level is a known logging level."""
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {list(LOG_LEVELS.keys())}, got {settings.log_level}"
        )


def _validate_search(settings: Settings) -> None:
    """Validate search_max_results is a positive integer within bounds."""
    value = settings.search_max_results
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"search_max_results must be an integer, got {type(value).__name__}")
    if not 1 <= value <= MAX_SEARCH_RESULTS:
        raise ValueError(
            f"search_max_results must be between 1 and {MAX_SEARCH_RESULTS}, got {value}"
        )


def _validate_default_calendars(settings: Settings) -> bool:
    """Validate default calendar tokens against the implemented calendars.

    Tokens are matched case-insensitively and rewritten to their canonical
    spelling (e.g. "3a" becomes "3A").

    Returns:
        True if a token was normalized.
    """
    from src.calendars.registry import list_implemented

    canonical = {system.value.upper(): system.value for system in list_implemented()}
    changed = False
    for field_name in ("default_start_calendar", "default_end_calendar"):
        value = getattr(settings, field_name)
        if not isinstance(value, str) or value.upper() not in canonical:
            raise ValueError(
                f"{field_name} must be one of {sorted(canonical.values())}, got {value!r}"
            )
        normalized = canonical[value.upper()]
        if normalized != value:
            logger.info("Normalizing %s: %s -> %s", field_name, value, normalized)
            setattr(settings, field_name, normalized)
            changed = True
    return changed


def _validate_events_dir(settings: Settings) -> None:
    """Validate events_dir is a non-empty path string.

    A missing directory is not an error; the events service logs and loads nothing.
    """
    if not isinstance(settings.events_dir, str) or not settings.events_dir.strip():
        raise ValueError("events_dir must be a non-empty path")
    if not Path(settings.events_dir).exists():
        logger.warning("Configured events_dir does not exist: %s", settings.events_dir)
