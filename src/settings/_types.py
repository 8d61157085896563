"""Type definitions and constants for Arda Chronology settings."""

import logging

logger = logging.getLogger(__name__)

# Log level options accepted by the settings file and the CLI
LOG_LEVELS: dict[str, str] = {
    "DEBUG": "Debug",
    "INFO": "Info",
    "WARNING": "Warning",
    "ERROR": "Error",
}

# Upper bound for search_max_results
MAX_SEARCH_RESULTS = 500
