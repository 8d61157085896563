"""Logging configuration for Arda Chronology."""

import logging
import sys
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

logger = logging.getLogger(__name__)

# Default log file location (project root / output / logs)
DEFAULT_LOG_FILE = Path(__file__).parent.parent.parent / "output" / "logs" / "arda_chronology.log"


class ContextFilter(logging.Filter):
    """Add context information to log records."""

    def __init__(self) -> None:
        super().__init__()
        self.correlation_id: str | None = None

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation ID to log record if available."""
        if self.correlation_id:
            record.correlation_id = self.correlation_id
        else:
            record.correlation_id = "-"
        return True


# Global context filter instance
_context_filter = ContextFilter()


def _resolve_level(level: str) -> int:
    """Translate a level name into a logging constant.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return log_level


def setup_logging(level: str = "INFO", log_file: str | None = "default") -> None:
    """Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: File path for logs. "default" uses output/logs/arda_chronology.log,
                  None disables file logging.

    Raises:
        ValueError: If level is not a known logging level.
    """
    log_level = _resolve_level(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Note: Filter must be on HANDLERS, not logger, for child logger records
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_context_filter)
    root_logger.addHandler(console_handler)

    if log_file == "default":
        log_path = DEFAULT_LOG_FILE
    elif log_file:
        log_path = Path(log_file)
    else:
        log_path = None

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Max 5MB per file, keep 3 backup files
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(_context_filter)
        root_logger.addHandler(file_handler)

        root_logger.info(f"Logging to file: {log_path} (max 5MB, 3 backups)")


def set_log_level(level: str) -> None:
    """Change the root logger and handler levels at runtime.

    Args:
        level: New log level name.

    Raises:
        ValueError: If level is not a known logging level.
    """
    log_level = _resolve_level(level)
    root_logger = logging.getLogger()
    if root_logger.level == log_level:
        logger.debug("Log level already set to %s", level.upper())
        return

    root_logger.setLevel(log_level)
    for handler in root_logger.handlers:
        handler.setLevel(log_level)
    logger.info("Log level changed to %s", level.upper())


@contextmanager
def log_context(correlation_id: str | None = None) -> Generator[str]:
    """Context manager for setting correlation ID in logs.

    Args:
        correlation_id: Optional correlation ID. If not provided, generates a new UUID.

    Yields:
        The correlation ID being used.

    Example:
        with log_context("duration-123"):
            logger.info("Comparing dates")  # Will include correlation_id in log
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())[:8]

    old_id = _context_filter.correlation_id
    _context_filter.correlation_id = correlation_id
    try:
        yield correlation_id
    finally:
        _context_filter.correlation_id = old_id
