"""Centralized exception hierarchy for Arda Chronology.

Exception Hierarchy:

    ArdaChronologyError (base for all application errors)
    ├── CalendarError (calendar conversion and validation errors)
    │   ├── UnsupportedCalendarError (no module or boundary entry for a calendar)
    │   ├── InvalidDateError (date outside its era's rules)
    │   └── AAYearBeforeEraError (inverse conversion into an era that had not begun)
    ├── EventDataError (event dataset failures)
    │   └── EventDateError (malformed event date string)
    └── ConfigError (configuration parsing/validation failures)

Usage:
    from src.utils.exceptions import CalendarError, InvalidDateError

    try:
        module.to_aa(date)
    except InvalidDateError as e:
        logger.warning("Rejected date: %s", e)
    except CalendarError:
        logger.error("Conversion failed")
"""

import logging

logger = logging.getLogger(__name__)


class ArdaChronologyError(Exception):
    """Base exception for all Arda Chronology errors.

    All custom exceptions should inherit from this class to allow
    catching all application-specific errors with a single except clause.
    """

    pass


class CalendarError(ArdaChronologyError):
    """Base exception for calendar-related errors.

    Raised when any conversion, validation or duration operation fails.
    Subclasses provide more specific error types.
    """

    pass


class UnsupportedCalendarError(CalendarError):
    """Raised when a calendar identifier has no registered module or boundary entry.

    Attributes:
        calendar: The identifier that could not be resolved.
    """

    def __init__(self, message: str, calendar: str | None = None):
        """Initialize UnsupportedCalendarError.

        Args:
            message: Human-readable error message.
            calendar: The calendar identifier that was requested.
        """
        super().__init__(message)
        self.calendar = calendar


class InvalidDateError(CalendarError):
    """Raised when a date violates its era's rules.

    Covers years outside the era's boundaries, months or days outside
    their ranges, and month/day fields supplied to year-only eras.

    Attributes:
        calendar: Calendar token of the rejected date.
        date: The rejected date, if available.
    """

    def __init__(self, message: str, calendar: str | None = None, date: object | None = None):
        """Initialize InvalidDateError with the rejected date.

        Args:
            message: Human-readable error message.
            calendar: Calendar token of the rejected date.
            date: The rejected date object.
        """
        super().__init__(message)
        self.calendar = calendar
        self.date = date
        logger.debug("InvalidDateError initialized: calendar=%s, date=%r", calendar, date)


class AAYearBeforeEraError(CalendarError):
    """Raised when an AA year is mapped into an era that started after it.

    Attributes:
        aa_year: The Anno Arda year that was requested.
        calendar: The target calendar token.
    """

    def __init__(self, message: str, aa_year: int | None = None, calendar: str | None = None):
        """Initialize AAYearBeforeEraError.

        Args:
            message: Human-readable error message.
            aa_year: The Anno Arda year that was requested.
            calendar: The target calendar token.
        """
        super().__init__(message)
        self.aa_year = aa_year
        self.calendar = calendar


class EventDataError(ArdaChronologyError):
    """Raised when the historical event dataset cannot be read or interpreted."""

    pass


class EventDateError(EventDataError):
    """Raised when an event date string cannot be parsed.

    Attributes:
        raw_date: The original date string.
    """

    def __init__(self, message: str, raw_date: str | None = None):
        """Initialize EventDateError.

        Args:
            message: Human-readable error message.
            raw_date: The date string that failed to parse.
        """
        super().__init__(message)
        self.raw_date = raw_date


class ConfigError(ArdaChronologyError):
    """Raised when configuration parsing or validation fails.

    This indicates issues with pyproject.toml, settings files,
    or other configuration that cannot be loaded or is invalid.
    """

    pass
