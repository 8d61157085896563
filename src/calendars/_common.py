"""Shared building blocks for the per-era calendar modules.

Every era module satisfies the ``CalendarModule`` protocol. Behaviour they
have in common lives here as plain functions instead of a base class, so
each module states its own rules and picks the helpers it needs.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from src.calendars.timeline import DAYS_PER_SOLAR_YEAR
from src.memory.ages import boundaries_for
from src.memory.calendar_types import CalendarDate, CalendarInfo, DateCalculationResult
from src.utils.exceptions import InvalidDateError

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"

# All solar eras use twelve 30-day months; special days sit outside them
DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12
MIDYEAR_LAST_MONTH = 6


class CalendarModule(Protocol):
    """Operations every era calendar provides."""

    info: CalendarInfo

    def validate_date(self, date: CalendarDate) -> bool: ...

    def format_date(self, date: CalendarDate) -> str: ...

    def to_aa(self, date: CalendarDate) -> int: ...

    def from_aa(self, aa_year: int) -> CalendarDate: ...

    def calculate_difference(
        self, start: CalendarDate, end: CalendarDate
    ) -> DateCalculationResult: ...


def check_date(date: CalendarDate, info: CalendarInfo) -> bool:
    """Check a date against an era's boundaries and month/day rules.

    Args:
        date: Date to check.
        info: Description of the era the date must belong to.

    Returns:
        True if the date is valid for the era.
    """
    if date.calendar != info.system:
        return False
    if isinstance(date.year, bool) or not isinstance(date.year, int):
        return False
    if not boundaries_for(info.system).contains(date.year):
        return False

    if not info.has_months:
        return date.month is None and date.day is None

    if date.month is not None:
        if not 1 <= date.month <= (info.months_per_year or MONTHS_PER_YEAR):
            return False

    if date.day is not None:
        # A day is meaningless without its month
        if date.month is None or not info.has_days:
            return False
        if not 1 <= date.day <= (info.days_per_month or DAYS_PER_MONTH):
            return False

    return True


def format_prefixed(date: CalendarDate, prefix: str) -> str:
    """Render ``<prefix>-YYYY[-MM[-DD]]`` for an already validated date."""
    formatted = f"{prefix}-{date.year:04d}"
    if date.month is not None:
        formatted += f"-{date.month:02d}"
        if date.day is not None:
            formatted += f"-{date.day:02d}"
    return formatted


def require_valid(module: CalendarModule, *dates: CalendarDate) -> None:
    """Raise InvalidDateError unless every date passes the module's validation."""
    for date in dates:
        if not module.validate_date(date):
            token = module.info.short_name
            logger.debug("Rejected %s date: %r", token, date)
            raise InvalidDateError(f"Invalid {token} date", calendar=token, date=date)


def year_only_difference(
    start: CalendarDate, end: CalendarDate, unit: str = "solar years"
) -> DateCalculationResult:
    """Difference in whole years, 365 days each."""
    years = end.year - start.year
    return DateCalculationResult(
        years=years,
        total_days=years * DAYS_PER_SOLAR_YEAR,
        description=f"{years} {unit}",
    )


def day_precision_result(total_days: int) -> DateCalculationResult:
    """Split a signed day count into years of 365 days and remaining days."""
    sign = -1 if total_days < 0 else 1
    years, days = divmod(abs(total_days), DAYS_PER_SOLAR_YEAR)
    years, days = sign * years, sign * days
    return DateCalculationResult(
        years=years,
        days=days,
        total_days=total_days,
        description=f"{total_days} days ({years} years, {days} days)",
    )


def count_days_between(
    start: CalendarDate,
    end: CalendarDate,
    year_boundary_days: int,
    midyear_days: Callable[[int], int],
) -> int:
    """Count days between two dates of a 12 x 30-day calendar with special days.

    Special days fall between months, never inside one: ``year_boundary_days``
    at every December/January boundary, and ``midyear_days(year)`` between
    June and July. They count only when the span actually crosses their
    position, so two dates in the same month never include any.

    Both dates must carry a month and a day. The result is negative when
    ``end`` precedes ``start``.
    """
    if (end.year, end.month, end.day) < (start.year, start.month, start.day):
        return -count_days_between(end, start, year_boundary_days, midyear_days)

    start_month, start_day = start.month or 1, start.day or 1
    end_month, end_day = end.month or 1, end.day or 1

    if start.year == end.year and start_month == end_month:
        return end_day - start_day

    total = DAYS_PER_MONTH - start_day
    if start.year == end.year:
        total += DAYS_PER_MONTH * (end_month - start_month - 1)
        total += end_day
        if start_month <= MIDYEAR_LAST_MONTH < end_month:
            total += midyear_days(start.year)
        return total

    total += DAYS_PER_MONTH * (MONTHS_PER_YEAR - start_month)
    total += DAYS_PER_MONTH * (end_month - 1) + end_day

    # Year boundary leaving the start year
    total += year_boundary_days
    if start_month <= MIDYEAR_LAST_MONTH:
        total += midyear_days(start.year)
    for year in range(start.year + 1, end.year):
        total += DAYS_PER_MONTH * MONTHS_PER_YEAR + midyear_days(year) + year_boundary_days
    if end_month > MIDYEAR_LAST_MONTH:
        total += midyear_days(end.year)

    return total
