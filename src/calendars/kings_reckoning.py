"""Second Age (2A) calendar module, using the Kings' Reckoning of Númenor.

Twelve 30-day months (astar). Special days sit outside the months:

- yestarë before the first month and mettarë after the last, so 2 days at
  every year boundary
- loëndë between June and July; doubled as enderi in leap years, and a
  third enderi in every millennial year

Leap years are divisible by 4, except centuries; millennial years are
always leap and carry three mid-year days. A year has 363, 364 or 365 days.
"""

import logging

from src.calendars._common import (
    DAYS_PER_MONTH,
    INVALID_DATE,
    MONTHS_PER_YEAR,
    check_date,
    count_days_between,
    day_precision_result,
    format_prefixed,
    require_valid,
    year_only_difference,
)
from src.calendars.timeline import get_timeline
from src.memory.calendar_types import (
    CalendarDate,
    CalendarInfo,
    CalendarSystem,
    DateCalculationResult,
)

logger = logging.getLogger(__name__)

YEAR_BOUNDARY_DAYS = 2  # yestarë + mettarë


def is_leap_year(year: int) -> bool:
    """Check the Kings' Reckoning leap rule."""
    if year % 1000 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def midyear_days(year: int) -> int:
    """Return the special days between June and July of ``year``."""
    if year % 1000 == 0:
        return 3
    return 2 if is_leap_year(year) else 1


def year_length(year: int) -> int:
    """Return the number of days in a Kings' Reckoning year."""
    return DAYS_PER_MONTH * MONTHS_PER_YEAR + YEAR_BOUNDARY_DAYS + midyear_days(year)


class SecondAgeCalendar:
    """Calendar module for the Second Age."""

    info = CalendarInfo(
        name="Second Age (Kings' Reckoning)",
        short_name="2A",
        description="Númenórean calendar of the Second Age",
        system=CalendarSystem.A2,
        has_months=True,
        has_days=True,
        months_per_year=MONTHS_PER_YEAR,
        days_per_month=DAYS_PER_MONTH,
        year_length=365,
    )

    def validate_date(self, date: CalendarDate) -> bool:
        return check_date(date, self.info)

    def format_date(self, date: CalendarDate) -> str:
        if not self.validate_date(date):
            return INVALID_DATE
        return format_prefixed(date, self.info.short_name)

    def to_aa(self, date: CalendarDate) -> int:
        require_valid(self, date)
        return get_timeline().to_aa(date)

    def from_aa(self, aa_year: int) -> CalendarDate:
        return get_timeline().from_aa(aa_year, self.info.system)

    def calculate_difference(self, start: CalendarDate, end: CalendarDate) -> DateCalculationResult:
        """Difference in days when both dates are day-precise, else in years.

        Raises:
            InvalidDateError: If either date is not valid for this era.
        """
        require_valid(self, start, end)
        if not (start.has_day and end.has_day):
            return year_only_difference(start, end)

        total_days = count_days_between(start, end, YEAR_BOUNDARY_DAYS, midyear_days)
        logger.debug("2A day difference %r -> %r: %d", start, end, total_days)
        return day_precision_result(total_days)
