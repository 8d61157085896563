"""Third Age (3A) calendar module, using the Shire Reckoning.

Twelve 30-day months. Special days sit outside the months:

- 2 Yule days at every year boundary
- the Lithe block between June and July: 1 Lithe, Midyear's Day, 2 Lithe,
  plus Overlithe in leap years

Leap years follow the Gregorian rule, so a year has 365 or 366 days.
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

YULE_DAYS = 2
LITHE_DAYS = 3


def is_leap_year(year: int) -> bool:
    """Check the Gregorian leap rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def midyear_days(year: int) -> int:
    """Return the Lithe days of ``year``, Overlithe included."""
    return LITHE_DAYS + 1 if is_leap_year(year) else LITHE_DAYS


def year_length(year: int) -> int:
    """Return the number of days in a Shire Reckoning year."""
    return DAYS_PER_MONTH * MONTHS_PER_YEAR + YULE_DAYS + midyear_days(year)


class ThirdAgeCalendar:
    """Calendar module for the Third Age."""

    info = CalendarInfo(
        name="Third Age",
        short_name="3A",
        description="Solar years of the Third Age",
        system=CalendarSystem.A3,
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

        total_days = count_days_between(start, end, YULE_DAYS, midyear_days)
        logger.debug("3A day difference %r -> %r: %d", start, end, total_days)
        return day_precision_result(total_days)
