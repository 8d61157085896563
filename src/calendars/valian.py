"""Valian-year calendars: Before First Age (B1A) and Years of the Trees (1AT).

Both count whole Valian years only; there are no months or days. One Valian
year is about 9.582 solar years.
"""

import logging

from src.calendars._common import INVALID_DATE, check_date, format_prefixed, require_valid
from src.calendars.timeline import get_timeline, round_half_up
from src.memory.ages import VALIAN_TO_SOLAR_RATIO
from src.memory.calendar_types import (
    CalendarDate,
    CalendarInfo,
    CalendarSystem,
    DateCalculationResult,
)

logger = logging.getLogger(__name__)

# Julian year used when estimating days in a Valian span
DAYS_PER_JULIAN_YEAR = 365.25
VALIAN_WEEK_DAYS = 5


class ValianCalendar:
    """Calendar module for one of the two Valian eras."""

    def __init__(self, info: CalendarInfo):
        self.info = info

    def __repr__(self) -> str:
        return f"ValianCalendar({self.info.short_name})"

    def validate_date(self, date: CalendarDate) -> bool:
        """Check the calendar tag and year range; month and day are not allowed."""
        return check_date(date, self.info)

    def format_date(self, date: CalendarDate) -> str:
        """Format as ``<token>-YYYY``, or ``Invalid Date``."""
        if not self.validate_date(date):
            return INVALID_DATE
        return format_prefixed(date, self.info.short_name)

    def to_aa(self, date: CalendarDate) -> int:
        """Convert to the rounded AA year.

        Raises:
            InvalidDateError: If the date is not valid for this era.
        """
        require_valid(self, date)
        return get_timeline().to_aa(date)

    def from_aa(self, aa_year: int) -> CalendarDate:
        """Convert an AA year to the nearest Valian year of this era."""
        return get_timeline().from_aa(aa_year, self.info.system)

    def calculate_difference(self, start: CalendarDate, end: CalendarDate) -> DateCalculationResult:
        """Difference in Valian years with a solar-day estimate.

        Raises:
            InvalidDateError: If either date is not valid for this era.
        """
        require_valid(self, start, end)
        years = end.year - start.year
        total_days = round_half_up(years * DAYS_PER_JULIAN_YEAR * VALIAN_TO_SOLAR_RATIO)
        solar_years = round_half_up(years * VALIAN_TO_SOLAR_RATIO)
        return DateCalculationResult(
            years=years,
            total_days=total_days,
            description=f"{years} Valian years (approximately {solar_years} solar years)",
        )


BEFORE_FIRST_AGE = ValianCalendar(
    CalendarInfo(
        name="Before First Age",
        short_name="B1A",
        description="Valian Years before the blooming of the Two Trees",
        system=CalendarSystem.B1A,
        week_days=VALIAN_WEEK_DAYS,
    )
)

YEARS_OF_THE_TREES = ValianCalendar(
    CalendarInfo(
        name="First Age - Years of the Trees",
        short_name="1AT",
        description="Valian Years during the time of the Two Trees of Valinor",
        system=CalendarSystem.AT1,
        week_days=VALIAN_WEEK_DAYS,
    )
)
