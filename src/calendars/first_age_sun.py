"""First Age - Years of the Sun (1AS).

Solar years from the first sunrise to the end of the First Age. Dates may
carry a month and day, but differences are counted in whole years because
the era's intercalary days are not modelled.
"""

import logging

from src.calendars._common import (
    DAYS_PER_MONTH,
    INVALID_DATE,
    MONTHS_PER_YEAR,
    check_date,
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


class FirstAgeSunCalendar:
    """Calendar module for the Years of the Sun."""

    info = CalendarInfo(
        name="First Age - Years of the Sun",
        short_name="1AS",
        description="Solar years after the first sunrise",
        system=CalendarSystem.AS1,
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
        """Difference in whole solar years, ignoring month and day.

        Raises:
            InvalidDateError: If either date is not valid for this era.
        """
        require_valid(self, start, end)
        # TODO: count the First Age Sun intercalary days once their layout is settled
        return year_only_difference(start, end)
