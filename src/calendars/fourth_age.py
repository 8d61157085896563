"""Fourth Age (4A) calendar module."""

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


class FourthAgeCalendar:
    """Solar years of the Fourth Age; differences count whole years."""

    info = CalendarInfo(
        name="Fourth Age",
        short_name="4A",
        description="Solar years of the Fourth Age",
        system=CalendarSystem.A4,
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
        require_valid(self, start, end)
        return year_only_difference(start, end)
