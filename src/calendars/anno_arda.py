"""Anno Arda (AA) - the universal year count from the coming of the Valar."""

import logging

from src.calendars._common import INVALID_DATE, require_valid, year_only_difference
from src.calendars.timeline import format_aa, get_timeline
from src.memory.calendar_types import (
    CalendarDate,
    CalendarInfo,
    CalendarSystem,
    DateCalculationResult,
)

logger = logging.getLogger(__name__)


class AnnoArdaCalendar:
    """Calendar module for the AA axis itself. Years only, no upper limit."""

    info = CalendarInfo(
        name="Anno Arda",
        short_name="AA",
        description="Universal timeline from the beginning of Arda",
        system=CalendarSystem.AA,
        year_length=365,
    )

    def validate_date(self, date: CalendarDate) -> bool:
        if date.calendar != CalendarSystem.AA:
            return False
        if isinstance(date.year, bool) or not isinstance(date.year, int):
            return False
        return date.year >= 1 and date.month is None and date.day is None

    def format_date(self, date: CalendarDate) -> str:
        """Format as ``AA NNNNN``, or ``Invalid Date``."""
        if not self.validate_date(date):
            return INVALID_DATE
        return format_aa(date.year)

    def to_aa(self, date: CalendarDate) -> int:
        require_valid(self, date)
        return date.year

    def from_aa(self, aa_year: int) -> CalendarDate:
        return get_timeline().from_aa(aa_year, CalendarSystem.AA)

    def calculate_difference(self, start: CalendarDate, end: CalendarDate) -> DateCalculationResult:
        require_valid(self, start, end)
        return year_only_difference(start, end, unit="Anno Arda years")
