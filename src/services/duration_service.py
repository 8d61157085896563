"""Duration service - compares two dates from any calendars for display.

Wraps the calendar modules and the AA timeline into one calculation:
validation with user-facing messages, AA placement of both dates, a day
count broken down into years/months/days, and the Valian-year view for
spans that touch the Valian eras.
"""

import logging

from src.calendars.registry import module_for
from src.calendars.timeline import get_timeline, is_valian_calendar
from src.memory.ages import AGE_BOUNDARIES
from src.memory.calendar_types import CalculationResult, CalendarDate, DateCalculationResult
from src.settings import Settings
from src.utils.exceptions import InvalidDateError
from src.utils.validation import validate_not_empty, validate_not_none

logger = logging.getLogger(__name__)

# Display units, independent of any era's own month layout
DISPLAY_DAYS_PER_YEAR = 365
DISPLAY_DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

# Past these spans the finer unit is dropped from the description
MONTHS_SHOWN_BELOW_YEARS = 12
DAYS_SHOWN_BELOW_MONTHS = 31


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


class DurationService:
    """Service for calculating and describing the time between two dates."""

    def __init__(self, settings: Settings):
        """Initialize duration service.

        Args:
            settings: Application settings.
        """
        validate_not_none(settings, "settings")
        self.settings = settings
        logger.debug("Initialized DurationService")

    def validate_with_details(self, date: CalendarDate, label: str) -> str | None:
        """Explain why a date is invalid.

        Args:
            date: Date to check.
            label: Prefix for the message, e.g. "Start" or "End".

        Returns:
            A user-facing error message, or None if the date is valid.
        """
        validate_not_empty(label, "label")
        boundary = AGE_BOUNDARIES.get(date.calendar)
        if boundary is None:
            return f"{label} calendar system is not supported"

        token = date.calendar.value
        if not boundary.contains(date.year):
            return (
                f"{label} year {date.year} is invalid. "
                f"{token} years must be between {boundary.first} and {boundary.last}"
            )

        if date.month is not None and not 1 <= date.month <= MONTHS_PER_YEAR:
            return f"{label} month {date.month} is invalid. Month must be between 1 and 12"

        if date.day is not None and not 1 <= date.day <= DISPLAY_DAYS_PER_MONTH:
            return f"{label} day {date.day} is invalid. Day must be between 1 and 30"

        if not module_for(date.calendar).validate_date(date):
            return f"{label} date is not valid for {token}"

        return None

    def detailed_breakdown(self, total_days: int) -> tuple[int, int, int]:
        """Split a day count into display years, months and days.

        Uses 365-day years and 30-day months on the absolute value.
        """
        years, remainder = divmod(abs(total_days), DISPLAY_DAYS_PER_YEAR)
        months, days = divmod(remainder, DISPLAY_DAYS_PER_MONTH)
        return years, months, days

    def describe_duration(
        self,
        years: int,
        months: int,
        days: int,
        negative: bool,
        start: CalendarDate,
        end: CalendarDate,
    ) -> str:
        """Describe a duration at the precision both dates share.

        Months are shown only when both dates carry a month, days only
        when both carry a day. Long spans drop the finer units.
        """
        show_months = start.has_month and end.has_month
        show_days = show_months and start.has_day and end.has_day
        total_months = years * MONTHS_PER_YEAR + months
        total_days = years * DISPLAY_DAYS_PER_YEAR + months * DISPLAY_DAYS_PER_MONTH + days

        parts: list[str] = []
        if show_days and total_days < DISPLAY_DAYS_PER_MONTH:
            parts.append(_plural(total_days, "day"))
        else:
            if years > 0:
                parts.append(_plural(years, "year"))
            if show_months and years < MONTHS_SHOWN_BELOW_YEARS and months > 0:
                parts.append(_plural(months, "month"))
            if show_days and total_months < DAYS_SHOWN_BELOW_MONTHS and days > 0:
                parts.append(_plural(days, "day"))

        if not parts:
            if show_days:
                parts.append("0 days")
            elif show_months:
                parts.append("0 months")
            else:
                parts.append("0 years")

        description = ", ".join(parts)
        return f"-{description}" if negative else description

    def calculate(self, start: CalendarDate, end: CalendarDate) -> CalculationResult:
        """Calculate the duration between two dates.

        Args:
            start: Start date, in any implemented calendar.
            end: End date, in any implemented calendar.

        Returns:
            CalculationResult with both dates formatted and placed on the AA
            axis, the day-based duration and, where relevant, Valian years.

        Raises:
            InvalidDateError: If either date fails validation; the message
                says which field is wrong.
        """
        for date, label in ((start, "Start"), (end, "End")):
            error = self.validate_with_details(date, label)
            if error is not None:
                logger.info("Duration request rejected: %s", error)
                raise InvalidDateError(error, calendar=date.calendar.value, date=date)

        start_module = module_for(start.calendar)
        end_module = module_for(end.calendar)
        timeline = get_timeline()

        start_aa = start_module.to_aa(start)
        end_aa = end_module.to_aa(end)
        total_days = timeline.calculate_duration_in_days(start, end)
        years, months, days = self.detailed_breakdown(total_days)

        show_valian_years = self.settings.show_valian_years and (
            is_valian_calendar(start.calendar)
            or is_valian_calendar(end.calendar)
            or timeline.spans_valian_era(start, end)
        )
        valian_years = (
            timeline.get_duration_in_valian_years(start, end) if show_valian_years else None
        )

        logger.debug(
            "Duration %s -> %s: AA %d -> %d, %d days",
            start.calendar.value,
            end.calendar.value,
            start_aa,
            end_aa,
            total_days,
        )
        return CalculationResult(
            start_date=start,
            end_date=end,
            start_formatted=start_module.format_date(start),
            end_formatted=end_module.format_date(end),
            start_aa=start_aa,
            end_aa=end_aa,
            duration=DateCalculationResult(
                years=years,
                months=months,
                days=days,
                total_days=abs(total_days),
                description=self.describe_duration(
                    years, months, days, total_days < 0, start, end
                ),
            ),
            valian_years=valian_years,
            show_valian_years=show_valian_years,
        )
