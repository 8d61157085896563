"""Anno Arda timeline - stitches every era onto one monotonic year axis.

Each era in the chain starts where the previous one ends:

    B1A -> 1AT -> 1AS -> 2A -> 3A -> 4A

The two Valian eras (B1A, 1AT) count Valian years, each worth
``VALIAN_TO_SOLAR_RATIO`` solar years; the later eras count solar years
one-to-one. Anno Arda (AA) itself is the axis, so AA dates map to themselves.

Two representations are kept for every era end point:
- rounded: integer AA years, used for year durations and inverse conversion
- precise: unrounded floats, used for day durations so rounding errors do
  not compound along the chain
"""

import functools
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

from src.memory.ages import AGE_BOUNDARIES, AGE_TRANSITIONS, VALIAN_TO_SOLAR_RATIO
from src.memory.calendar_types import AgeBoundary, CalendarDate, CalendarSystem
from src.utils.exceptions import AAYearBeforeEraError, UnsupportedCalendarError

logger = logging.getLogger(__name__)

ERA_CHAIN: tuple[CalendarSystem, ...] = (
    CalendarSystem.B1A,
    CalendarSystem.AT1,
    CalendarSystem.AS1,
    CalendarSystem.A2,
    CalendarSystem.A3,
    CalendarSystem.A4,
)

VALIAN_CALENDARS: frozenset[CalendarSystem] = frozenset({CalendarSystem.B1A, CalendarSystem.AT1})

ERA_DISPLAY_NAMES: dict[CalendarSystem, str] = {
    CalendarSystem.B1A: "Before First Age",
    CalendarSystem.AT1: "First Age Trees",
    CalendarSystem.AS1: "First Age Sun",
    CalendarSystem.A2: "Second Age",
    CalendarSystem.A3: "Third Age",
    CalendarSystem.A4: "Fourth Age",
}

# Month lengths for cross-era day estimates (not the eras' own 30-day months)
GREGORIAN_MONTH_DAYS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DAYS_PER_SOLAR_YEAR = 365


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def day_of_year(month: int, day: int) -> int:
    """Return the 1-based day of year on the fixed Gregorian month table."""
    return sum(GREGORIAN_MONTH_DAYS[: month - 1]) + day


@dataclass(frozen=True)
class EraSpan:
    """Where one era sits on the AA axis.

    ``base`` is the AA value the era's local offset is added to: AA year 1
    for the first era, otherwise the previous era's end plus the transition
    offset. ``end`` is the AA value of the era's last valid year.
    """

    calendar: CalendarSystem
    base: int
    base_precise: float
    end: int
    end_precise: float
    previous_end: int | None

    @property
    def is_valian(self) -> bool:
        """Check if the era counts Valian years."""
        return self.calendar in VALIAN_CALENDARS


class AnnoArdaTimeline:
    """Converter between era-local years and the Anno Arda axis.

    Stateless after construction: the era end points are computed once
    from the boundary table, and every conversion is a lookup plus one
    arithmetic step.
    """

    def __init__(
        self,
        boundaries: Mapping[CalendarSystem, AgeBoundary] | None = None,
        transitions: Mapping[str, int] | None = None,
        ratio: float = VALIAN_TO_SOLAR_RATIO,
    ):
        """Build the era table.

        Args:
            boundaries: Per-calendar valid year ranges. Defaults to AGE_BOUNDARIES.
            transitions: Offsets between consecutive eras. Defaults to AGE_TRANSITIONS.
            ratio: Solar years per Valian year.
        """
        self.boundaries = boundaries if boundaries is not None else AGE_BOUNDARIES
        self.transitions = transitions if transitions is not None else AGE_TRANSITIONS
        self.ratio = ratio
        self._spans = self._build_spans()
        logger.debug(
            "Built AA era table: %s",
            ", ".join(f"{span.calendar.value}->{span.end}" for span in self._spans.values()),
        )

    def _build_spans(self) -> dict[CalendarSystem, EraSpan]:
        spans: dict[CalendarSystem, EraSpan] = {}
        previous: EraSpan | None = None
        for calendar in ERA_CHAIN:
            if previous is None:
                base, base_precise = 1, 1.0
            else:
                offset = self.transitions[f"{previous.calendar.value}_to_{calendar.value}"]
                base = previous.end + offset
                base_precise = previous.end_precise + offset

            last = self.boundaries[calendar].last
            span = EraSpan(
                calendar=calendar,
                base=base,
                base_precise=base_precise,
                end=base + self._local_offset(calendar, last),
                end_precise=base_precise + self._local_offset_precise(calendar, last),
                previous_end=previous.end if previous is not None else None,
            )
            spans[calendar] = span
            previous = span
        return spans

    def _local_offset(self, calendar: CalendarSystem, year: int) -> int:
        if calendar in VALIAN_CALENDARS:
            return round_half_up((year - 1) * self.ratio)
        return year

    def _local_offset_precise(self, calendar: CalendarSystem, year: int) -> float:
        if calendar in VALIAN_CALENDARS:
            return (year - 1) * self.ratio
        return float(year)

    def _span_for(self, calendar: CalendarSystem) -> EraSpan:
        try:
            return self._spans[CalendarSystem(calendar)]
        except (KeyError, ValueError):
            raise UnsupportedCalendarError(
                f"Calendar system {calendar} not implemented", calendar=str(calendar)
            ) from None

    @property
    def spans(self) -> tuple[EraSpan, ...]:
        """Era spans in chain order."""
        return tuple(self._spans.values())

    def era_end(self, calendar: CalendarSystem) -> int:
        """Return the rounded AA year of an era's last valid year."""
        return self._span_for(calendar).end

    def era_start(self, calendar: CalendarSystem) -> int:
        """Return the rounded AA year of an era's first year."""
        return self._span_for(calendar).base + self._local_offset(calendar, 1)

    def to_aa(self, date: CalendarDate) -> int:
        """Convert an era-local date to its rounded AA year.

        Only the year is used. The date is not range-checked here; that is
        the job of the era's calendar module.

        Raises:
            UnsupportedCalendarError: For alias or unknown calendars.
        """
        if date.calendar == CalendarSystem.AA:
            return date.year
        span = self._span_for(date.calendar)
        return span.base + self._local_offset(span.calendar, date.year)

    def to_aa_precise(self, date: CalendarDate) -> float:
        """Convert an era-local date to its unrounded AA year."""
        if date.calendar == CalendarSystem.AA:
            return float(date.year)
        span = self._span_for(date.calendar)
        return span.base_precise + self._local_offset_precise(span.calendar, date.year)

    def from_aa(self, aa_year: int, target: CalendarSystem) -> CalendarDate:
        """Convert an AA year into a year of the target calendar.

        Valian results are rounded to the nearest Valian year, so a round
        trip through AA may be off by one there.

        Raises:
            AAYearBeforeEraError: If the AA year is at or before the end of the
                era preceding the target.
            UnsupportedCalendarError: For alias or unknown calendars.
        """
        if target == CalendarSystem.AA:
            return CalendarDate(year=aa_year, calendar=CalendarSystem.AA)

        span = self._span_for(target)
        if span.previous_end is not None and aa_year <= span.previous_end:
            raise AAYearBeforeEraError(
                f"AA year {aa_year} is before the {ERA_DISPLAY_NAMES[span.calendar]} period",
                aa_year=aa_year,
                calendar=span.calendar.value,
            )

        solar_years = aa_year - span.base
        if span.is_valian:
            year = round_half_up(solar_years / self.ratio) + 1
        else:
            year = solar_years
        logger.debug("from_aa(%d, %s) -> %d", aa_year, span.calendar.value, year)
        return CalendarDate(year=year, calendar=span.calendar)

    def calculate_duration(self, start: CalendarDate, end: CalendarDate) -> int:
        """Return the signed duration in whole AA years (negative if end precedes start)."""
        return self.to_aa(end) - self.to_aa(start)

    def calculate_duration_in_days(self, start: CalendarDate, end: CalendarDate) -> int:
        """Return the signed duration in days.

        The AA difference uses the precise representation and is scaled by
        365 days; when both dates carry month and day, each date's day of
        year on the Gregorian month table refines the estimate.
        """
        total_days = (self.to_aa_precise(end) - self.to_aa_precise(start)) * DAYS_PER_SOLAR_YEAR

        if (
            start.month is not None
            and start.day is not None
            and end.month is not None
            and end.day is not None
        ):
            total_days = (
                total_days - day_of_year(start.month, start.day) + day_of_year(end.month, end.day)
            )

        return round_half_up(total_days)

    def get_duration_in_valian_years(self, start: CalendarDate, end: CalendarDate) -> float:
        """Return the duration expressed in Valian years."""
        if is_valian_calendar(start.calendar) and is_valian_calendar(end.calendar):
            solar_duration = self.to_aa_precise(end) - self.to_aa_precise(start)
            return solar_duration / self.ratio
        return self.calculate_duration(start, end) / self.ratio

    def spans_valian_era(self, start: CalendarDate, end: CalendarDate) -> bool:
        """Check whether the interval starts within the Valian eras and extends past them."""
        start_aa = self.to_aa(start)
        end_aa = self.to_aa(end)
        valian_era_end = self.era_end(CalendarSystem.AT1)
        return min(start_aa, end_aa) <= valian_era_end < max(start_aa, end_aa)


def is_valian_calendar(calendar: CalendarSystem | str) -> bool:
    """Check if a calendar counts Valian years."""
    return calendar in VALIAN_CALENDARS


def format_aa(aa_year: int) -> str:
    """Format an AA year as ``AA NNNNN``."""
    return f"AA {aa_year:05d}"


@functools.cache
def get_timeline() -> AnnoArdaTimeline:
    """Return the shared timeline built from the static boundary table."""
    return AnnoArdaTimeline()
