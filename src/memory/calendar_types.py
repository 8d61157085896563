"""Calendar data types for the Arda chronology.

Contains Pydantic models for:
- Calendar system identifiers (primary eras and reckoning aliases)
- Era-local dates with optional month/day precision
- Static calendar descriptions used by the registry
- Duration results returned by the calendar modules and services
"""

import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class CalendarSystem(StrEnum):
    """Stable tokens identifying each calendar system.

    The values are persisted in event data and settings, so they must not change.
    """

    B1A = "B1A"
    AT1 = "1AT"
    AS1 = "1AS"
    A2 = "2A"
    A3 = "3A"
    A4 = "4A"
    AA = "AA"
    SHIRE_RECKONING = "shireReckoning"
    KINGS_RECKONING = "kingsReckoning"
    STEWARDS_RECKONING = "stewardsReckoning"
    IMLADRIS_RECKONING = "imladrisReckoning"


# Reckoning aliases that currently reuse another era's rules
ALIAS_CALENDARS: frozenset[CalendarSystem] = frozenset(
    {
        CalendarSystem.SHIRE_RECKONING,
        CalendarSystem.KINGS_RECKONING,
        CalendarSystem.STEWARDS_RECKONING,
        CalendarSystem.IMLADRIS_RECKONING,
    }
)


class CalendarDate(BaseModel):
    """A date expressed in one era's calendar.

    ``month`` and ``day`` are optional; leaving them out means year-only
    precision. Range checks belong to the era's calendar module, so an
    out-of-range date can still be built and then rejected there.
    """

    year: int = Field(description="Era-local year")
    month: int | None = Field(default=None, description="Month (1-12) for eras with months")
    day: int | None = Field(default=None, description="Day of month for eras with days")
    calendar: CalendarSystem = Field(description="Calendar system the date is expressed in")

    model_config = ConfigDict(frozen=True)

    @property
    def has_month(self) -> bool:
        """Check if the date carries a month."""
        return self.month is not None

    @property
    def has_day(self) -> bool:
        """Check if the date carries both a month and a day."""
        return self.month is not None and self.day is not None


class CalendarInfo(BaseModel):
    """Static description of a calendar system."""

    name: str = Field(description="Display name (e.g., 'Third Age')")
    short_name: str = Field(description="Short token used as the date prefix")
    description: str = Field(default="", description="What the calendar measures")
    system: CalendarSystem
    has_months: bool = False
    has_days: bool = False
    week_days: int = Field(default=7, ge=1, description="Days in the calendar's week")
    months_per_year: int | None = Field(default=None, ge=1)
    days_per_month: int | None = Field(default=None, ge=1)
    year_length: int | None = Field(default=None, ge=1, description="Nominal days per year")

    model_config = ConfigDict(frozen=True)


class AgeBoundary(BaseModel):
    """Inclusive range of valid years for one calendar system."""

    first: int
    last: int

    model_config = ConfigDict(frozen=True)

    def contains(self, year: int) -> bool:
        """Check whether ``year`` lies within the boundary."""
        return self.first <= year <= self.last


class DateCalculationResult(BaseModel):
    """Elapsed time between two dates."""

    years: int
    months: int | None = None
    days: int | None = None
    total_days: int
    description: str


class CalculationResult(BaseModel):
    """Full comparison of two dates, ready for display."""

    start_date: CalendarDate
    end_date: CalendarDate
    start_formatted: str
    end_formatted: str
    start_aa: int
    end_aa: int
    duration: DateCalculationResult
    valian_years: float | None = None
    show_valian_years: bool = False
