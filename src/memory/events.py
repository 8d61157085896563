"""Middle-earth event records and their date strings.

Event dates are encoded as ``"<Prefix>-<year>[-<month>[-<day>]]"`` where the
prefix names the era (``B1A``, ``1AT``, ``1AS``, ``2A``, ``3A``, ``4A``).
"""

import logging
import unicodedata

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.memory.calendar_types import CalendarSystem
from src.utils.exceptions import EventDateError

logger = logging.getLogger(__name__)

EVENT_DATE_PREFIXES: dict[str, CalendarSystem] = {
    "B1A": CalendarSystem.B1A,
    "1AT": CalendarSystem.AT1,
    "1AS": CalendarSystem.AS1,
    "2A": CalendarSystem.A2,
    "3A": CalendarSystem.A3,
    "4A": CalendarSystem.A4,
}

# Undated and unknown prefixes are read as Third Age
DEFAULT_EVENT_CALENDAR = CalendarSystem.A3


class MiddleEarthEvent(BaseModel):
    """One entry of the event dataset."""

    name: str = Field(description="Event name")
    date: str = Field(description="Encoded date, e.g. '3A-3019-03-25'")
    range: str = Field(default="", description="Free-text date range for display")
    era: str = Field(default="", description="Era label for display")
    calendar: str = Field(default="", description="Calendar label for display")
    description: str = ""
    characters: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    artifacts: list[str] = Field(default_factory=list)
    type: str = Field(default="", description="Event category (battle, birth, ...)")

    model_config = ConfigDict(frozen=True)

    @field_validator("artifacts", mode="before")
    @classmethod
    def _none_artifacts(cls, value: object) -> object:
        """Accept an explicit null for events without artifacts."""
        return [] if value is None else value

    @property
    def searchable_text(self) -> str:
        """Name, description and all named entities joined by spaces."""
        return " ".join(
            [self.name, self.description, *self.characters, *self.locations, *self.artifacts]
        )


class EventDate(BaseModel):
    """Date parsed from an event's encoded date string."""

    year: int
    calendar: CalendarSystem
    month: int | None = None
    day: int | None = None

    model_config = ConfigDict(frozen=True)


def _parse_optional_int(field: str) -> int | None:
    return int(field) if field.isdecimal() else None


def calendar_for_prefix(prefix: str) -> CalendarSystem:
    """Map an event date prefix to its calendar, defaulting to the Third Age."""
    return EVENT_DATE_PREFIXES.get(prefix, DEFAULT_EVENT_CALENDAR)


def parse_event_date(raw: str) -> EventDate:
    """Parse an encoded event date.

    Args:
        raw: Date string such as ``"2A-3319"`` or ``"3A-3019-03-25"``.

    Returns:
        The parsed EventDate. Month and day are kept only when numeric.

    Raises:
        EventDateError: If the string has fewer than two fields or a
            non-numeric year.
    """
    parts = raw.split("-")
    if len(parts) < 2:
        raise EventDateError(f"Malformed event date: {raw!r}", raw_date=raw)

    calendar = calendar_for_prefix(parts[0])
    try:
        year = int(parts[1])
    except ValueError:
        raise EventDateError(f"Invalid year in event date: {raw!r}", raw_date=raw) from None

    month = _parse_optional_int(parts[2]) if len(parts) > 2 else None
    day = _parse_optional_int(parts[3]) if len(parts) > 3 and month is not None else None
    return EventDate(year=year, calendar=calendar, month=month, day=day)


def normalize_search_text(text: str) -> str:
    """Strip diacritics and lowercase, so "Númenor" matches "numenor"."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return stripped.lower()
