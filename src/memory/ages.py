"""Era boundary table for the Arda chronology.

Static configuration only: the valid year range of every calendar system,
the Valian-to-solar ratio used by the two earliest eras, and the offsets
reserved for drift corrections between consecutive eras.
"""

import logging
from types import MappingProxyType

from src.memory.calendar_types import AgeBoundary, CalendarSystem
from src.utils.exceptions import UnsupportedCalendarError

logger = logging.getLogger(__name__)

# One Valian year is about 9.582 solar years
VALIAN_TO_SOLAR_RATIO = 9.582

AA_YEAR_ONE_EVENT = "The Valar come to Arda"

AGE_BOUNDARIES: MappingProxyType[CalendarSystem, AgeBoundary] = MappingProxyType(
    {
        CalendarSystem.B1A: AgeBoundary(first=1, last=3500),
        CalendarSystem.AT1: AgeBoundary(first=1, last=1500),
        CalendarSystem.AS1: AgeBoundary(first=1, last=590),
        CalendarSystem.A2: AgeBoundary(first=1, last=3441),
        CalendarSystem.A3: AgeBoundary(first=1, last=3021),
        CalendarSystem.A4: AgeBoundary(first=1, last=220),
        CalendarSystem.AA: AgeBoundary(first=1, last=99999),
    }
)

# All zero for now; keyed by "<from>_to_<to>"
AGE_TRANSITIONS: MappingProxyType[str, int] = MappingProxyType(
    {
        "B1A_to_1AT": 0,
        "1AT_to_1AS": 0,
        "1AS_to_2A": 0,
        "2A_to_3A": 0,
        "3A_to_4A": 0,
    }
)


def boundaries_for(calendar: CalendarSystem | str) -> AgeBoundary:
    """Return the valid year range for a calendar system.

    Args:
        calendar: Calendar system or its token.

    Returns:
        AgeBoundary with the inclusive first and last year.

    Raises:
        UnsupportedCalendarError: If the calendar has no boundary entry
            (unknown tokens and the reckoning aliases).
    """
    try:
        boundary = AGE_BOUNDARIES[CalendarSystem(calendar)]
    except (KeyError, ValueError):
        raise UnsupportedCalendarError(
            f"Calendar system {calendar} is not supported", calendar=str(calendar)
        ) from None
    return boundary
