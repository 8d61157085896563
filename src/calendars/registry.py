"""Calendar module registry.

Maps every calendar identifier to the module that handles it. The reckoning
aliases are placeholders that reuse another era's module until they get
rules of their own; ``list_implemented`` leaves them out.
"""

import logging
from types import MappingProxyType

from src.calendars._common import CalendarModule
from src.calendars.anno_arda import AnnoArdaCalendar
from src.calendars.first_age_sun import FirstAgeSunCalendar
from src.calendars.fourth_age import FourthAgeCalendar
from src.calendars.kings_reckoning import SecondAgeCalendar
from src.calendars.shire_reckoning import ThirdAgeCalendar
from src.calendars.valian import BEFORE_FIRST_AGE, YEARS_OF_THE_TREES
from src.memory.calendar_types import ALIAS_CALENDARS, CalendarInfo, CalendarSystem
from src.utils.exceptions import UnsupportedCalendarError

logger = logging.getLogger(__name__)

_second_age = SecondAgeCalendar()
_third_age = ThirdAgeCalendar()

CALENDAR_MODULES: MappingProxyType[CalendarSystem, CalendarModule] = MappingProxyType(
    {
        CalendarSystem.B1A: BEFORE_FIRST_AGE,
        CalendarSystem.AT1: YEARS_OF_THE_TREES,
        CalendarSystem.AS1: FirstAgeSunCalendar(),
        CalendarSystem.A2: _second_age,
        CalendarSystem.A3: _third_age,
        CalendarSystem.A4: FourthAgeCalendar(),
        CalendarSystem.AA: AnnoArdaCalendar(),
        CalendarSystem.SHIRE_RECKONING: _third_age,
        CalendarSystem.KINGS_RECKONING: _second_age,
        CalendarSystem.STEWARDS_RECKONING: _third_age,
        CalendarSystem.IMLADRIS_RECKONING: YEARS_OF_THE_TREES,
    }
)


def _coerce(calendar: CalendarSystem | str) -> CalendarSystem | None:
    try:
        return CalendarSystem(calendar)
    except ValueError:
        return None


def module_for(calendar: CalendarSystem | str) -> CalendarModule:
    """Return the calendar module for an identifier.

    Args:
        calendar: Calendar system or its token (e.g. "3A").

    Returns:
        The module handling that calendar.

    Raises:
        UnsupportedCalendarError: If the identifier is not registered.
    """
    system = _coerce(calendar)
    module = CALENDAR_MODULES.get(system) if system is not None else None
    if module is None:
        logger.debug("No calendar module registered for %r", calendar)
        raise UnsupportedCalendarError(
            f"Calendar system {calendar} not found", calendar=str(calendar)
        )
    return module


def list_available() -> list[CalendarSystem]:
    """Return every registered identifier, aliases included."""
    return list(CALENDAR_MODULES)


def is_implemented(calendar: CalendarSystem | str) -> bool:
    """Check whether a calendar has rules of its own (aliases do not)."""
    system = _coerce(calendar)
    return system is not None and system in CALENDAR_MODULES and system not in ALIAS_CALENDARS


def list_implemented() -> list[CalendarSystem]:
    """Return the identifiers with their own calendar rules, in registry order."""
    return [system for system in CALENDAR_MODULES if is_implemented(system)]


def all_calendar_info() -> list[CalendarInfo]:
    """Return the static descriptions of all implemented calendars."""
    return [CALENDAR_MODULES[system].info for system in list_implemented()]
