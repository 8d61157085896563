"""Calendar systems of the Arda chronology.

One module per era plus the Anno Arda axis, all reachable through the
registry. The timeline converter places every era on the AA axis.
"""

from src.calendars.registry import (
    CALENDAR_MODULES,
    all_calendar_info,
    is_implemented,
    list_available,
    list_implemented,
    module_for,
)
from src.calendars.timeline import AnnoArdaTimeline, format_aa, get_timeline, is_valian_calendar

__all__ = [
    "CALENDAR_MODULES",
    "AnnoArdaTimeline",
    "all_calendar_info",
    "format_aa",
    "get_timeline",
    "is_implemented",
    "is_valian_calendar",
    "list_available",
    "list_implemented",
    "module_for",
]
