"""Events service - loads the Middle-earth event dataset and searches it."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from src.calendars.registry import module_for
from src.calendars.timeline import get_timeline
from src.memory.calendar_types import CalendarDate, CalendarSystem
from src.memory.events import (
    DEFAULT_EVENT_CALENDAR,
    EventDate,
    MiddleEarthEvent,
    calendar_for_prefix,
    normalize_search_text,
    parse_event_date,
)
from src.settings import Settings
from src.utils.exceptions import ArdaChronologyError, EventDateError
from src.utils.validation import validate_not_none, validate_positive

logger = logging.getLogger(__name__)

# Dataset files, in chronological order of the eras they cover
EVENT_FILES: tuple[str, ...] = (
    "B1A-events.json",
    "1AT-events.json",
    "1AS-events.json",
    "2A-events.json",
    "3A-early.json",
    "3A-middle.json",
    "3A-late.json",
    "4A-events.json",
)

EventSnapshot = tuple[MiddleEarthEvent, ...]


class EventsService:
    """Service for the event dataset.

    Events are read once into an immutable snapshot sorted by AA year. The
    snapshot is returned to callers and cached here; it is never mutated.
    """

    def __init__(self, settings: Settings):
        """Initialize events service.

        Args:
            settings: Application settings (events directory, search limit).
        """
        validate_not_none(settings, "settings")
        self.settings = settings
        self._snapshot: EventSnapshot | None = None
        logger.debug("Initialized EventsService")

    @property
    def is_loaded(self) -> bool:
        """Check if a snapshot has been loaded."""
        return self._snapshot is not None

    def load_events(self, paths: Iterable[Path | str] | None = None) -> EventSnapshot:
        """Load and sort the event dataset.

        Args:
            paths: Explicit JSON files to read. Defaults to the standard
                dataset files in the configured events directory. Passing
                paths always reloads.

        Returns:
            Immutable tuple of events sorted by AA year.
        """
        if paths is None and self._snapshot is not None:
            return self._snapshot

        if paths is None:
            events_dir = Path(self.settings.events_dir)
            paths = [events_dir / name for name in EVENT_FILES]

        events: list[MiddleEarthEvent] = []
        for path in paths:
            events.extend(self._read_source(Path(path)))

        # sorted() is stable, so same-year events keep their file order
        self._snapshot = tuple(sorted(events, key=self.get_event_aa))
        logger.info("Loaded %d events", len(self._snapshot))
        return self._snapshot

    def _read_source(self, path: Path) -> list[MiddleEarthEvent]:
        """Read one dataset file; unusable sources are logged and skipped."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("Event source not found, skipping: %s", path)
            return []
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s events: %s", path.name, e)
            return []

        if not isinstance(data, list):
            logger.error("Failed to load %s events: invalid data format", path.name)
            return []

        events = []
        for index, entry in enumerate(data):
            try:
                events.append(MiddleEarthEvent.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping invalid event #%d in %s: %s", index, path.name, e)
        logger.debug("Read %d events from %s", len(events), path.name)
        return events

    def get_event_date(self, event: MiddleEarthEvent) -> EventDate:
        """Parse an event's date, substituting year 0 when it is malformed.

        Never raises: a bad entry must not break loading or sorting.
        """
        try:
            return parse_event_date(event.date)
        except EventDateError as e:
            logger.error("%s for event %r", e, event.name)
            prefix = event.date.split("-")[0]
            calendar = calendar_for_prefix(prefix) if "-" in event.date else DEFAULT_EVENT_CALENDAR
            return EventDate(year=0, calendar=calendar)

    def get_event_aa(self, event: MiddleEarthEvent) -> int:
        """Return the event's AA year for sorting, or 0 if it cannot be computed."""
        try:
            event_date = parse_event_date(event.date)
            return get_timeline().to_aa(
                CalendarDate(year=event_date.year, calendar=event_date.calendar)
            )
        except ArdaChronologyError as e:
            logger.error("Failed to place event %r on the AA timeline: %s", event.name, e)
            return 0

    def search_events(self, query: str, limit: int | None = None) -> list[MiddleEarthEvent]:
        """Find events matching every term of the query.

        Matching ignores case and diacritics and looks at the name,
        description, characters, locations and artifacts.

        Args:
            query: Space-separated search terms.
            limit: Maximum results. Defaults to the search_max_results setting.

        Returns:
            Matching events in timeline order.
        """
        if not query.strip():
            return []

        if limit is None:
            limit = self.settings.search_max_results
        validate_positive(limit, "limit")

        terms = [term for term in normalize_search_text(query).split(" ") if term]
        matches = []
        for event in self.load_events():
            text = normalize_search_text(event.searchable_text)
            if all(term in text for term in terms):
                matches.append(event)
                if len(matches) >= limit:
                    break

        logger.debug("Search %r matched %d events", query, len(matches))
        return matches

    def prefill_date(self, event: MiddleEarthEvent) -> CalendarDate:
        """Turn an event's date into a CalendarDate for a duration calculation.

        Month and day are kept only when the event's calendar supports them.
        """
        event_date = self.get_event_date(event)
        info = module_for(event_date.calendar).info
        month = event_date.month if info.has_months else None
        day = event_date.day if info.has_days and month is not None else None
        return CalendarDate(
            year=event_date.year,
            month=month,
            day=day,
            calendar=CalendarSystem(event_date.calendar),
        )
