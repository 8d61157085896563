"""Tests for EventsService."""

import json
import logging

import pytest

from src.memory.calendar_types import CalendarDate, CalendarSystem
from src.memory.events import MiddleEarthEvent
from src.services.events_service import EVENT_FILES, EventsService
from src.settings import EVENTS_DIR, Settings


@pytest.fixture
def service(events_settings) -> EventsService:
    """Service reading the temporary dataset."""
    return EventsService(events_settings)


class TestLoadEvents:
    """Tests for load_events."""

    def test_events_sorted_by_aa(self, service):
        """Events come back in timeline order, not file order."""
        names = [event.name for event in service.load_events()]
        assert names == [
            "The Valar enter Arda",
            "Forging of the Silmarils",
            "First Sunrise",
            "Downfall of Númenor",
            "The Istari arrive",
            "Bilbo finds the Ring",
            "Destruction of the One Ring",
            "Death of King Elessar",
        ]

    def test_snapshot_is_immutable_and_cached(self, service):
        """The snapshot is a tuple and is reused."""
        snapshot = service.load_events()
        assert isinstance(snapshot, tuple)
        assert service.is_loaded
        assert service.load_events() is snapshot

    def test_missing_source_is_skipped(self, service, caplog):
        """A missing file is logged and the rest still load."""
        with caplog.at_level(logging.WARNING):
            events = service.load_events()
        assert len(events) == 8
        assert "3A-middle.json" in caplog.text

    def test_non_list_source_is_skipped(self, events_dir, events_settings, caplog):
        """A file that is not a JSON array is skipped."""
        (events_dir / "3A-middle.json").write_text(json.dumps({"events": []}))
        service = EventsService(events_settings)
        with caplog.at_level(logging.ERROR):
            events = service.load_events()
        assert len(events) == 8
        assert "invalid data format" in caplog.text

    def test_invalid_json_is_skipped(self, events_dir, events_settings):
        """A file with broken JSON is skipped."""
        (events_dir / "3A-middle.json").write_text("[{not json")
        assert len(EventsService(events_settings).load_events()) == 8

    def test_invalid_entry_is_skipped(self, tmp_path, settings, event_factory):
        """Entries failing validation are dropped individually."""
        path = tmp_path / "mixed.json"
        path.write_text(json.dumps([{"date": "3A-1"}, event_factory("Valid", "3A-2")]))
        events = EventsService(settings).load_events([path])
        assert [event.name for event in events] == ["Valid"]

    def test_malformed_dates_sort_first(self, tmp_path, settings, event_factory):
        """Events whose date cannot be placed sort as AA 0."""
        path = tmp_path / "events.json"
        path.write_text(
            json.dumps(
                [
                    event_factory("Dated", "3A-3019"),
                    event_factory("No year", "3A"),
                    event_factory("Bad year", "2A-unknown"),
                ]
            )
        )
        events = EventsService(settings).load_events([path])
        assert [event.name for event in events] == ["No year", "Bad year", "Dated"]

    def test_explicit_paths_reload(self, service, tmp_path, event_factory):
        """Passing paths replaces the cached snapshot."""
        service.load_events()
        path = tmp_path / "one.json"
        path.write_text(json.dumps([event_factory("Only", "4A-1")]))
        assert [event.name for event in service.load_events([path])] == ["Only"]
        assert len(service.load_events()) == 1

    def test_bundled_dataset_loads(self):
        """The shipped dataset is complete and well-formed."""
        assert all((EVENTS_DIR / name).exists() for name in EVENT_FILES)
        events = EventsService(Settings()).load_events()
        assert len(events) > 10
        service = EventsService(Settings())
        aa_years = [service.get_event_aa(event) for event in events]
        assert aa_years == sorted(aa_years)
        assert 0 not in aa_years


class TestEventDates:
    """Tests for get_event_date, get_event_aa and prefill_date."""

    def test_get_event_date(self, settings):
        """Well-formed dates are parsed."""
        event = MiddleEarthEvent(name="Fall", date="2A-3319")
        date = EventsService(settings).get_event_date(event)
        assert (date.year, date.calendar) == (3319, CalendarSystem.A2)

    def test_get_event_date_without_year(self, settings, caplog):
        """A date without a year becomes Third Age year 0 and is logged."""
        event = MiddleEarthEvent(name="Broken", date="garbage")
        with caplog.at_level(logging.ERROR):
            date = EventsService(settings).get_event_date(event)
        assert (date.year, date.calendar) == (0, CalendarSystem.A3)
        assert "Broken" in caplog.text

    def test_get_event_date_bad_year_keeps_calendar(self, settings):
        """A non-numeric year keeps the prefix's calendar."""
        event = MiddleEarthEvent(name="Broken", date="1AS-first")
        date = EventsService(settings).get_event_date(event)
        assert (date.year, date.calendar) == (0, CalendarSystem.AS1)

    def test_get_event_aa(self, settings):
        """Events are placed on the AA axis by year."""
        event = MiddleEarthEvent(name="Ring", date="3A-3019-03-25")
        assert EventsService(settings).get_event_aa(event) == 54941

    def test_get_event_aa_failure_is_zero(self, settings):
        """Unplaceable events get AA 0."""
        event = MiddleEarthEvent(name="Broken", date="3A")
        assert EventsService(settings).get_event_aa(event) == 0

    def test_prefill_keeps_month_and_day(self, settings):
        """Solar events keep their full date."""
        event = MiddleEarthEvent(name="Ring", date="3A-3019-03-25")
        assert EventsService(settings).prefill_date(event) == CalendarDate(
            year=3019, month=3, day=25, calendar=CalendarSystem.A3
        )

    def test_prefill_drops_month_for_valian_eras(self, settings):
        """Valian events are year-only."""
        event = MiddleEarthEvent(name="Lamps", date="B1A-1500-05-01")
        assert EventsService(settings).prefill_date(event) == CalendarDate(
            year=1500, calendar=CalendarSystem.B1A
        )


class TestSearchEvents:
    """Tests for search_events."""

    def test_diacritics_ignored(self, service):
        """A plain query matches accented text."""
        assert [e.name for e in service.search_events("numenor")] == ["Downfall of Númenor"]
        assert [e.name for e in service.search_events("Feanor")] == ["Forging of the Silmarils"]

    def test_accented_query(self, service):
        """An accented query matches too."""
        assert [e.name for e in service.search_events("Númenor")] == ["Downfall of Númenor"]

    def test_all_terms_must_match(self, service):
        """Every term has to appear somewhere in the event."""
        assert [e.name for e in service.search_events("ring gandalf")] == [
            "Destruction of the One Ring"
        ]

    def test_results_in_timeline_order(self, service):
        """Matches keep snapshot order."""
        assert [e.name for e in service.search_events("RING")] == [
            "Bilbo finds the Ring",
            "Destruction of the One Ring",
        ]

    def test_extra_spaces_ignored(self, service):
        """Repeated spaces do not produce empty terms."""
        assert len(service.search_events("  one   ring ")) == 2

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query(self, service, query):
        """Blank queries return nothing."""
        assert service.search_events(query) == []

    def test_no_match(self, service):
        """Unknown terms return nothing."""
        assert service.search_events("hogwarts") == []

    def test_explicit_limit(self, service):
        """The limit argument caps the results."""
        assert len(service.search_events("ring", limit=1)) == 1

    def test_non_positive_limit_raises(self, service):
        """A zero limit is rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            service.search_events("ring", limit=0)

    def test_limit_from_settings(self, events_dir):
        """The limit defaults to search_max_results."""
        service = EventsService(Settings(events_dir=str(events_dir), search_max_results=1))
        assert [e.name for e in service.search_events("ring")] == ["Bilbo finds the Ring"]


class TestInit:
    """Tests for EventsService construction."""

    def test_requires_settings(self):
        """Settings are mandatory."""
        with pytest.raises(ValueError, match="settings"):
            EventsService(None)  # type: ignore[arg-type]

    def test_not_loaded_initially(self, settings):
        """Nothing is read until load_events is called."""
        assert not EventsService(settings).is_loaded
