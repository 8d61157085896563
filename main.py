#!/usr/bin/env python3
"""Arda Chronology - dates and durations across the ages of Middle-earth.

Converts dates between the era calendars (B1A, 1AT, 1AS, 2A, 3A, 4A) and
the Anno Arda (AA) year count, measures durations, and searches the event
dataset.

Usage:
    python main.py convert 3A-3019-03-25          # Date in AA and every era it falls in
    python main.py convert AA-54941 --to 2A       # Inverse conversion
    python main.py duration 2A-3319 3A-3019       # Time between two dates
    python main.py duration 3018-09-23 3019-03-25 # Prefix defaults to the settings
    python main.py search numenor                 # Find events
    python main.py calendars                      # List calendar systems
"""

import argparse
import logging
import sys
import uuid

from src.utils.logging_config import log_context, setup_logging

logger = logging.getLogger(__name__)


def parse_date_text(text: str, default_calendar: str):
    """Parse ``[<calendar>-]<year>[-<month>[-<day>]]`` from the command line.

    Args:
        text: Date such as "3A-3019-03-25", "AA-54941" or "3019-03-25".
        default_calendar: Calendar token used when the prefix is left out.

    Raises:
        InvalidDateError: If the text is not a date in that form.
    """
    from src.memory.calendar_types import CalendarDate, CalendarSystem
    from src.utils.exceptions import InvalidDateError

    parts = text.strip().split("-")
    if parts[0].isdecimal():
        parts.insert(0, default_calendar)
    try:
        calendar = CalendarSystem(parts[0])
        numbers = [int(part) for part in parts[1:]]
    except ValueError:
        raise InvalidDateError(
            f"Invalid date {text!r}, expected e.g. 3A-3019-03-25 or AA-54941"
        ) from None
    if not 1 <= len(numbers) <= 3:
        raise InvalidDateError(f"Invalid date {text!r}, expected 1 to 3 numbers")

    year, month, day = (numbers + [None, None])[:3]
    return CalendarDate(year=year, month=month, day=day, calendar=calendar)


def load_settings():
    """Load persisted settings.

    Raises:
        ConfigError: If the settings file holds invalid values.
    """
    from src.settings import Settings
    from src.utils.exceptions import ConfigError

    try:
        return Settings.load()
    except ValueError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def run_convert(text: str, targets: list[str] | None) -> None:
    """Print a date's AA year and its year in other calendars.

    Args:
        text: Date to convert; the prefix defaults to default_start_calendar.
        targets: Calendar tokens to convert into. Defaults to every era the
            AA year falls in.
    """
    from src.calendars.registry import list_implemented, module_for
    from src.calendars.timeline import format_aa
    from src.utils.exceptions import AAYearBeforeEraError

    date = parse_date_text(text, load_settings().default_start_calendar)
    module = module_for(date.calendar)
    aa_year = module.to_aa(date)
    print(f"{module.format_date(date)} = {format_aa(aa_year)}")

    explicit = targets is not None
    for token in targets or list_implemented():
        target = module_for(token)
        if target.info.system == date.calendar:
            continue
        try:
            converted = target.from_aa(aa_year)
        except AAYearBeforeEraError as e:
            if explicit:
                raise
            logger.debug("Skipping %s: %s", token, e)
            continue
        if not target.validate_date(converted):
            if explicit:
                print(f"  {target.info.name}: past the end of the era (year {converted.year})")
            continue
        print(f"  {target.info.name}: {target.format_date(converted)}")


def run_duration(start_text: str, end_text: str) -> None:
    """Print the duration between two dates."""
    from src.services import ServiceContainer

    settings = load_settings()
    start = parse_date_text(start_text, settings.default_start_calendar)
    end = parse_date_text(end_text, settings.default_end_calendar)
    services = ServiceContainer(settings)
    result = services.duration.calculate(start, end)
    print(f"From: {result.start_formatted} (AA {result.start_aa})")
    print(f"To:   {result.end_formatted} (AA {result.end_aa})")
    print(f"Duration: {result.duration.description} ({result.duration.total_days} days)")
    if result.show_valian_years and result.valian_years is not None:
        print(f"Valian years: {result.valian_years:.2f}")


def run_search(query: str, limit: int | None) -> None:
    """Print events matching the query."""
    from src.calendars.registry import module_for
    from src.services import ServiceContainer

    services = ServiceContainer(load_settings())
    matches = services.events.search_events(query, limit=limit)
    if not matches:
        print("No matching events found.")
        return

    print(f"Found {len(matches)} event(s):")
    print("-" * 40)
    for event in matches:
        date = services.events.prefill_date(event)
        formatted = module_for(date.calendar).format_date(date)
        print(f"{formatted:<16} AA {services.events.get_event_aa(event):>5}  {event.name}")
        if event.description:
            print(f"    {event.description}")


def run_calendars() -> None:
    """Print the implemented calendar systems."""
    from src.calendars.registry import all_calendar_info
    from src.memory.ages import AGE_BOUNDARIES

    for info in all_calendar_info():
        boundary = AGE_BOUNDARIES[info.system]
        precision = "year/month/day" if info.has_days else "year"
        print(f"{info.short_name:<4} {info.name}")
        print(f"     {info.description}")
        print(f"     years {boundary.first}-{boundary.last}, precision: {precision}")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Arda Chronology - dates and durations across the ages of Middle-earth"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: the log_level setting)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="none",
        help="Log file path ('default' uses output/logs/arda_chronology.log, default: none)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a date to AA and other calendars")
    convert.add_argument("date", help="Date, e.g. 3A-3019-03-25 or AA-54941")
    convert.add_argument(
        "--to",
        action="append",
        metavar="CALENDAR",
        help="Target calendar token (repeatable, default: every matching era)",
    )

    duration = subparsers.add_parser("duration", help="Calculate the time between two dates")
    duration.add_argument("start", help="Start date, e.g. 2A-3319")
    duration.add_argument("end", help="End date, e.g. 3A-3019-03-25")

    search = subparsers.add_parser("search", help="Search the event dataset")
    search.add_argument("query", nargs="+", help="Search terms (all must match)")
    search.add_argument("--limit", type=int, default=None, help="Maximum results")

    subparsers.add_parser("calendars", help="List calendar systems")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    log_file = None if args.log_file.lower() == "none" else args.log_file
    setup_logging(level=args.log_level or "WARNING", log_file=log_file)

    from src.utils.exceptions import ArdaChronologyError, ConfigError

    # If no explicit --log-level, respect the persisted setting
    if args.log_level is None:
        from src.utils.logging_config import set_log_level

        try:
            set_log_level(load_settings().log_level)
        except ConfigError as e:
            logger.debug("Could not apply persisted log level: %s", e)

    try:
        with log_context(f"{args.command}-{uuid.uuid4().hex[:8]}"):
            if args.command == "convert":
                run_convert(args.date, args.to)
            elif args.command == "duration":
                run_duration(args.start, args.end)
            elif args.command == "search":
                run_search(" ".join(args.query), args.limit)
            elif args.command == "calendars":
                run_calendars()
    except ArdaChronologyError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
