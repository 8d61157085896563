"""Tests for DurationService."""

import pytest

from src.services.duration_service import DurationService
from src.settings import Settings
from src.utils.exceptions import InvalidDateError


@pytest.fixture
def service(settings) -> DurationService:
    """Duration service with default settings."""
    return DurationService(settings)


class TestValidateWithDetails:
    """Tests for validate_with_details."""

    def test_valid_date(self, service, make_date):
        """Valid dates produce no message."""
        assert service.validate_with_details(make_date("3A", 3019, 3, 25), "Start") is None

    def test_year_out_of_range(self, service, make_date):
        """The message names the era's year range."""
        assert service.validate_with_details(make_date("3A", 3022), "Start") == (
            "Start year 3022 is invalid. 3A years must be between 1 and 3021"
        )

    def test_month_out_of_range(self, service, make_date):
        """Months outside 1-12 are reported."""
        assert service.validate_with_details(make_date("2A", 100, 13), "End") == (
            "End month 13 is invalid. Month must be between 1 and 12"
        )

    def test_day_out_of_range(self, service, make_date):
        """Days outside 1-30 are reported."""
        assert service.validate_with_details(make_date("3A", 3019, 2, 31), "Start") == (
            "Start day 31 is invalid. Day must be between 1 and 30"
        )

    def test_month_in_year_only_era(self, service, make_date):
        """Month or day on a Valian date is reported against the era."""
        assert service.validate_with_details(make_date("B1A", 10, 3), "Start") == (
            "Start date is not valid for B1A"
        )

    def test_day_without_month(self, service, make_date):
        """A day without a month is reported against the era."""
        assert service.validate_with_details(make_date("3A", 3019, day=5), "End") == (
            "End date is not valid for 3A"
        )

    def test_alias_calendar(self, service, make_date):
        """Alias calendars cannot be measured."""
        assert service.validate_with_details(make_date("shireReckoning", 1419), "Start") == (
            "Start calendar system is not supported"
        )

    def test_label_required(self, service, make_date):
        """An empty label is a programming error."""
        with pytest.raises(ValueError):
            service.validate_with_details(make_date("3A", 1), " ")


class TestDetailedBreakdown:
    """Tests for detailed_breakdown."""

    def test_breakdown(self, service):
        """Days split into 365-day years and 30-day months."""
        assert service.detailed_breakdown(400) == (1, 1, 5)

    def test_negative_uses_absolute_value(self, service):
        """The sign is dropped."""
        assert service.detailed_breakdown(-400) == (1, 1, 5)

    def test_zero(self, service):
        """Zero days is all zeros."""
        assert service.detailed_breakdown(0) == (0, 0, 0)


class TestDescribeDuration:
    """Tests for describe_duration."""

    def test_under_a_month(self, service, make_date):
        """Short day-precise spans are shown in days."""
        start, end = make_date("3A", 3019, 3, 1), make_date("3A", 3019, 3, 25)
        assert service.describe_duration(0, 0, 24, False, start, end) == "24 days"
        assert service.describe_duration(0, 0, 1, False, start, end) == "1 day"

    def test_months_and_days(self, service, make_date):
        """Day precision shows months and days."""
        start, end = make_date("3A", 3018, 9, 23), make_date("3A", 3019, 3, 25)
        assert service.describe_duration(0, 6, 3, False, start, end) == "6 months, 3 days"

    def test_years_months_days(self, service, make_date):
        """Short spans show all three units."""
        start, end = make_date("3A", 3000, 1, 1), make_date("3A", 3019, 3, 25)
        assert service.describe_duration(1, 2, 3, False, start, end) == "1 year, 2 months, 3 days"

    def test_long_spans_drop_finer_units(self, service, make_date):
        """Days vanish past 30 months and months past 11 years."""
        start, end = make_date("3A", 1000, 1, 1), make_date("3A", 3019, 3, 25)
        assert service.describe_duration(3, 2, 3, False, start, end) == "3 years, 2 months"
        assert service.describe_duration(12, 2, 3, False, start, end) == "12 years"

    def test_year_precision_hides_months(self, service, make_date):
        """Without months on both dates only years are shown."""
        start, end = make_date("2A", 3319), make_date("3A", 3019, 3, 25)
        assert service.describe_duration(5, 2, 3, False, start, end) == "5 years"

    def test_negative(self, service, make_date):
        """Negative spans get a leading minus."""
        start, end = make_date("3A", 3019, 3, 25), make_date("3A", 3018, 9, 23)
        assert service.describe_duration(0, 6, 3, True, start, end) == "-6 months, 3 days"

    @pytest.mark.parametrize(
        ("start_args", "end_args", "expected"),
        [
            ((3019, 3, 25), (3019, 3, 25), "0 days"),
            ((3019, 3), (3019, 3), "0 months"),
            ((3019,), (3019,), "0 years"),
        ],
    )
    def test_zero_follows_precision(self, service, make_date, start_args, end_args, expected):
        """A zero duration is shown in the finest shared unit."""
        start, end = make_date("3A", *start_args), make_date("3A", *end_args)
        assert service.describe_duration(0, 0, 0, False, start, end) == expected


class TestCalculate:
    """Tests for calculate."""

    def test_day_precise_third_age(self, service, make_date):
        """Frodo leaving Bag End to the Ring's destruction."""
        result = service.calculate(make_date("3A", 3018, 9, 23), make_date("3A", 3019, 3, 25))
        assert result.start_formatted == "3A-3018-09-23"
        assert result.end_formatted == "3A-3019-03-25"
        assert (result.start_aa, result.end_aa) == (54940, 54941)
        assert result.duration.total_days == 183
        assert (result.duration.years, result.duration.months, result.duration.days) == (0, 6, 3)
        assert result.duration.description == "6 months, 3 days"
        assert result.show_valian_years is False
        assert result.valian_years is None

    def test_reversed_dates(self, service, make_date):
        """Reversed dates report the absolute total and a negative description."""
        result = service.calculate(make_date("3A", 3019, 3, 25), make_date("3A", 3018, 9, 23))
        assert result.duration.total_days == 183
        assert result.duration.description == "-6 months, 3 days"

    def test_across_eras(self, service, make_date):
        """The Downfall of Númenor to the fall of Sauron."""
        result = service.calculate(make_date("2A", 3319), make_date("3A", 3019))
        assert (result.start_aa, result.end_aa) == (51800, 54941)
        assert result.duration.years == 3141
        assert result.duration.description == "3141 years"

    def test_valian_dates_show_valian_years(self, service, make_date):
        """Valian calendars switch on the Valian-year view."""
        result = service.calculate(make_date("B1A", 1), make_date("B1A", 101))
        assert result.start_aa == 1
        assert result.end_aa == 959
        assert result.duration.years == 958
        assert result.show_valian_years is True
        assert result.valian_years == pytest.approx(100.0)

    def test_span_across_valian_boundary(self, service, make_date):
        """A span that leaves the Valian eras shows Valian years."""
        result = service.calculate(make_date("AA", 40000), make_date("AA", 50000))
        assert result.show_valian_years is True
        assert result.valian_years == pytest.approx(10000 / 9.582)

    def test_setting_disables_valian_years(self, make_date):
        """show_valian_years=False hides the Valian view."""
        service = DurationService(Settings(show_valian_years=False))
        result = service.calculate(make_date("B1A", 1), make_date("B1A", 101))
        assert result.show_valian_years is False
        assert result.valian_years is None

    def test_invalid_start_raises_detailed_message(self, service, make_date):
        """Validation failures raise with the detailed message."""
        with pytest.raises(InvalidDateError, match="Start year 5000 is invalid") as exc:
            service.calculate(make_date("3A", 5000), make_date("3A", 3019))
        assert exc.value.calendar == "3A"

    def test_invalid_end_raises(self, service, make_date):
        """The end date is validated too."""
        with pytest.raises(InvalidDateError, match="End month 13"):
            service.calculate(make_date("3A", 3000), make_date("3A", 3019, 13))

    def test_requires_settings(self):
        """Settings are mandatory."""
        with pytest.raises(ValueError):
            DurationService(None)  # type: ignore[arg-type]
