"""Month availability: days in month, past dates, booked dates."""
from datetime import date

import pytest

from eventspace.core.errors import ValidationError
from eventspace.services.catalog import build_month_availability, month_bounds

TODAY = date(2030, 6, 15)


class TestBuildMonthAvailability:
    def test_one_entry_per_day_in_order(self):
        days = build_month_availability(6, 2030, set(), TODAY)  # July
        assert len(days) == 31
        assert days[0].date == "2030-07-01"
        assert days[-1].date == "2030-07-31"
        assert all(d.is_available for d in days)

    @pytest.mark.parametrize("year, expected", [(2028, 29), (2029, 28), (2100, 28), (2000, 29)])
    def test_february_respects_leap_years(self, year, expected):
        assert len(build_month_availability(1, year, set(), date(1999, 1, 1))) == expected

    def test_booked_date_unavailable(self):
        booked = {date(2030, 8, 10)}
        days = {d.date: d.is_available for d in build_month_availability(7, 2030, booked, TODAY)}
        assert days["2030-08-10"] is False
        assert days["2030-08-11"] is True

    def test_past_dates_unavailable_today_available(self):
        days = {d.date: d.is_available for d in build_month_availability(5, 2030, set(), TODAY)}
        assert days["2030-06-14"] is False
        assert days["2030-06-15"] is True
        assert days["2030-06-30"] is True

    def test_serializes_camel_case(self):
        entry = build_month_availability(0, 2031, set(), TODAY)[0]
        assert entry.model_dump(by_alias=True) == {"date": "2031-01-01", "isAvailable": True}


class TestMonthBounds:
    def test_zero_indexed(self):
        assert month_bounds(0, 2030) == (date(2030, 1, 1), date(2030, 1, 31))
        assert month_bounds(11, 2030) == (date(2030, 12, 1), date(2030, 12, 31))

    @pytest.mark.parametrize("month, year", [(-1, 2030), (12, 2030), (0, 0), (0, 10000)])
    def test_out_of_range(self, month, year):
        with pytest.raises(ValidationError):
            month_bounds(month, year)
