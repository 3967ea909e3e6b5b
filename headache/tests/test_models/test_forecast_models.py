"""Tests for forecast models and day selection."""

import pytest

from headache.models.forecast import Day, DayFilter, DaySeries, ForecastSet, InvalidDayError


class TestDayFilter:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("yesterday", DayFilter.YESTERDAY),
            ("Today", DayFilter.TODAY),
            ("TOMORROW", DayFilter.TOMORROW),
            ("dayafter", DayFilter.DAYAFTER),
        ],
    )
    def test_parse_case_insensitive(self, raw: str, expected: DayFilter):
        assert DayFilter.parse(raw) is expected

    def test_empty_means_no_filter(self):
        assert DayFilter.parse("") is None
        assert DayFilter.parse(None) is None

    def test_invalid_value(self):
        with pytest.raises(InvalidDayError) as exc:
            DayFilter.parse("next")
        assert exc.value.value == "next"

    def test_day_mapping(self):
        assert DayFilter.YESTERDAY.day is Day.YESTERDAY
        assert DayFilter.DAYAFTER.day is Day.DAY_AFTER_TOMORROW
        assert Day.DAY_AFTER_TOMORROW.label == "Day After Tomorrow"


class TestForecastSet:
    def test_empty_has_four_days(self):
        fs = ForecastSet.empty()
        assert len(fs.days) == 4
        for day in Day:
            assert fs.day(day).hours == ()
            assert fs.day(day).label == day.label

    def test_requires_four_days(self):
        with pytest.raises(ValueError):
            ForecastSet(place_name="x", days=(DaySeries("Today"),))
