"""Tests for the table layout engine."""

import pytest

from headache.config.schema import ColumnWidths
from headache.models.forecast import Day, DayFilter, DaySeries, ForecastSet, HourlyRecord
from headache.render.layout import (
    LineStyle,
    build_day_table,
    cell,
    describe_weather,
    display_width,
    format_hour,
    format_measurement,
    format_row,
    render_forecast_text,
)

WIDTHS = ColumnWidths()


def _record(**overrides) -> HourlyRecord:
    values = {
        "hour": "7",
        "weather_code": "100",
        "temperature": "23.456",
        "pressure": "1013.26",
        "pressure_level": "2",
    }
    values.update(overrides)
    return HourlyRecord(**values)


class TestFieldFormatting:
    @pytest.mark.parametrize(
        "code,expected",
        [("100", "Sunny"), ("200", "Cloudy"), ("300", "Rainy"), ("999", "Unknown"), ("", "Unknown")],
    )
    def test_describe_weather(self, code: str, expected: str):
        assert describe_weather(code) == expected

    def test_measurement_sentinel(self):
        assert format_measurement("#") == "N/A"

    def test_measurement_one_decimal(self):
        assert format_measurement("23.456") == "23.5"
        assert format_measurement("1013") == "1013.0"
        assert format_measurement(" 1013.26 ") == "1013.3"

    def test_measurement_garbage_is_zero(self):
        assert format_measurement("warm") == "0.0"
        assert format_measurement("") == "0.0"

    @pytest.mark.parametrize(
        "hour,expected", [("7", "07:00"), ("12", "12:00"), (" 3 ", "03:00"), ("0", "00:00")]
    )
    def test_format_hour(self, hour: str, expected: str):
        assert format_hour(hour) == expected


class TestCell:
    def test_centres_and_pads(self):
        assert cell("ab", 6) == "  ab  "
        assert len(cell("Sunny", 10)) == 10

    def test_truncates(self):
        assert cell("Pressure Level", 8) == "Pressure"

    def test_wide_characters(self):
        assert display_width("千代田区") == 8
        assert cell("千代田区", 10) == " 千代田区 "
        assert display_width(cell("千代田区", 5)) == 5


class TestBuildDayTable:
    def test_empty_series_has_no_header(self):
        table = build_day_table("Chiyoda", DaySeries("Tomorrow"), WIDTHS)
        assert table.is_empty
        assert table.header_text == ""
        assert table.content_text == ""

    def test_header_block(self):
        table = build_day_table("Chiyoda", DaySeries("Today", (_record(),)), WIDTHS)
        assert len(table.header) == 3
        title, titles, units = table.header
        assert title.text.strip() == "Chiyoda - Today"
        assert title.style is LineStyle.TITLE
        for name in ("Time", "Weather", "Temp", "Pressure", "Pressure Level"):
            assert name in titles.text
        assert "(°C)" in units.text and "(hPa)" in units.text
        assert all(display_width(line.text) == WIDTHS.total for line in table.header)

    def test_one_row_per_record(self):
        hours = (_record(hour="1"), _record(hour="2", temperature="#"))
        table = build_day_table("Chiyoda", DaySeries("Today", hours), WIDTHS)
        assert len(table.rows) == 2
        assert all(line.style is LineStyle.CELL for line in table.rows)
        assert "N/A" in table.rows[1].text

    def test_row_cells(self):
        row = format_row(_record(), WIDTHS)
        assert len(row) == WIDTHS.total
        assert row[: WIDTHS.time].strip() == "07:00"
        fields = row.split()
        assert fields == ["07:00", "Sunny", "23.5", "1013.3", "2"]

    def test_custom_widths(self):
        widths = ColumnWidths(time=6, weather=8, temp=6, pressure=8, level=6)
        row = format_row(_record(), widths)
        assert len(row) == 34


class TestRenderForecastText:
    def test_all_days(self, forecast: ForecastSet):
        text = render_forecast_text(forecast, None, WIDTHS)
        for day in Day:
            assert f"千代田区 - {day.label}" in text
        assert text.count("Pressure Level") == 4

    def test_filtered_day(self, forecast: ForecastSet):
        text = render_forecast_text(forecast, DayFilter.TOMORROW, WIDTHS)
        assert "千代田区 - Tomorrow" in text
        assert "Yesterday" not in text
        assert text.count("Pressure Level") == 1

    def test_empty_days_skipped(self, forecast_factory):
        fs = forecast_factory((0, 2, 0, 0))
        text = render_forecast_text(fs, None, WIDTHS)
        assert "Chiyoda - Today" in text
        assert "Tomorrow" not in text
        assert render_forecast_text(fs, DayFilter.YESTERDAY, WIDTHS) == ""
