"""Table layout for hourly pressure forecasts.

Everything here is a pure function of its arguments: the same records and
column widths always produce the same lines. Both the interactive viewport
and the one-shot printer build their tables through ``build_day_table``.
"""

import unicodedata
from dataclasses import dataclass
from enum import StrEnum

from headache.config.defaults import (
    MISSING_DISPLAY,
    MISSING_SENTINEL,
    UNKNOWN_WEATHER,
    WEATHER_DESCRIPTIONS,
)
from headache.config.schema import ColumnWidths
from headache.models.forecast import Day, DayFilter, DaySeries, ForecastSet, HourlyRecord

INVALID_DAY_MESSAGE = (
    "Invalid day specified. Please use: yesterday, today, tomorrow, or dayafter"
)

COLUMN_TITLES = ("Time", "Weather", "Temp", "Pressure", "Pressure Level")
COLUMN_UNITS = ("", "", "(°C)", "(hPa)", "")


class LineStyle(StrEnum):
    TITLE = "title"
    TABLE_HEADER = "table_header"
    CELL = "cell"
    ERROR = "error"
    LOADING = "loading"
    INDICATOR = "indicator"
    FOOTER = "footer"
    BLANK = "blank"


@dataclass(frozen=True)
class FrameLine:
    text: str
    style: LineStyle = LineStyle.CELL


@dataclass(frozen=True)
class DayTable:
    header: tuple[FrameLine, ...] = ()
    rows: tuple[FrameLine, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.header

    @property
    def header_text(self) -> str:
        return "\n".join(line.text for line in self.header)

    @property
    def content_text(self) -> str:
        return "\n".join(line.text for line in self.rows)


# ── Text primitives ─────────────────────────────────────────────


def display_width(text: str) -> int:
    """Terminal cells taken by text; East Asian wide characters take two."""
    return sum(
        2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
        for ch in text
        if not unicodedata.combining(ch)
    )


def truncate(text: str, width: int) -> str:
    out = []
    used = 0
    for ch in text:
        w = display_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


def cell(text: str, width: int) -> str:
    """Centre text in exactly ``width`` cells, truncating if too long."""
    text = truncate(text, width)
    gap = width - display_width(text)
    left = gap // 2
    return " " * left + text + " " * (gap - left)


# ── Field formatting ────────────────────────────────────────────


def describe_weather(code: str) -> str:
    return WEATHER_DESCRIPTIONS.get(code, UNKNOWN_WEATHER)


def format_hour(hour: str) -> str:
    return hour.strip().zfill(2) + ":00"


def format_measurement(value: str) -> str:
    """One decimal place, "N/A" for the missing sentinel.

    Text that does not parse as a number renders as 0.0.
    """
    if value == MISSING_SENTINEL:
        return MISSING_DISPLAY
    try:
        number = float(value.strip())
    except ValueError:
        number = 0.0
    return f"{number:.1f}"


def format_row(record: HourlyRecord, widths: ColumnWidths) -> str:
    return (
        cell(format_hour(record.hour), widths.time)
        + cell(describe_weather(record.weather_code), widths.weather)
        + cell(format_measurement(record.temperature), widths.temp)
        + cell(format_measurement(record.pressure), widths.pressure)
        + cell(record.pressure_level, widths.level)
    )


def _header_row(titles: tuple[str, ...], widths: ColumnWidths) -> str:
    sizes = (widths.time, widths.weather, widths.temp, widths.pressure, widths.level)
    return "".join(cell(t, w) for t, w in zip(titles, sizes))


# ── Tables ──────────────────────────────────────────────────────


def build_day_table(
    place_name: str, series: DaySeries, widths: ColumnWidths
) -> DayTable:
    """Header block (3 lines) and one content line per hourly record.

    An empty series yields an empty table: no header either.
    """
    if not series.hours:
        return DayTable()
    title = f"{place_name} - {series.label}" if place_name else series.label
    header = (
        FrameLine(cell(title, widths.total), LineStyle.TITLE),
        FrameLine(_header_row(COLUMN_TITLES, widths), LineStyle.TABLE_HEADER),
        FrameLine(_header_row(COLUMN_UNITS, widths), LineStyle.TABLE_HEADER),
    )
    rows = tuple(FrameLine(format_row(r, widths), LineStyle.CELL) for r in series.hours)
    return DayTable(header=header, rows=rows)


def render_forecast_text(
    forecast: ForecastSet, day_filter: DayFilter | None, widths: ColumnWidths
) -> str:
    """Plain text of every day (or the filtered one), for one-shot output."""
    days = [day_filter.day] if day_filter is not None else list(Day)
    blocks = []
    for day in days:
        table = build_day_table(forecast.place_name, forecast.day(day), widths)
        if table.is_empty:
            continue
        lines = [line.text.rstrip() for line in table.header + table.rows]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
