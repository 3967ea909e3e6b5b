"""Viewport state machine for the interactive forecast table.

The controller owns the only mutable state in the program: scroll
position, selected day, terminal size and the loading/error flags. Every
operation replaces ``self.state`` with a new frozen ``ViewportState`` and
returns it.

Scrolling down is clamped in two steps. Operations only apply the lower
bound (0); the upper bound depends on the terminal height and on how many
rows the active day has, so ``render`` resolves it and writes the clamped
offset back. "Jump to end" therefore just requests a very large offset.
"""

from dataclasses import dataclass, replace

from headache.config.schema import AppConfig
from headache.models.forecast import Day, DayFilter, ForecastSet, InvalidDayError
from headache.render.layout import (
    INVALID_DAY_MESSAGE,
    DayTable,
    FrameLine,
    LineStyle,
    build_day_table,
)

NAV_FOOTER = (
    "←/→: Change day  ↑/↓/Mouse wheel: Scroll  PgUp/PgDn: Scroll faster  "
    "Home/End: Jump to top/bottom  q: Quit"
)
FILTERED_FOOTER = (
    "↑/↓/Mouse wheel: Scroll  PgUp/PgDn: Scroll faster  "
    "Home/End: Jump to top/bottom  q: Quit"
)
MORE_ABOVE = "↑ More above"
MORE_BELOW = "↓ More below"
HEADER_LINES_PER_DAY = 3


@dataclass(frozen=True)
class ViewportState:
    terminal_width: int
    terminal_height: int
    day_filter: DayFilter | None = None
    invalid_day: str | None = None
    current_day_index: int = Day.TODAY
    scroll_offset: int = 0
    loading: bool = True
    error: Exception | None = None
    forecast: ForecastSet | None = None

    @property
    def navigable(self) -> bool:
        return self.day_filter is None and self.invalid_day is None

    @property
    def active_day(self) -> Day:
        if self.day_filter is not None:
            return self.day_filter.day
        return Day(self.current_day_index)


@dataclass(frozen=True)
class RenderedFrame:
    lines: tuple[FrameLine, ...]
    visible_height: int = 0
    max_scroll: int = 0

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


class ViewportController:
    def __init__(self, config: AppConfig, day_option: str | None = None):
        self.config = config
        vp = config.viewport
        try:
            day_filter = DayFilter.parse(day_option)
            invalid_day = None
        except InvalidDayError as e:
            day_filter = None
            invalid_day = e.value
        self.state = ViewportState(
            terminal_width=vp.default_width,
            terminal_height=vp.default_height,
            day_filter=day_filter,
            invalid_day=invalid_day,
            current_day_index=day_filter.day if day_filter else Day.TODAY,
        )

    def _set(self, **changes) -> ViewportState:
        self.state = replace(self.state, **changes)
        return self.state

    # ── Events ──────────────────────────────────────────────────

    def on_resize(self, width: int, height: int) -> ViewportState:
        return self._set(terminal_width=width, terminal_height=height)

    def on_scroll_up(self, n: int = 1) -> ViewportState:
        return self._set(scroll_offset=max(0, self.state.scroll_offset - n))

    def on_scroll_down(self, n: int = 1) -> ViewportState:
        return self._set(scroll_offset=self.state.scroll_offset + n)

    def on_page_up(self) -> ViewportState:
        return self.on_scroll_up(self.config.viewport.page_step)

    def on_page_down(self) -> ViewportState:
        return self.on_scroll_down(self.config.viewport.page_step)

    def on_scroll_home(self) -> ViewportState:
        return self._set(scroll_offset=0)

    def on_scroll_end(self) -> ViewportState:
        return self._set(scroll_offset=self.config.viewport.end_sentinel)

    def on_day_left(self) -> ViewportState:
        return self._move_day(-1)

    def on_day_right(self) -> ViewportState:
        return self._move_day(+1)

    def _move_day(self, step: int) -> ViewportState:
        if not self.state.navigable:
            return self.state
        index = min(
            max(self.state.current_day_index + step, Day.YESTERDAY),
            Day.DAY_AFTER_TOMORROW,
        )
        if index == self.state.current_day_index:
            return self.state
        return self._set(current_day_index=index, scroll_offset=0)

    def on_data_loaded(self, forecast: ForecastSet) -> ViewportState:
        if self.state.error is not None:
            return self.state
        return self._set(loading=False, forecast=forecast)

    def on_fetch_failed(self, error: Exception) -> ViewportState:
        return self._set(loading=False, error=error, forecast=None)

    # ── Rendering ───────────────────────────────────────────────

    def active_table(self) -> DayTable:
        forecast = self.state.forecast or ForecastSet.empty()
        series = forecast.day(self.state.active_day)
        return build_day_table(forecast.place_name, series, self.config.columns)

    def render(self) -> RenderedFrame:
        state = self.state
        if state.error is not None:
            return RenderedFrame(
                (FrameLine(f"Error: {state.error}", LineStyle.ERROR),)
            )
        if state.loading:
            return RenderedFrame(
                (
                    FrameLine("Loading weather data...", LineStyle.LOADING),
                    FrameLine("Please wait", LineStyle.LOADING),
                )
            )

        if state.invalid_day is not None:
            header: tuple[FrameLine, ...] = ()
            rows: tuple[FrameLine, ...] = (
                FrameLine(INVALID_DAY_MESSAGE, LineStyle.ERROR),
            )
        else:
            table = self.active_table()
            header, rows = table.header, table.rows

        vp = self.config.viewport
        header_count = 1 if header else 0
        visible_height = max(
            vp.min_visible_rows,
            state.terminal_height - header_count * HEADER_LINES_PER_DAY - vp.chrome_lines,
        )
        max_scroll = max(0, len(rows) - visible_height)
        if len(rows) <= visible_height:
            visible_height = len(rows)

        offset = min(max(state.scroll_offset, 0), max_scroll)
        if offset != state.scroll_offset:
            self._set(scroll_offset=offset)

        indicator = scroll_indicator(offset, max_scroll)
        lines: list[FrameLine] = []
        if indicator:
            lines.append(FrameLine(indicator, LineStyle.INDICATOR))
            lines.append(FrameLine("", LineStyle.BLANK))
        lines.extend(header)
        lines.extend(rows[offset : offset + visible_height])
        lines.append(FrameLine("", LineStyle.BLANK))
        footer = NAV_FOOTER if state.navigable else FILTERED_FOOTER
        lines.append(FrameLine(footer, LineStyle.FOOTER))
        return RenderedFrame(tuple(lines), visible_height, max_scroll)


def scroll_indicator(offset: int, max_scroll: int) -> str:
    parts = []
    if offset > 0:
        parts.append(MORE_ABOVE)
    if offset < max_scroll:
        parts.append(MORE_BELOW)
    return " | ".join(parts)
