"""Curses shell: event loop, key bindings and full-frame drawing.

One thread runs the loop; the background fetch only talks to it through
the outbox queue, which is drained between key reads.
"""

import curses
import logging
import queue
import textwrap
from enum import StrEnum
from typing import Any

from headache.config.schema import AppConfig
from headache.ingest.fetch_task import FetchTask
from headache.ingest.zutool_client import ZutoolClient
from headache.models.events import FetchFailed, FetchOutcome, FetchSucceeded
from headache.render.layout import LineStyle, truncate
from headache.tui.viewport import RenderedFrame, ViewportController

logger = logging.getLogger(__name__)

# Curses colour-pair IDs
C_BORDER = 1
C_TITLE = 2
C_HEADER = 3
C_ERROR = 4
C_LOADING = 5
C_FOOTER = 6
C_INDICATOR = 7

PAD_X = 2
FOOTER_MAX_ROWS = 2
CTRL_C = 3


class Action(StrEnum):
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    DAY_LEFT = "day_left"
    DAY_RIGHT = "day_right"
    QUIT = "quit"


KEY_BINDINGS: dict[int, Action] = {
    curses.KEY_UP: Action.SCROLL_UP,
    ord("k"): Action.SCROLL_UP,
    curses.KEY_DOWN: Action.SCROLL_DOWN,
    ord("j"): Action.SCROLL_DOWN,
    curses.KEY_LEFT: Action.DAY_LEFT,
    ord("h"): Action.DAY_LEFT,
    curses.KEY_RIGHT: Action.DAY_RIGHT,
    ord("l"): Action.DAY_RIGHT,
    curses.KEY_HOME: Action.HOME,
    curses.KEY_END: Action.END,
    curses.KEY_PPAGE: Action.PAGE_UP,
    curses.KEY_NPAGE: Action.PAGE_DOWN,
    ord("q"): Action.QUIT,
    CTRL_C: Action.QUIT,
}

WHEEL_UP = curses.BUTTON4_PRESSED
WHEEL_DOWN = getattr(curses, "BUTTON5_PRESSED", 0)


def mouse_action(bstate: int) -> Action | None:
    if bstate & WHEEL_UP:
        return Action.SCROLL_UP
    if WHEEL_DOWN and bstate & WHEEL_DOWN:
        return Action.SCROLL_DOWN
    return None


class Application:
    def __init__(
        self,
        controller: ViewportController,
        outbox: "queue.Queue[FetchOutcome]",
    ):
        self.controller = controller
        self.outbox = outbox

    # ── Dispatch ────────────────────────────────────────────────

    def handle_action(self, action: Action) -> bool:
        """Apply one user action. Returns False when the program should exit."""
        c = self.controller
        match action:
            case Action.QUIT:
                return False
            case Action.SCROLL_UP:
                c.on_scroll_up()
            case Action.SCROLL_DOWN:
                c.on_scroll_down()
            case Action.PAGE_UP:
                c.on_page_up()
            case Action.PAGE_DOWN:
                c.on_page_down()
            case Action.HOME:
                c.on_scroll_home()
            case Action.END:
                c.on_scroll_end()
            case Action.DAY_LEFT:
                c.on_day_left()
            case Action.DAY_RIGHT:
                c.on_day_right()
        return True

    def handle_resize(self, width: int, height: int) -> None:
        self.controller.on_resize(width, height)

    def handle_outcome(self, outcome: FetchOutcome) -> None:
        match outcome:
            case FetchSucceeded(forecast=forecast):
                self.controller.on_data_loaded(forecast)
            case FetchFailed(error=error):
                self.controller.on_fetch_failed(error)
            case _:
                raise TypeError(f"unexpected fetch outcome: {outcome!r}")

    def drain_outbox(self) -> bool:
        """Apply every posted fetch outcome. Returns True if any arrived."""
        handled = False
        while True:
            try:
                outcome = self.outbox.get_nowait()
            except queue.Empty:
                return handled
            self.handle_outcome(outcome)
            handled = True

    def frame(self) -> RenderedFrame:
        return self.controller.render()

    # ── Curses loop ─────────────────────────────────────────────

    def run(self, stdscr: "curses.window") -> None:
        _init_colors()
        _try(curses.curs_set, 0)
        stdscr.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        curses.mouseinterval(0)
        stdscr.timeout(self.controller.config.viewport.poll_interval_ms)

        max_y, max_x = stdscr.getmaxyx()
        self.handle_resize(max_x, max_y)
        draw_frame(stdscr, self.frame())

        while True:
            key = stdscr.getch()
            dirty = self.drain_outbox()

            if key == curses.KEY_RESIZE:
                max_y, max_x = stdscr.getmaxyx()
                self.handle_resize(max_x, max_y)
                dirty = True
            elif key != -1:
                action = self._read_action(key)
                if action is not None:
                    if not self.handle_action(action):
                        return
                    dirty = True

            if dirty:
                draw_frame(stdscr, self.frame())

    @staticmethod
    def _read_action(key: int) -> Action | None:
        if key == curses.KEY_MOUSE:
            try:
                _, _, _, _, bstate = curses.getmouse()
            except curses.error:
                return None
            return mouse_action(bstate)
        return KEY_BINDINGS.get(key)


# ── Drawing ─────────────────────────────────────────────────────


def _init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(C_BORDER, curses.COLOR_BLUE, -1)
    curses.init_pair(C_TITLE, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(C_HEADER, curses.COLOR_CYAN, -1)
    curses.init_pair(C_ERROR, curses.COLOR_RED, -1)
    curses.init_pair(C_LOADING, curses.COLOR_BLUE, -1)
    curses.init_pair(C_FOOTER, curses.COLOR_CYAN, -1)
    curses.init_pair(C_INDICATOR, curses.COLOR_YELLOW, -1)


def _style_attr(style: LineStyle) -> int:
    match style:
        case LineStyle.TITLE:
            return curses.color_pair(C_TITLE) | curses.A_BOLD
        case LineStyle.TABLE_HEADER:
            return curses.color_pair(C_HEADER) | curses.A_BOLD
        case LineStyle.ERROR:
            return curses.color_pair(C_ERROR) | curses.A_BOLD
        case LineStyle.LOADING:
            return curses.color_pair(C_LOADING) | curses.A_BOLD
        case LineStyle.FOOTER:
            return curses.color_pair(C_FOOTER)
        case LineStyle.INDICATOR:
            return curses.color_pair(C_INDICATOR)
        case _:
            return curses.A_NORMAL


def _try(fn: Any, *args: Any) -> None:
    """Call a curses function that some terminals do not support."""
    try:
        fn(*args)
    except curses.error:
        logger.debug("curses call %s%r unsupported", getattr(fn, "__name__", fn), args)


def _safe(win: "curses.window", *args: Any) -> None:
    """addstr wrapper for writes that touch the last screen cell."""
    try:
        win.addstr(*args)
    except curses.error:
        pass


def draw_frame(stdscr: "curses.window", frame: RenderedFrame) -> None:
    """Full redraw: border box, then the frame lines top to bottom.

    Lines are truncated to the inner width, except the footer, which may
    wrap onto a second row.
    """
    stdscr.erase()
    max_y, max_x = stdscr.getmaxyx()
    if max_y >= 3 and max_x >= 3:
        stdscr.attron(curses.color_pair(C_BORDER))
        _try(stdscr.box)
        stdscr.attroff(curses.color_pair(C_BORDER))

    inner_w = max_x - 2 * (PAD_X + 1)
    last_row = max_y - 2
    if inner_w <= 0:
        stdscr.refresh()
        return
    y = 1
    for line in frame.lines:
        if line.style is LineStyle.FOOTER:
            pieces = textwrap.wrap(line.text, inner_w)[:FOOTER_MAX_ROWS]
        else:
            pieces = [truncate(line.text, inner_w)]
        for piece in pieces:
            if y > last_row:
                stdscr.refresh()
                return
            if piece:
                _safe(stdscr, y, PAD_X + 1, piece, _style_attr(line.style))
            y += 1
    stdscr.refresh()


def run_interactive(
    config: AppConfig,
    area_code: str,
    day_option: str | None = None,
    client: ZutoolClient | None = None,
) -> None:
    """Start the fetch in the background and run the curses UI until quit.

    Raises curses.error if the terminal cannot be initialised.
    """
    if client is None:
        client = ZutoolClient(
            base_url=config.api.base_url,
            user_agent=config.api.user_agent,
            timeout=config.api.timeout,
        )
    outbox: queue.Queue[FetchOutcome] = queue.Queue()
    controller = ViewportController(config, day_option)
    app = Application(controller, outbox)

    FetchTask(client, area_code, outbox).start()
    try:
        curses.wrapper(app.run)
    except KeyboardInterrupt:
        logger.info("Interrupted")
