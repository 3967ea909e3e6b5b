"""CLI entry point for the low-pressure headache forecast viewer."""

import argparse
import curses
import logging
import sys
from pathlib import Path

from headache.config.defaults import AREA_CODE_HELP_URL
from headache.config.loader import load_config, with_overrides
from headache.config.schema import AppConfig
from headache.ingest.fetch_task import FetchTask
from headache.ingest.zutool_client import ZutoolClient
from headache.models.events import FetchFailed, FetchSucceeded
from headache.models.forecast import DayFilter, InvalidDayError
from headache.render.layout import INVALID_DAY_MESSAGE, render_forecast_text
from headache.tui.app import run_interactive

logger = logging.getLogger(__name__)

USAGE = f"""Usage:  headache <area_code> [-day <day>]

Options:
  -day: yesterday, today, tomorrow, or dayafter

Please visit {AREA_CODE_HELP_URL} to find the appropriate area code."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="headache",
        description="Barometric pressure forecast for a Japanese area code",
    )
    parser.add_argument("area_code", nargs="?", help="Area code to query")
    parser.add_argument(
        "-day",
        "--day",
        dest="day",
        default="",
        help="Filter output by day (yesterday, today, tomorrow, dayafter)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Config YAML path")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the forecast and exit instead of opening the viewer",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs here")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE)
        return 0

    args = build_parser().parse_args(argv)
    if args.area_code is None or not args.area_code.strip():
        print("Error: Area code is required")
        return 0

    config = load_config(args.config)
    if args.log_file is not None:
        config = with_overrides(config, logging={"file": args.log_file})
    _setup_logging(config, interactive=not args.once)

    if args.once:
        return _cmd_once(config, args.area_code.strip(), args.day)

    try:
        run_interactive(config, args.area_code.strip(), args.day)
    except curses.error as e:
        logger.error("Terminal initialisation failed: %s", e)
        print(f"Error running program: {e}")
        return 1
    return 0


def _setup_logging(config: AppConfig, interactive: bool) -> None:
    level = getattr(logging, config.logging.level.upper(), logging.WARNING)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if config.logging.file is not None:
        logging.basicConfig(level=level, format=fmt, filename=str(config.logging.file))
    elif interactive:
        # Anything written to the terminal would corrupt the full-screen frame.
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])
    else:
        logging.basicConfig(level=level, format=fmt)


def _cmd_once(config: AppConfig, area_code: str, day: str) -> int:
    try:
        day_filter = DayFilter.parse(day)
    except InvalidDayError:
        print(INVALID_DAY_MESSAGE)
        return 0

    client = ZutoolClient(
        base_url=config.api.base_url,
        user_agent=config.api.user_agent,
        timeout=config.api.timeout,
    )
    match FetchTask(client, area_code).run():
        case FetchSucceeded(forecast=forecast):
            text = render_forecast_text(forecast, day_filter, config.columns)
            print(text if text else "No forecast data available")
            return 0
        case FetchFailed(error=error):
            print(f"Error: {error}")
            return 0
