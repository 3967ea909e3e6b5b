"""One-shot background fetch that reports back through a queue."""

import logging
import queue
import threading

from headache.ingest.errors import FetchError
from headache.ingest.parser import parse_forecast
from headache.ingest.zutool_client import ZutoolClient
from headache.models.events import FetchFailed, FetchOutcome, FetchSucceeded

logger = logging.getLogger(__name__)


class FetchTask:
    """Fetches and parses one area's forecast, then posts a single outcome.

    The task is started at most once, is not cancellable and does not
    retry. The outbox is the only thing it shares with the event loop;
    it is needed only when the task runs in the background.
    """

    def __init__(
        self,
        client: ZutoolClient,
        area_code: str,
        outbox: "queue.Queue[FetchOutcome] | None" = None,
    ):
        self.client = client
        self.area_code = area_code
        self.outbox = outbox
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("fetch task already started")
        if self.outbox is None:
            raise RuntimeError("background fetch needs an outbox")
        self._thread = threading.Thread(
            target=self._post, name="forecast-fetch", daemon=True
        )
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def run(self) -> FetchOutcome:
        """Fetch synchronously and return the outcome without posting it."""
        logger.info("Fetching forecast for area=%s", self.area_code)
        try:
            raw = self.client.get_weather_status(self.area_code)
            forecast = parse_forecast(raw)
        except (FetchError, ValueError) as e:
            logger.error("Forecast fetch failed for area=%s: %s", self.area_code, e)
            return FetchFailed(e)
        except Exception as e:
            logger.exception("Unexpected error fetching area=%s", self.area_code)
            return FetchFailed(e)
        logger.info(
            "Fetched forecast for %s (%s hourly rows)",
            forecast.place_name or self.area_code,
            "/".join(str(len(d)) for d in forecast.days),
        )
        return FetchSucceeded(forecast)

    def _post(self) -> None:
        self.outbox.put(self.run())
