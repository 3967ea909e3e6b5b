"""Messages posted by the background fetch into the event loop."""

from dataclasses import dataclass
from typing import TypeAlias

from headache.models.forecast import ForecastSet


@dataclass(frozen=True)
class FetchSucceeded:
    forecast: ForecastSet


@dataclass(frozen=True)
class FetchFailed:
    error: Exception


FetchOutcome: TypeAlias = FetchSucceeded | FetchFailed
