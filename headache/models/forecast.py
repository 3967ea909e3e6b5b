"""Forecast data models for the zutool weather-status API."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from headache.config.defaults import DAY_LABELS


class Day(IntEnum):
    YESTERDAY = 0
    TODAY = 1
    TOMORROW = 2
    DAY_AFTER_TOMORROW = 3

    @property
    def label(self) -> str:
        return DAY_LABELS[self.value]


class InvalidDayError(ValueError):
    def __init__(self, value: str):
        super().__init__(f"invalid day: {value!r}")
        self.value = value


class DayFilter(StrEnum):
    YESTERDAY = "yesterday"
    TODAY = "today"
    TOMORROW = "tomorrow"
    DAYAFTER = "dayafter"

    @property
    def day(self) -> Day:
        return _FILTER_DAYS[self]

    @classmethod
    def parse(cls, value: str | None) -> "DayFilter | None":
        """Case-insensitive lookup. Empty means no filter."""
        if value is None or value == "":
            return None
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidDayError(value) from None


_FILTER_DAYS = {
    DayFilter.YESTERDAY: Day.YESTERDAY,
    DayFilter.TODAY: Day.TODAY,
    DayFilter.TOMORROW: Day.TOMORROW,
    DayFilter.DAYAFTER: Day.DAY_AFTER_TOMORROW,
}


@dataclass(frozen=True)
class HourlyRecord:
    hour: str
    weather_code: str
    temperature: str  # numeric text or "#"
    pressure: str  # hPa, numeric text or "#"
    pressure_level: str


@dataclass(frozen=True)
class DaySeries:
    label: str
    hours: tuple[HourlyRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.hours)


@dataclass(frozen=True)
class ForecastSet:
    place_name: str
    days: tuple[DaySeries, DaySeries, DaySeries, DaySeries]
    place_id: str = ""
    prefectures_id: str = ""
    date_time: str = ""

    def __post_init__(self) -> None:
        if len(self.days) != len(Day):
            raise ValueError(f"expected {len(Day)} days, got {len(self.days)}")

    def day(self, day: Day | int) -> DaySeries:
        return self.days[int(day)]

    @classmethod
    def empty(cls, place_name: str = "") -> "ForecastSet":
        return cls(
            place_name=place_name,
            days=tuple(DaySeries(label=d.label) for d in Day),
        )
