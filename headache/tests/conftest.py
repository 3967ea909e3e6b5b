"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from headache.config.schema import AppConfig
from headache.ingest.parser import parse_forecast
from headache.models.forecast import DaySeries, ForecastSet, HourlyRecord


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": "https://test-zutool.example.com/api", "timeout": 5},
        "viewport": {"page_step": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def weather_status(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "weather_status_13101.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def forecast(weather_status: dict) -> ForecastSet:
    return parse_forecast(weather_status)


def make_forecast(
    rows_per_day: tuple[int, int, int, int] = (24, 24, 24, 24),
    place_name: str = "Chiyoda",
) -> ForecastSet:
    """Synthetic forecast with a given number of hourly rows per day."""
    labels = ("Yesterday", "Today", "Tomorrow", "Day After Tomorrow")
    days = tuple(
        DaySeries(
            label=label,
            hours=tuple(
                HourlyRecord(
                    hour=str(h % 24),
                    weather_code="100",
                    temperature=f"{20 + d}.{h % 10}",
                    pressure="1013.2",
                    pressure_level=str(h % 4),
                )
                for h in range(count)
            ),
        )
        for d, (label, count) in enumerate(zip(labels, rows_per_day))
    )
    return ForecastSet(place_name=place_name, days=days)


@pytest.fixture
def forecast_factory():
    return make_forecast
