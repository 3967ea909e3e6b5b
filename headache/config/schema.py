"""Pydantic v2 configuration schema with strict validation."""

from pathlib import Path

from pydantic import BaseModel, Field


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = "https://zutool.jp/api"
    user_agent: str = "headache/0.1.0"
    timeout: float = Field(default=30.0, gt=0.0)


class ColumnWidths(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    time: int = Field(default=8, ge=1)
    weather: int = Field(default=10, ge=1)
    temp: int = Field(default=10, ge=1)
    pressure: int = Field(default=15, ge=1)
    level: int = Field(default=20, ge=1)

    @property
    def total(self) -> int:
        return self.time + self.weather + self.temp + self.pressure + self.level


class ViewportConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    default_width: int = Field(default=80, ge=1)
    default_height: int = Field(default=24, ge=1)
    # padding (2) + scroll indicator spacing (2) + footer (3)
    chrome_lines: int = Field(default=7, ge=0)
    min_visible_rows: int = Field(default=3, ge=1)
    page_step: int = Field(default=10, ge=1)
    end_sentinel: int = Field(default=999, ge=1)
    poll_interval_ms: int = Field(default=100, ge=10)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    level: str = "WARNING"
    file: Path | None = None


class AppConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    api: ApiConfig = ApiConfig()
    columns: ColumnWidths = ColumnWidths()
    viewport: ViewportConfig = ViewportConfig()
    logging: LoggingConfig = LoggingConfig()
