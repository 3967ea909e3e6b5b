"""zutool weather-status API client."""

import json
import logging

import httpx

from headache.ingest.errors import ForecastParseError, TransportError

logger = logging.getLogger(__name__)

ZUTOOL_BASE_URL = "https://zutool.jp/api"
DEFAULT_USER_AGENT = "headache/0.1.0"


class ZutoolClient:
    def __init__(
        self,
        base_url: str = ZUTOOL_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def get_weather_status(self, area_code: str) -> dict:
        """Fetch the pressure/weather document for one area code.

        A single attempt; failures are reported, never retried.
        """
        if not area_code:
            raise ValueError("area code is required")
        url = f"{self.base_url}/getweatherstatus/{area_code}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("zutool API error for area=%s: %s", area_code, e)
            raise TransportError(
                f"server returned {e.response.status_code} for {url}"
            ) from e
        except httpx.RequestError as e:
            logger.error("zutool request failed for area=%s: %s", area_code, e)
            raise TransportError(f"error making GET request: {e}") from e

        try:
            data = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ForecastParseError(f"error parsing JSON: {e}") from e
        if not isinstance(data, dict):
            raise ForecastParseError(
                f"error parsing JSON: expected an object, got {type(data).__name__}"
            )
        return data
