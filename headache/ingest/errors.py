"""Errors raised while fetching and decoding the weather-status document."""


class FetchError(Exception):
    """Base class for anything that stops forecast data from arriving."""


class TransportError(FetchError):
    """Network failure or non-success HTTP status."""


class ForecastParseError(FetchError):
    """The response body is not a JSON object."""
