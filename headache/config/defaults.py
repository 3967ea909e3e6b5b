"""Fixed lookup tables for the zutool weather-status API."""

WEATHER_DESCRIPTIONS: dict[str, str] = {
    "100": "Sunny",
    "200": "Cloudy",
    "300": "Rainy",
}
UNKNOWN_WEATHER = "Unknown"

# Upstream marks a missing measurement with this value.
MISSING_SENTINEL = "#"
MISSING_DISPLAY = "N/A"

DAY_LABELS: tuple[str, ...] = (
    "Yesterday",
    "Today",
    "Tomorrow",
    "Day After Tomorrow",
)

# The API spells the tomorrow key both ways depending on the response.
DAY_KEYS: tuple[tuple[str, ...], ...] = (
    ("yesterday",),
    ("today",),
    ("tomorrow", "tommorow"),
    ("dayaftertomorrow",),
)

AREA_CODE_HELP_URL = "https://geoshape.ex.nii.ac.jp/ka/resource/"
