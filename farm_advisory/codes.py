"""WMO weather-code classification: descriptions, icon buckets, backgrounds, predicates.

The description table holds the 24 codes the dashboard labelled plus the
freezing drizzle / freezing rain codes 56, 57, 66 and 67 (28 in total).
"""
from enum import Enum

WMO_DESCRIPTIONS = {
    0: "Clear Sky", 1: "Mainly Clear", 2: "Partly Cloudy", 3: "Overcast",
    45: "Foggy", 48: "Icy Fog",
    51: "Light Drizzle", 53: "Drizzle", 55: "Heavy Drizzle",
    56: "Freezing Drizzle", 57: "Heavy Freezing Drizzle",
    61: "Light Rain", 63: "Rain", 65: "Heavy Rain",
    66: "Freezing Rain", 67: "Heavy Freezing Rain",
    71: "Light Snow", 73: "Snow", 75: "Heavy Snow", 77: "Snow Grains",
    80: "Light Showers", 81: "Showers", 82: "Heavy Showers",
    85: "Snow Showers", 86: "Heavy Snow Showers",
    95: "Thunderstorm", 96: "Thunderstorm w/ Hail", 99: "Thunderstorm w/ Heavy Hail",
}

SNOW_CODES = frozenset(range(71, 78)) | {85, 86}


class IconCategory(Enum):
    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    PARTLY_CLOUDY = "partly-cloudy"
    FOG = "fog"
    DRIZZLE_RAIN = "drizzle-rain"
    SNOW = "snow"
    SHOWERS = "showers"
    STORM = "storm"


class BackgroundCategory(Enum):
    NIGHT = "night"
    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    STORM = "storm"
    SNOW = "snow"


def get_weather_description(code: int) -> str:
    return WMO_DESCRIPTIONS.get(code, "Unknown")


# ─────────────────────────────────────────────────────────────────────────────
# PREDICATES
# ─────────────────────────────────────────────────────────────────────────────

def is_storm(code: int) -> bool:
    return 95 <= code <= 99


def is_wet(code: int) -> bool:
    """Any precipitation code, snow included (drizzle through thunderstorm)."""
    return 51 <= code <= 99


def is_rain(code: int) -> bool:
    """Liquid precipitation only."""
    return is_wet(code) and code not in SNOW_CODES


def is_rainy_crop(code: int) -> bool:
    """Drizzle, rain and showers; the range crop rules treat as a rainy day."""
    return 51 <= code <= 82


def is_rain_tip(code: int) -> bool:
    """Rain and showers that warrant the generic spray-avoidance tip."""
    return 61 <= code <= 82


# ─────────────────────────────────────────────────────────────────────────────
# ICONS & BACKGROUNDS
# ─────────────────────────────────────────────────────────────────────────────

def get_icon_category(code: int, is_day: int = 1) -> IconCategory:
    if code in (0, 1):
        return IconCategory.CLEAR_DAY if is_day != 0 else IconCategory.CLEAR_NIGHT
    if code in (2, 3):
        return IconCategory.PARTLY_CLOUDY
    if 45 <= code <= 48:
        return IconCategory.FOG
    if 51 <= code <= 67:
        return IconCategory.DRIZZLE_RAIN
    if 71 <= code <= 77:
        return IconCategory.SNOW
    if 80 <= code <= 82:
        return IconCategory.SHOWERS
    if 85 <= code <= 86:
        return IconCategory.SNOW
    if is_storm(code):
        return IconCategory.STORM
    return IconCategory.CLEAR_DAY


def get_background_category(code: int, is_day: int = 1) -> BackgroundCategory:
    """Night wins over any code; otherwise the first matching bucket."""
    if is_day == 0:
        return BackgroundCategory.NIGHT
    if code in (0, 1):
        return BackgroundCategory.CLEAR
    if code in (2, 3):
        return BackgroundCategory.CLOUDY
    if is_rainy_crop(code):
        return BackgroundCategory.RAIN
    if is_storm(code):
        return BackgroundCategory.STORM
    if 71 <= code <= 86:
        return BackgroundCategory.SNOW
    return BackgroundCategory.CLEAR


def classify(code: int, is_day: int = 1) -> dict:
    return {
        "code": code,
        "description": get_weather_description(code),
        "icon": get_icon_category(code, is_day).value,
        "background": get_background_category(code, is_day).value,
        "is_rain": is_rain(code),
        "is_storm": is_storm(code),
    }
