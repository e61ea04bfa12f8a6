"""Project configuration: data sources, request policy, and service settings."""
import os
from dataclasses import dataclass, field

# ─────────────────────────────────────────────────────────────────────────────
# DEFAULT LOCATION
# ─────────────────────────────────────────────────────────────────────────────
DEFAULT_LAT = 28.6139
DEFAULT_LON = 77.2090

# ─────────────────────────────────────────────────────────────────────────────
# DATA SOURCES
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class DataSourceConfig:
    forecast_url: str = os.getenv(
        "FARM_ADVISORY_FORECAST_URL", "https://api.open-meteo.com/v1/forecast"
    )
    geocode_url: str = os.getenv(
        "FARM_ADVISORY_GEOCODE_URL", "https://nominatim.openstreetmap.org/reverse"
    )
    forecast_days: int = 7
    hourly_window: int = 24
    current_fields: list = field(default_factory=lambda: [
        "temperature_2m", "apparent_temperature", "relative_humidity_2m",
        "wind_speed_10m", "wind_direction_10m", "visibility", "weather_code",
        "is_day", "uv_index", "precipitation", "dew_point_2m",
    ])
    hourly_fields: list = field(default_factory=lambda: [
        "temperature_2m", "weather_code", "precipitation", "is_day",
    ])
    daily_fields: list = field(default_factory=lambda: [
        "temperature_2m_max", "temperature_2m_min", "weather_code",
        "precipitation_sum", "wind_speed_10m_max", "uv_index_max",
        "sunrise", "sunset",
    ])

SOURCES = DataSourceConfig()

# ─────────────────────────────────────────────────────────────────────────────
# REQUEST POLICY
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class RequestConfig:
    timeout: float = float(os.getenv("FARM_ADVISORY_TIMEOUT", "10"))
    max_retries: int = 3
    backoff_base: float = 1.0
    backoff_max: float = 30.0
    user_agent: str = "FarmAdvisory/1.0"
    language: str = "en"

REQUESTS = RequestConfig()

# ─────────────────────────────────────────────────────────────────────────────
# API CONFIG
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class APIConfig:
    host: str = os.getenv("FARM_ADVISORY_HOST", "0.0.0.0")
    port: int = int(os.getenv("FARM_ADVISORY_PORT", "8000"))
    workers: int = 2
    title: str = "Farm Advisory API"
    version: str = "1.0.0"

API = APIConfig()
