"""
Weather data module - Fetches Open-Meteo forecasts and turns them into snapshots.
Includes reverse geocoding for display and a synthetic snapshot generator for
running without network access.
"""

import logging
import time
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd
import requests

from .config import REQUESTS, SOURCES
from .et import round_half_up
from .models import CurrentConditions, DailySample, HourlySample, Location, WeatherSnapshot

log = logging.getLogger(__name__)


class WeatherServiceError(RuntimeError):
    """The forecast provider could not be reached or returned no usable data."""


# ─────────────────────────────────────────────────────────────────────────────
# RETRY/BACKOFF UTILITIES
# ─────────────────────────────────────────────────────────────────────────────

def exponential_backoff(attempt: int, base: float = REQUESTS.backoff_base,
                        max_delay: float = REQUESTS.backoff_max) -> float:
    """Calculate delay with exponential backoff."""
    return min(base * (2 ** attempt), max_delay)


def request_with_retry(url: str, params: dict, headers: Optional[dict] = None,
                       max_retries: int = REQUESTS.max_retries) -> Optional[dict]:
    """GET a JSON document, retrying rate limits, server errors and timeouts.

    No backoff sleep follows the last attempt.
    """
    for attempt in range(max_retries):
        last_attempt = attempt == max_retries - 1
        try:
            response = requests.get(url, params=params, headers=headers, timeout=REQUESTS.timeout)

            if response.status_code == 200:
                return response.json()
            elif response.status_code == 429 or response.status_code >= 500:
                log.warning(f"HTTP {response.status_code} from {url} (attempt {attempt+1})")
            else:
                log.error(f"HTTP {response.status_code}: {response.text[:100]}")
                return None

        except requests.exceptions.Timeout:
            log.warning(f"Timeout (attempt {attempt+1})")
        except requests.exceptions.RequestException as e:
            log.warning(f"Request failed: {e}")

        if not last_attempt:
            delay = exponential_backoff(attempt)
            log.debug(f"Waiting {delay:.1f}s before retrying {url}")
            time.sleep(delay)

    log.error(f"All {max_retries} attempts failed for {url}")
    return None


# ─────────────────────────────────────────────────────────────────────────────
# OPEN-METEO
# ─────────────────────────────────────────────────────────────────────────────

def fetch_forecast(lat: float, lon: float) -> Dict[str, Any]:
    """
    Fetch current, hourly and 7-day forecast from Open-Meteo.

    Raises:
        WeatherServiceError: when every attempt fails
    """
    params = {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(SOURCES.current_fields),
        "hourly": ",".join(SOURCES.hourly_fields),
        "daily": ",".join(SOURCES.daily_fields),
        "timezone": "auto",
        "forecast_days": SOURCES.forecast_days,
    }
    log.info(f"Fetching forecast from Open-Meteo: lat={lat}, lon={lon}")
    data = request_with_retry(SOURCES.forecast_url, params,
                              headers={"User-Agent": REQUESTS.user_agent})
    if not data or "current" not in data:
        raise WeatherServiceError(f"Weather service unavailable for ({lat}, {lon})")
    return data


def _int(value, default: int = 0) -> int:
    if value is None or pd.isna(value):
        return default
    return int(value)


def _num(value, default: float = 0.0) -> float:
    if value is None or pd.isna(value):
        return default
    return float(value)


def _rounded(value, default: float = 0.0) -> int:
    return int(round_half_up(_num(value, default)))


def _provider_now(payload: Dict[str, Any]) -> datetime:
    """Current wall-clock time in the forecast's own timezone (naive)."""
    offset = timedelta(seconds=payload.get("utc_offset_seconds", 0) or 0)
    return (datetime.now(timezone.utc) + offset).replace(tzinfo=None)


def _parse_current(cur: Dict[str, Any]) -> CurrentConditions:
    visibility_m = cur.get("visibility")
    return CurrentConditions(
        temp=_rounded(cur.get("temperature_2m")),
        feels_like=_rounded(cur.get("apparent_temperature")),
        humidity=_num(cur.get("relative_humidity_2m")),
        wind_speed=_rounded(cur.get("wind_speed_10m")),
        wind_direction=_num(cur.get("wind_direction_10m")),
        visibility=_rounded(_num(visibility_m, 10000.0) / 1000),
        weather_code=_int(cur.get("weather_code")),
        is_day=_int(cur.get("is_day"), 1),
        uv_index=_num(cur.get("uv_index")),
        precipitation=_num(cur.get("precipitation")),
        dew_point=_rounded(cur.get("dew_point_2m")),
    )


def _parse_hourly(hourly: Dict[str, Any], now: datetime, window: int) -> list:
    df = pd.DataFrame(hourly)
    if df.empty or "time" not in df:
        return []
    df["time"] = pd.to_datetime(df["time"])

    # start at the entry for the current local hour, else at the beginning
    matches = np.flatnonzero(df["time"].dt.floor("h") == pd.Timestamp(now).floor("h"))
    start = int(matches[0]) if len(matches) else 0
    df = df.iloc[start:start + window]

    return [
        HourlySample(
            time=row.time.to_pydatetime(),
            temp=_rounded(getattr(row, "temperature_2m", None)),
            weather_code=_int(getattr(row, "weather_code", None)),
            precip=_num(getattr(row, "precipitation", None)),
            is_day=_int(getattr(row, "is_day", None), 1),
        )
        for row in df.itertuples(index=False)
    ]


def _to_datetime(value) -> Optional[datetime]:
    if value is None or pd.isna(value):
        return None
    return pd.Timestamp(value).to_pydatetime()


def _parse_daily(daily: Dict[str, Any]) -> list:
    df = pd.DataFrame(daily)
    if df.empty or "time" not in df:
        return []
    df["time"] = pd.to_datetime(df["time"])
    return [
        DailySample(
            date=row.time.date(),
            temp_max=_rounded(getattr(row, "temperature_2m_max", None)),
            temp_min=_rounded(getattr(row, "temperature_2m_min", None)),
            weather_code=_int(getattr(row, "weather_code", None)),
            precip_sum=_num(getattr(row, "precipitation_sum", None)),
            wind_max=_rounded(getattr(row, "wind_speed_10m_max", None)),
            uv_index_max=_num(getattr(row, "uv_index_max", None)),
            sunrise=_to_datetime(getattr(row, "sunrise", None)),
            sunset=_to_datetime(getattr(row, "sunset", None)),
        )
        for row in df.itertuples(index=False)
    ]


def parse_forecast(payload: Dict[str, Any], location: Optional[Location] = None,
                   now: Optional[datetime] = None) -> WeatherSnapshot:
    """Convert an Open-Meteo response into a WeatherSnapshot."""
    if now is None:
        now = _provider_now(payload)
    if location is None:
        location = Location(lat=payload.get("latitude"), lon=payload.get("longitude"))

    snapshot = WeatherSnapshot(
        current=_parse_current(payload.get("current") or {}),
        hourly=_parse_hourly(payload.get("hourly") or {}, now, SOURCES.hourly_window),
        daily=_parse_daily(payload.get("daily") or {}),
        location=location,
    )
    if not snapshot.hourly or not snapshot.daily:
        log.warning(f"Sparse forecast: {len(snapshot.hourly)} hourly, {len(snapshot.daily)} daily entries")
    return snapshot


# ─────────────────────────────────────────────────────────────────────────────
# REVERSE GEOCODING
# ─────────────────────────────────────────────────────────────────────────────

def reverse_geocode(lat: float, lon: float) -> Location:
    """Place name for display; falls back to a generic label on any failure."""
    params = {"lat": lat, "lon": lon, "format": "json"}
    headers = {"Accept-Language": REQUESTS.language, "User-Agent": REQUESTS.user_agent}
    try:
        response = requests.get(SOURCES.geocode_url, params=params, headers=headers,
                                timeout=REQUESTS.timeout)
        response.raise_for_status()
        addr = response.json().get("address") or {}
    except (requests.exceptions.RequestException, ValueError) as e:
        log.warning(f"Reverse geocoding failed: {e}")
        return Location(lat=lat, lon=lon)

    city = (addr.get("city") or addr.get("town") or addr.get("village")
            or addr.get("county") or "Unknown")
    area = (addr.get("neighbourhood") or addr.get("suburb") or addr.get("quarter")
            or addr.get("district") or addr.get("state_district") or addr.get("state") or "")
    return Location(
        name=city,
        area=area if area != city else "",
        country=addr.get("country") or "",
        lat=lat,
        lon=lon,
    )


def load_snapshot(lat: float, lon: float) -> WeatherSnapshot:
    """Fetch the forecast and place name for a coordinate pair."""
    payload = fetch_forecast(lat, lon)
    location = reverse_geocode(lat, lon)
    return parse_forecast(payload, location)


# ─────────────────────────────────────────────────────────────────────────────
# SYNTHETIC DATA
# ─────────────────────────────────────────────────────────────────────────────

def _synthetic_code(rng: np.random.Generator, precip: float) -> int:
    if precip > 2:
        return 63
    if precip > 0:
        return 61
    clouds = rng.beta(2, 5) * 100
    if clouds < 20:
        return 0
    if clouds < 40:
        return 1
    return 2 if clouds < 60 else 3


def generate_synthetic_snapshot(lat: float, lon: float, start: Optional[datetime] = None,
                                hours: int = 24, days: int = 7) -> WeatherSnapshot:
    """Generate a plausible, reproducible snapshot for testing without network."""
    rng = np.random.default_rng(int(abs(lat) * 100) % 1000)
    if start is None:
        start = datetime.now().replace(minute=0, second=0, microsecond=0)

    base_temp = 30 - abs(lat) * 0.3
    day_of_year = start.timetuple().tm_yday
    seasonal = 6 * np.sin(2 * np.pi * (day_of_year - 80) / 365)

    hourly = []
    for i in range(hours):
        ts = start + timedelta(hours=i)
        temp = base_temp + seasonal + 6 * np.sin(2 * np.pi * (ts.hour - 9) / 24) + rng.normal(0, 1)
        precip = float(round(rng.exponential(2.0), 1)) if rng.random() < 0.1 else 0.0
        hourly.append(HourlySample(
            time=ts,
            temp=int(round_half_up(temp)),
            weather_code=_synthetic_code(rng, precip),
            precip=precip,
            is_day=1 if 6 <= ts.hour < 18 else 0,
        ))

    daily = []
    for d in range(days):
        day: date = (start + timedelta(days=d)).date()
        t_max = base_temp + seasonal + 6 + rng.normal(0, 1.5)
        t_min = t_max - 8 - abs(rng.normal(0, 2))
        precip_sum = float(round(rng.exponential(4.0), 1)) if rng.random() < 0.3 else 0.0
        daily.append(DailySample(
            date=day,
            temp_max=int(round_half_up(t_max)),
            temp_min=int(round_half_up(t_min)),
            weather_code=_synthetic_code(rng, precip_sum / 4),
            precip_sum=precip_sum,
            wind_max=int(round_half_up(abs(rng.normal(15, 6)))),
            uv_index_max=float(round(float(np.clip(rng.normal(7, 2), 0, 11)), 1)),
            sunrise=datetime.combine(day, datetime.min.time()) + timedelta(hours=6),
            sunset=datetime.combine(day, datetime.min.time()) + timedelta(hours=18, minutes=30),
        ))

    now = hourly[0] if hourly else None
    temp_now = now.temp if now else base_temp
    humidity = float(np.clip(70 - (temp_now - base_temp) * 2 + rng.normal(0, 5), 30, 95))
    is_day = now.is_day if now else 1
    uv = daily[0].uv_index_max * max(0.0, float(np.sin(np.pi * (start.hour - 6) / 12))) if is_day and daily else 0.0

    current = CurrentConditions(
        temp=temp_now,
        feels_like=temp_now + (2 if humidity > 70 else 0),
        humidity=round(humidity),
        wind_speed=int(round_half_up(abs(rng.normal(10, 5)))),
        wind_direction=float(round(rng.uniform(0, 360))),
        visibility=10,
        weather_code=now.weather_code if now else 0,
        is_day=is_day,
        uv_index=round(uv, 1),
        precipitation=now.precip if now else 0.0,
        dew_point=int(round_half_up(temp_now - (100 - humidity) / 5)),
    )
    return WeatherSnapshot(
        current=current,
        hourly=hourly,
        daily=daily,
        location=Location(name="Synthetic Farm", lat=lat, lon=lon),
    )
