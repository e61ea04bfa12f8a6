"""
Weather snapshot and advisory value objects.

A WeatherSnapshot is produced once per refresh by the fetch layer and is read,
never written, by every advisory function. Advisory results are plain frozen
dataclasses built fresh on each call.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


# ─────────────────────────────────────────────────────────────────────────────
# WEATHER SNAPSHOT
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Location:
    """Display-only place metadata."""
    name: str = "Your Location"
    area: str = ""
    country: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "area": self.area,
            "country": self.country,
            "lat": self.lat,
            "lon": self.lon,
        }


@dataclass(frozen=True)
class CurrentConditions:
    temp: float
    feels_like: float
    humidity: float  # %
    wind_speed: float  # km/h
    weather_code: int
    wind_direction: float = 0.0  # degrees
    visibility: float = 10.0  # km
    is_day: int = 1
    uv_index: float = 0.0
    precipitation: float = 0.0  # mm/h
    dew_point: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temp": self.temp,
            "feels_like": self.feels_like,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "visibility": self.visibility,
            "weather_code": self.weather_code,
            "is_day": self.is_day,
            "uv_index": self.uv_index,
            "precipitation": self.precipitation,
            "dew_point": self.dew_point,
        }


@dataclass(frozen=True)
class HourlySample:
    time: datetime  # provider local time
    temp: float
    weather_code: int
    precip: float = 0.0
    is_day: int = 1

    @property
    def hour(self) -> int:
        return self.time.hour

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time.isoformat(),
            "temp": self.temp,
            "weather_code": self.weather_code,
            "precip": self.precip,
            "is_day": self.is_day,
        }


@dataclass(frozen=True)
class DailySample:
    date: date
    temp_max: float
    temp_min: float
    weather_code: int
    precip_sum: float = 0.0
    wind_max: float = 0.0
    uv_index_max: float = 0.0
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "temp_max": self.temp_max,
            "temp_min": self.temp_min,
            "weather_code": self.weather_code,
            "precip_sum": self.precip_sum,
            "wind_max": self.wind_max,
            "uv_index_max": self.uv_index_max,
            "sunrise": self.sunrise.isoformat() if self.sunrise else None,
            "sunset": self.sunset.isoformat() if self.sunset else None,
        }


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Current conditions plus the hourly (index 0 = now) and daily
    (index 0 = today) series for one refresh cycle.

    Sequences are stored as tuples so a snapshot can be shared freely
    between threads.
    """
    current: CurrentConditions
    hourly: Tuple[HourlySample, ...] = ()
    daily: Tuple[DailySample, ...] = ()
    location: Location = field(default_factory=Location)

    def __post_init__(self):
        object.__setattr__(self, "hourly", tuple(self.hourly))
        object.__setattr__(self, "daily", tuple(self.daily))

    @property
    def today(self) -> Optional[DailySample]:
        return self.daily[0] if self.daily else None

    def precip_sums(self, days: int) -> Sequence[float]:
        return [d.precip_sum for d in self.daily[:days]]

    def max_precip(self, days: int = 3) -> float:
        """Largest daily precipitation sum over the first `days` days (0 if none)."""
        return max(self.precip_sums(days), default=0.0)

    def recent_rain(self, days: int = 2) -> float:
        return sum(self.precip_sums(days))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location.to_dict(),
            "current": self.current.to_dict(),
            "hourly": [h.to_dict() for h in self.hourly],
            "daily": [d.to_dict() for d in self.daily],
        }


# ─────────────────────────────────────────────────────────────────────────────
# ADVISORY VALUE OBJECTS
# ─────────────────────────────────────────────────────────────────────────────

class Severity(Enum):
    """How urgently a crop precaution needs attention."""
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class FarmingTip:
    icon: str
    message: str
    color_class: str

    def to_dict(self) -> Dict[str, Any]:
        return {"icon": self.icon, "message": self.message, "color_class": self.color_class}


@dataclass(frozen=True)
class SprayWindow:
    safe: bool
    label: str
    reason: str
    windows: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "safe": self.safe,
            "label": self.label,
            "reason": self.reason,
            "windows": list(self.windows),
        }


@dataclass(frozen=True)
class IrrigationNeed:
    score: int  # 0-10
    label: str
    et_mm: float
    detail: str
    color_class: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label,
            "et0_mm": self.et_mm,
            "detail": self.detail,
            "color_class": self.color_class,
        }


@dataclass(frozen=True)
class PestRisk:
    fungal_score: int
    insect_score: int
    fungal_label: str
    insect_label: str
    fungal_detail: str
    insect_detail: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fungal": {
                "score": self.fungal_score,
                "label": self.fungal_label,
                "detail": self.fungal_detail,
            },
            "insect": {
                "score": self.insect_score,
                "label": self.insect_label,
                "detail": self.insect_detail,
            },
        }


@dataclass(frozen=True)
class CropPrecaution:
    icon: str
    title: str
    detail: str
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "icon": self.icon,
            "title": self.title,
            "detail": self.detail,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class WorkWindow:
    hour_label: str
    score: int
    reason_tags: Tuple[str, ...] = ()

    @property
    def reason(self) -> str:
        if not self.reason_tags:
            return "ideal"
        return "(" + ", ".join(self.reason_tags) + ")"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hour": self.hour_label,
            "score": self.score,
            "reason": self.reason,
            "tags": list(self.reason_tags),
        }


@dataclass(frozen=True)
class CropProfile:
    id: str
    name: str
    emoji: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "emoji": self.emoji}
