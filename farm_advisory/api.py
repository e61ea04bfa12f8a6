"""FastAPI service for weather-driven farm advisories."""
import datetime as dt
import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from .codes import classify
from .config import API
from .crops import CROPS, CROPS_BY_ID
from .models import CurrentConditions, DailySample, HourlySample, Location, WeatherSnapshot
from .report import build_report
from .weather import WeatherServiceError, load_snapshot

logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)

app = FastAPI(
    title=API.title,
    description="Spray, irrigation, pest and crop advisories from a 7-day forecast",
    version=API.version,
)

# ─────────────────────────────────────────────────────────────────────────────
# MODELS
# ─────────────────────────────────────────────────────────────────────────────

class LocationInput(BaseModel):
    name: str = "Your Location"
    area: str = ""
    country: str = ""
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lon: Optional[float] = Field(None, ge=-180, le=180)


class CurrentInput(BaseModel):
    temp: float
    feels_like: float
    humidity: float = Field(..., ge=0, le=100, description="Relative humidity (%)")
    wind_speed: float = Field(..., ge=0, description="Wind speed (km/h)")
    weather_code: int = Field(..., ge=0, description="WMO weather code")
    wind_direction: float = 0.0
    visibility: float = 10.0
    is_day: int = Field(1, ge=0, le=1)
    uv_index: float = Field(0.0, ge=0)
    precipitation: float = Field(0.0, ge=0)
    dew_point: float = 0.0


class HourlyInput(BaseModel):
    time: dt.datetime
    temp: float
    weather_code: int = 0
    precip: float = Field(0.0, ge=0)
    is_day: int = Field(1, ge=0, le=1)


class DailyInput(BaseModel):
    date: dt.date
    temp_max: float
    temp_min: float
    weather_code: int = 0
    precip_sum: float = Field(0.0, ge=0)
    wind_max: float = 0.0
    uv_index_max: float = 0.0
    sunrise: Optional[dt.datetime] = None
    sunset: Optional[dt.datetime] = None


class SnapshotRequest(BaseModel):
    current: CurrentInput
    hourly: List[HourlyInput] = Field(..., min_length=1)
    daily: List[DailyInput] = Field(..., min_length=1)
    location: LocationInput = Field(default_factory=LocationInput)
    crop: Optional[str] = Field(None, description="Crop id from /api/v1/crops")

    def to_snapshot(self) -> WeatherSnapshot:
        return WeatherSnapshot(
            current=CurrentConditions(**self.current.model_dump()),
            hourly=[HourlySample(**h.model_dump()) for h in self.hourly],
            daily=[DailySample(**d.model_dump()) for d in self.daily],
            location=Location(**self.location.model_dump()),
        )


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str


def _check_crop(crop: Optional[str]):
    if crop is not None and crop not in CROPS_BY_ID:
        raise HTTPException(404, f"Crop '{crop}' not found")


def _utc_stamp() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


# ─────────────────────────────────────────────────────────────────────────────
# ENDPOINTS
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": API.version, "timestamp": _utc_stamp()}


@app.get("/api/v1/crops")
async def list_crops():
    """List crops that have precaution rules."""
    return {"crops": [c.to_dict() for c in CROPS]}


@app.get("/api/v1/weather-codes/{code}")
async def describe_code(code: int, is_day: int = Query(1, ge=0, le=1)):
    """Description, icon and background buckets for a WMO code."""
    return classify(code, is_day)


@app.get("/api/v1/advisory")
def advisory_for_location(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    crop: Optional[str] = Query(None),
):
    """Fetch the forecast for a location and return the full advisory report."""
    _check_crop(crop)
    try:
        snapshot = load_snapshot(lat, lon)
    except WeatherServiceError as e:
        log.error(f"Forecast fetch failed: {e}")
        raise HTTPException(503, "Weather service unavailable")
    return build_report(snapshot, crop).to_dict()


@app.post("/api/v1/advisory")
async def advisory_for_snapshot(request: SnapshotRequest):
    """Advisory report for a caller-supplied forecast snapshot."""
    _check_crop(request.crop)
    return build_report(request.to_snapshot(), request.crop).to_dict()


# ─────────────────────────────────────────────────────────────────────────────
# RUN SERVER
# ─────────────────────────────────────────────────────────────────────────────

def run_server():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "farm_advisory.api:app",
        host=API.host,
        port=API.port,
        workers=API.workers,
    )


if __name__ == "__main__":
    run_server()
