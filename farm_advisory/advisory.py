"""Generate agronomic advisories from a weather snapshot.

Every function here is a pure read of the snapshot: same input, same output,
no I/O and no shared state.
"""
import logging
from typing import Callable, List, Tuple

from .codes import is_rain_tip, is_storm, is_wet
from .display import clock_label
from .et import compute_et0_mm, round_half_up
from .models import (
    CurrentConditions, FarmingTip, IrrigationNeed, PestRisk, SprayWindow, WeatherSnapshot,
)

log = logging.getLogger(__name__)

SCORE_MIN, SCORE_MAX = 0, 10


def clamp_score(score: float) -> int:
    return int(max(SCORE_MIN, min(SCORE_MAX, score)))


# ─────────────────────────────────────────────────────────────────────────────
# GENERIC FARMING TIP
# ─────────────────────────────────────────────────────────────────────────────

TipRule = Tuple[Callable[[CurrentConditions, float], bool], FarmingTip]

# Order matters: a storm also satisfies the rain range, dry air can be windy, ...
FARMING_TIP_RULES: List[TipRule] = [
    (lambda c, p: is_storm(c.weather_code),
     FarmingTip("⚡", "Thunderstorm alert! Stay indoors, secure farm equipment and livestock.",
                "text-purple-600 bg-purple-50 border-purple-200")),
    (lambda c, p: is_rain_tip(c.weather_code),
     FarmingTip("🌧️", "Rain expected. Avoid spraying pesticides. Check drainage in fields.",
                "text-blue-600 bg-blue-50 border-blue-200")),
    (lambda c, p: p < 1 and c.humidity < 40,
     FarmingTip("💧", "Dry conditions ahead. Irrigate crops and mulch soil to retain moisture.",
                "text-orange-600 bg-orange-50 border-orange-200")),
    (lambda c, p: c.wind_speed > 30,
     FarmingTip("💨", "High winds today. Avoid aerial spraying. Stake tall plants if needed.",
                "text-teal-600 bg-teal-50 border-teal-200")),
    (lambda c, p: c.uv_index >= 8,
     FarmingTip("☀️", "Intense UV today. Best to work in early morning or after 4PM.",
                "text-yellow-600 bg-yellow-50 border-yellow-200")),
    (lambda c, p: c.humidity > 85,
     FarmingTip("🍄", "High humidity — watch for fungal diseases on crops. Improve ventilation.",
                "text-green-600 bg-green-50 border-green-200")),
]

FAVOURABLE_TIP = FarmingTip(
    "🌱", "Good conditions for field work. Ideal time to water, weed, or transplant.",
    "text-emerald-600 bg-emerald-50 border-emerald-200",
)


def get_farming_tip(snapshot: WeatherSnapshot) -> FarmingTip:
    """Pick the single most pressing generic tip; first matching rule wins."""
    current = snapshot.current
    max_precip = snapshot.max_precip(3)
    for predicate, tip in FARMING_TIP_RULES:
        if predicate(current, max_precip):
            return tip
    return FAVOURABLE_TIP


# ─────────────────────────────────────────────────────────────────────────────
# SPRAY ADVISORY
# ─────────────────────────────────────────────────────────────────────────────

SPRAY_MAX_WIND_KMH = 20
SPRAY_SAFE_WIND_KMH = 15
SPRAY_SCAN_HOURS = 14
SPRAY_MORNING_LAST_HOUR = 9
SPRAY_EVENING_FIRST_HOUR = 17


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def find_calm_windows(snapshot: WeatherSnapshot) -> List[str]:
    """Dry early-morning / evening hours over the scan horizon, in order."""
    windows: List[str] = []
    for sample in snapshot.hourly[:SPRAY_SCAN_HOURS]:
        hour = sample.hour
        if sample.precip == 0 and (hour <= SPRAY_MORNING_LAST_HOUR or hour >= SPRAY_EVENING_FIRST_HOUR):
            label = clock_label(hour)
            if label not in windows:
                windows.append(label)
    return windows


def get_spray_advisory(snapshot: WeatherSnapshot) -> SprayWindow:
    current = snapshot.current

    if is_wet(current.weather_code):
        return SprayWindow(False, "Avoid Spraying",
                           "Active rain will wash away chemicals before absorption.")
    if current.wind_speed > SPRAY_MAX_WIND_KMH:
        return SprayWindow(False, "Avoid Spraying",
                           f"Wind at {_fmt_number(current.wind_speed)} km/h causes drift. "
                           f"Spray only when wind < {SPRAY_SAFE_WIND_KMH} km/h.")

    windows = find_calm_windows(snapshot)
    if current.humidity > 85:
        return SprayWindow(True, "Spray with Caution",
                           "High humidity — good for absorption but watch for fungal spread after spraying.",
                           tuple(windows[:3]))
    return SprayWindow(True, "Good to Spray",
                       "Calm conditions. Best time is early morning (6–9 AM) or evening (5–7 PM) "
                       "to avoid evaporation.",
                       tuple(windows[:4]))


# ─────────────────────────────────────────────────────────────────────────────
# IRRIGATION NEED
# ─────────────────────────────────────────────────────────────────────────────

RECENT_RAIN_WEIGHT = 0.4
WINDY_FACTOR = 1.2
SCORE_SCALE = 1.5


def _irrigation_band(score: int, et_mm: float) -> Tuple[str, str, str]:
    if score <= 2:
        return ("Not Needed", "text-emerald-600",
                "Soil likely has adequate moisture. Skip irrigation today to avoid waterlogging.")
    if score <= 4:
        return ("Low Need", "text-green-600",
                f"Evapotranspiration is low (~{_fmt_number(et_mm)} mm). "
                "Light irrigation in 2–3 days should suffice.")
    if score <= 6:
        return ("Moderate Need", "text-amber-600",
                f"Estimated ET: ~{_fmt_number(et_mm)} mm/day. "
                "Consider irrigating within 24 hours, especially sandy soils.")
    if score <= 8:
        return ("High Need", "text-orange-600",
                f"ET ~{_fmt_number(et_mm)} mm/day with low recent rainfall. "
                "Irrigate today, preferably at dawn or dusk.")
    return ("Critical", "text-red-600",
            f"ET ~{_fmt_number(et_mm)} mm/day in hot dry conditions. "
            "Irrigate immediately to prevent wilting and yield loss.")


def get_irrigation_need(snapshot: WeatherSnapshot) -> IrrigationNeed:
    current = snapshot.current
    today = snapshot.today
    if today is None:
        log.debug("No daily forecast; irrigation ET0 falls back to 0")
        t_max = t_min = 0.0
    else:
        t_max, t_min = today.temp_max, today.temp_min

    et_mm = compute_et0_mm(t_max, t_min, current.uv_index)
    recent_rain = snapshot.recent_rain(2)
    wind_factor = WINDY_FACTOR if current.wind_speed > SPRAY_MAX_WIND_KMH else 1.0

    raw = (et_mm - recent_rain * RECENT_RAIN_WEIGHT) * wind_factor * SCORE_SCALE
    score = clamp_score(round_half_up(raw))
    if current.humidity < 35:
        score = min(SCORE_MAX, score + 2)
    if current.humidity > 75:
        score = max(SCORE_MIN, score - 1)

    label, color, detail = _irrigation_band(score, et_mm)
    return IrrigationNeed(score=score, label=label, et_mm=et_mm, detail=detail, color_class=color)


# ─────────────────────────────────────────────────────────────────────────────
# PEST & DISEASE RISK
# ─────────────────────────────────────────────────────────────────────────────

def risk_label(score: int) -> str:
    if score <= 2:
        return "Low"
    if score <= 5:
        return "Moderate"
    if score <= 7:
        return "High"
    return "Very High"


def fungal_score(snapshot: WeatherSnapshot) -> int:
    """Humidity, recent rain and mild temperatures drive fungal pressure."""
    c = snapshot.current
    recent_rain = snapshot.recent_rain(2)
    score = 0
    if c.humidity > 80:
        score += 4
    elif c.humidity > 65:
        score += 2
    if recent_rain > 5:
        score += 3
    elif recent_rain > 0:
        score += 1
    if 18 <= c.temp <= 28:
        score += 2
    if is_wet(c.weather_code):
        score += 1
    return clamp_score(score)


def insect_score(snapshot: WeatherSnapshot) -> int:
    """Warm, dry weather drives insect activity."""
    c = snapshot.current
    score = 0
    if 25 <= c.temp <= 38:
        score += 4
    elif c.temp >= 20:
        score += 2
    if c.humidity < 50:
        score += 3
    elif c.humidity < 65:
        score += 1
    if not is_wet(c.weather_code):
        score += 2
    return clamp_score(score)


def _fungal_detail(score: int) -> str:
    if score > 6:
        return "Prime fungal conditions. Scout crops daily. Apply preventive fungicide."
    if score > 4:
        return "Moderate fungal risk. Check for early symptoms on leaves and stems."
    return "Low fungal pressure today. Continue regular monitoring."


def _insect_detail(score: int) -> str:
    if score > 6:
        return "High insect activity likely. Check for aphids, thrips, or stem borers."
    if score > 4:
        return "Moderate insect presence. Use yellow sticky traps for early detection."
    return "Low insect pressure. Favourable conditions for beneficials like bees."


def get_pest_risk(snapshot: WeatherSnapshot) -> PestRisk:
    fungal = fungal_score(snapshot)
    insect = insect_score(snapshot)
    return PestRisk(
        fungal_score=fungal,
        insect_score=insect,
        fungal_label=risk_label(fungal),
        insect_label=risk_label(insect),
        fungal_detail=_fungal_detail(fungal),
        insect_detail=_insect_detail(insect),
    )
