"""
Crop catalog and crop-specific weather precautions.

Each crop maps to an ordered list of rules. A rule is a predicate over the
current ConditionFlags plus the precaution it emits; every matching rule
fires, in table order, after the universal storm warning.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List

from .codes import is_rainy_crop, is_storm
from .models import CropPrecaution, CropProfile, Severity, WeatherSnapshot

INFO, WARNING, DANGER = Severity.INFO, Severity.WARNING, Severity.DANGER

# ─────────────────────────────────────────────────────────────────────────────
# CATALOG
# ─────────────────────────────────────────────────────────────────────────────

CROPS: List[CropProfile] = [
    CropProfile("wheat", "Wheat", "🌾"),
    CropProfile("rice", "Rice", "🍚"),
    CropProfile("cotton", "Cotton", "🪴"),
    CropProfile("maize", "Maize", "🌽"),
    CropProfile("tomato", "Tomato", "🍅"),
    CropProfile("potato", "Potato", "🥔"),
    CropProfile("onion", "Onion", "🧅"),
    CropProfile("sugarcane", "Sugarcane", "🎋"),
    CropProfile("soybean", "Soybean", "🫘"),
    CropProfile("groundnut", "Groundnut", "🥜"),
    CropProfile("chilli", "Chilli", "🌶️"),
    CropProfile("mustard", "Mustard", "🌿"),
    CropProfile("banana", "Banana", "🍌"),
    CropProfile("mango", "Mango", "🥭"),
    CropProfile("grapes", "Grapes", "🍇"),
    CropProfile("tea", "Tea", "🍃"),
]

CROPS_BY_ID: Dict[str, CropProfile] = {c.id: c for c in CROPS}


def get_crop(crop_id: str):
    return CROPS_BY_ID.get(crop_id)


def crop_name(crop_id: str) -> str:
    profile = CROPS_BY_ID.get(crop_id)
    return profile.name if profile else crop_id


# ─────────────────────────────────────────────────────────────────────────────
# CONDITION FLAGS
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ConditionFlags:
    is_rainy: bool
    is_storm: bool
    is_hot: bool
    is_cold: bool
    is_windy: bool
    is_humid: bool
    is_dry: bool
    uv_index: float = 0.0

    @classmethod
    def from_snapshot(cls, snapshot: WeatherSnapshot) -> "ConditionFlags":
        c = snapshot.current
        return cls(
            is_rainy=is_rainy_crop(c.weather_code),
            is_storm=is_storm(c.weather_code),
            is_hot=c.temp >= 38,
            is_cold=c.feels_like < 10,
            is_windy=c.wind_speed > 25,
            is_humid=c.humidity > 80,
            is_dry=snapshot.max_precip(3) < 1 and c.humidity < 40,
            uv_index=c.uv_index,
        )

    @property
    def high_uv(self) -> bool:
        return self.uv_index >= 7


@dataclass(frozen=True)
class CropRule:
    when: Callable[[ConditionFlags], bool]
    precaution: CropPrecaution


def _rule(when, icon, severity, title, detail) -> CropRule:
    return CropRule(when, CropPrecaution(icon=icon, title=title, detail=detail, severity=severity))


STORM_PRECAUTION = CropPrecaution(
    icon="⚡", severity=DANGER,
    title="Thunderstorm – Stop All Field Work",
    detail="Do not operate machinery or stand near tall trees. "
           "Secure irrigation pipes and tools immediately.",
)

# ─────────────────────────────────────────────────────────────────────────────
# RULE TABLE
# ─────────────────────────────────────────────────────────────────────────────

CROP_RULES: Dict[str, List[CropRule]] = {
    "wheat": [
        _rule(lambda f: f.is_rainy or f.is_storm, "🌧️", WARNING, "Avoid Harvesting in Rain",
              "Wet wheat is prone to grain spoilage and fungal infection. Wait for 2–3 dry days before cutting."),
        _rule(lambda f: f.is_hot, "🌡️", DANGER, "Heat Stress – Urgent Irrigation",
              "Temps above 38°C during grain fill causes shrivelling. Irrigate immediately, preferably at dawn."),
        _rule(lambda f: f.is_cold, "❄️", WARNING, "Frost Risk on Seedlings",
              "Light frost can damage young wheat seedlings. Use sprinkler irrigation at night to prevent frost damage."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Soil Moisture Low",
              "Apply protective irrigation (4–5 cm). Crown root initiation stage is the most critical for water."),
        _rule(lambda f: f.is_humid, "🍄", WARNING, "Yellow/Brown Rust Alert",
              "High humidity favours rust diseases. Apply Propiconazole 25 EC @ 0.1% at first sign of spots."),
    ],
    "rice": [
        _rule(lambda f: f.is_windy, "💨", WARNING, "Lodging Risk",
              "Strong winds can flatten paddy at grain filling stage. Drain field slightly to stiffen stems."),
        _rule(lambda f: f.is_storm or f.is_rainy, "🌊", DANGER, "Check Field Bunds",
              "Heavy rain may breach bunds and cause flooding. Inspect and reinforce bunds; open drainage channels."),
        _rule(lambda f: f.is_humid, "🍄", DANGER, "Blast Disease Alert",
              "Humidity >80% is ideal for rice blast. Spray Tricyclazole 75 WP @ 0.6 g/L water preventively."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Spikelet Sterility Risk",
              "Temps >35°C at flowering reduce grain set. Maintain standing water to cool crop."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Maintain Flood Water",
              "Rice needs 5 cm standing water. Irrigate immediately; do not let soil crack."),
    ],
    "cotton": [
        _rule(lambda f: f.is_rainy or f.is_storm, "🌧️", DANGER, "Protect Open Bolls",
              "Rain on open bolls causes fibre staining and rotting. "
              "Harvest any mature open bolls urgently before more rain."),
        _rule(lambda f: f.is_humid, "🍄", WARNING, "Boll Rot Risk",
              "High humidity increases boll rot. Ensure proper plant spacing and "
              "spray Copper Oxychloride 50 WP @ 3 g/L."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Increase Irrigation Frequency",
              "Cotton is drought-sensitive at flowering. Irrigate every 7–10 days and "
              "apply mulch to conserve soil moisture."),
        _rule(lambda f: f.is_windy, "💨", INFO, "Delay Pesticide Spray",
              "Winds above 25 km/h cause spray drift onto neighbouring crops. Spray only in early morning calm."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Critical Irrigation Period",
              "Flowering & boll development needs consistent moisture. Deficit irrigation now reduces yield significantly."),
    ],
    "maize": [
        _rule(lambda f: f.is_windy, "💨", WARNING, "Stalk Lodging Alert",
              "Winds can topple maize at tasselling stage. Avoid top-dressing urea in windy conditions; stake if needed."),
        _rule(lambda f: f.is_rainy, "🌧️", INFO, "Waterlogging Caution",
              "Maize cannot tolerate waterlogging for more than 48 hours. Clear drainage channels immediately after rain."),
        _rule(lambda f: f.is_humid, "🍄", WARNING, "Downy Mildew / Blight Risk",
              "High humidity promotes downy mildew. Spray Metalaxyl MZ 72 WP @ 2.5 g/L at first sign."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Silk Drying Risk",
              "Heat >38°C desiccates silks and reduces pollination. Irrigation at silking is critical."),
        _rule(lambda f: f.is_dry, "💧", DANGER, "Irrigate at Silking",
              "Silking and grain fill are the most drought-sensitive stages. "
              "Even one missed irrigation can cut yield by 30%."),
    ],
    "tomato": [
        _rule(lambda f: f.is_humid or f.is_rainy, "🍄", DANGER, "Late Blight Alert",
              "Humid/rainy weather is prime for Phytophthora blight. Spray Mancozeb 75 WP @ 2.5 g/L every 5–7 days."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Blossom Drop Warning",
              "Temps >35°C cause flower drop. Spray Planofix (NAA) @ 4.5 mg/L and irrigate in the evening."),
        _rule(lambda f: f.high_uv, "☀️", INFO, "Use Shade Net (30–50%)",
              "Intense sunlight causes sunscald on fruits. Use shade nets and harvest fruits before they are over-ripe."),
        _rule(lambda f: f.is_windy, "💨", INFO, "Stake & Tie Plants",
              "High winds can snap staked tomato plants. Check all ties and add extra stakes to tall varieties."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Prevent Blossom End Rot",
              "Irregular watering leads to calcium deficiency and blossom end rot. Drip irrigate consistently."),
    ],
    "potato": [
        _rule(lambda f: f.is_humid or f.is_rainy, "🍄", DANGER, "Late Blight Emergency",
              "This weather is ideal for Phytophthora infestans. Spray Cymoxanil + Mancozeb @ 3 g/L every 5 days."),
        _rule(lambda f: f.is_cold, "❄️", WARNING, "Frost Protection Needed",
              "Ground frost will kill potato foliage. Apply light irrigation before sunset "
              "to create frost-protective water film."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Tuber Greening Risk",
              "Heat causes tubers to rise near surface. Earth up rows and add mulch to prevent sun exposure."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Tuber Initiation Irrigation",
              "Potato needs consistent moisture at tuber initiation. Irrigate every 10–12 days; avoid water stress."),
    ],
    "onion": [
        _rule(lambda f: f.is_rainy or f.is_storm, "🌧️", WARNING, "Thrips & Purple Blotch Alert",
              "Rain splashes spores of purple blotch. Spray Iprodione + Carbendazim @ 2 g/L after rain subsides."),
        _rule(lambda f: f.is_humid, "🍄", WARNING, "Downy Mildew Watch",
              "Humidity >80% favours downy mildew on leaves. Spray Metalaxyl MZ 72 WP @ 2.5 g/L preventively."),
        _rule(lambda f: f.is_dry, "💧", INFO, "Bulb Development Irrigation",
              "Onion needs steady moisture for bulb sizing. Irrigate every 7–8 days; stop 10 days before harvest."),
        _rule(lambda f: f.is_hot, "🌡️", INFO, "Early Maturity Possible",
              "High heat accelerates maturity. Monitor neck fall (tops bending over) and "
              "plan harvest 2–3 weeks early."),
    ],
    "sugarcane": [
        _rule(lambda f: f.is_windy, "💨", DANGER, "Lodging – Prop Up Canes",
              "High winds topple sugarcane. Immediately bind and prop fallen canes with bamboo stakes "
              "to prevent yield loss."),
        _rule(lambda f: f.is_rainy or f.is_storm, "🌧️", WARNING, "Red Rot Watch",
              "Waterlogged soils spread red rot fungus. Open furrows for drainage; destroy affected stools."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Irrigation Critical at Grand Growth",
              "Sugarcane needs water every 10–15 days during grand growth stage. Deficit now hits juice brix heavily."),
        _rule(lambda f: f.is_humid, "🍄", INFO, "Smut Disease Check",
              "Inspect regularly for whip smut (black whip-like growth). Remove and burn infected stools."),
    ],
    "soybean": [
        _rule(lambda f: f.is_rainy or f.is_humid, "🍄", WARNING, "Rust & Stem Fly Alert",
              "Humid weather promotes soybean rust. Spray Hexaconazole 5 EC @ 1 mL/L; monitor for stem fly damage."),
        _rule(lambda f: f.is_windy or f.is_storm, "💨", INFO, "Delay Spraying",
              "Soybean plants are delicate. Avoid foliar sprays in windy conditions to prevent crop damage and drift."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Pod Fill Irrigation",
              "Heat stress at R5–R6 stage reduces seed size. Ensure moisture availability; apply light irrigation."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Critical Pod-Fill Stage",
              "Drought during pod fill reduces protein content and yield. Irrigate if soil is dry 5 cm below surface."),
    ],
    "groundnut": [
        _rule(lambda f: f.is_dry, "💧", DANGER, "Irrigate at Peg & Pod Fill",
              "Drought at pegging causes complete pod failure. Immediately irrigate; "
              "even one drought event cuts yield by 40%."),
        _rule(lambda f: f.is_rainy or f.is_humid, "🍄", WARNING, "Tikka Disease / Collar Rot Alert",
              "Wet weather promotes Cercospora tikka and collar rot. Apply Chlorothalonil 75 WP @ 2 g/L."),
        _rule(lambda f: f.is_hot, "🌡️", INFO, "Mulch to Conserve Moisture",
              "Spread paddy straw mulch between rows to reduce soil temp and conserve moisture for pod development."),
        _rule(lambda f: f.is_cold, "❄️", INFO, "Delayed Maturity Possible",
              "Cold weather slows pod maturation. Check maturity by sampling; "
              "harvest only when shell inner wall is dark."),
    ],
    "chilli": [
        _rule(lambda f: f.is_humid or f.is_rainy, "🍄", DANGER, "Anthracnose (Die-Back) Alert",
              "Wet weather causes fruit rot and die-back. Spray Carbendazim 50 WP @ 1 g/L at weekly intervals."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Flower Drop in Heat",
              "Temps >35°C cause flower and fruit drop. Spray Boron @ 0.2% and irrigate in the evening."),
        _rule(lambda f: f.is_cold, "❄️", WARNING, "Frost Damage Risk",
              "Chilli is frost-sensitive. Cover with polythene overnight; apply sulphur dust to reduce frost impact."),
        _rule(lambda f: f.is_windy, "💨", INFO, "Support Tall Plants",
              "Wind can snap gangly chilli plants. Stake plants to bamboo poles and tie loosely."),
    ],
    "mustard": [
        _rule(lambda f: f.is_cold, "❄️", INFO, "Good Conditions for Flowering",
              "Cool temperatures (10–20°C) are ideal for mustard flowering and pod set. No immediate action needed."),
        _rule(lambda f: f.is_humid or f.is_rainy, "🍄", DANGER, "Alternaria Blight / Powdery Mildew",
              "Wet conditions trigger alternaria blight and white rust. Spray Mancozeb 75 WP @ 2 g/L immediately."),
        _rule(lambda f: f.is_hot, "🌡️", DANGER, "Silique Shrivelling Risk",
              "Heat during seed fill shrivels mustard pods. Irrigate if possible; advance harvest by 4–5 days."),
        _rule(lambda f: f.is_windy, "💨", INFO, "Lodging Possible at Maturity",
              "Tall mustard plants can lodge in wind before harvest. Plan combining or cutting within a few days."),
    ],
    "banana": [
        _rule(lambda f: f.is_windy, "💨", DANGER, "Stake Plants Immediately",
              "Banana pseudostems snap in winds above 25 km/h. Prop each plant with bamboo stakes tied at an angle."),
        _rule(lambda f: f.is_cold, "❄️", DANGER, "Cover Young Suckers",
              "Temps below 10°C cause chilling injury. Cover young suckers with polythene or straw; "
              "delay bunch emergence plants."),
        _rule(lambda f: f.is_humid or f.is_rainy, "🍄", WARNING, "Sigatoka Leaf Spot Alert",
              "Rain and humidity spread Sigatoka disease. Spray Propiconazole 25 EC @ 1 mL/L on leaf undersides."),
        _rule(lambda f: f.is_hot, "🌡️", INFO, "Increase Irrigation",
              "Banana is high water-use. In heat, irrigate every 3–4 days; mulch heavily around the base."),
    ],
    "mango": [
        _rule(lambda f: f.is_cold, "❄️", WARNING, "Protect Flowering Shoots",
              "Cold winds and frost damage mango panicles. Spray potassium nitrate @ 1% to delay and protect flowering."),
        _rule(lambda f: f.is_rainy or f.is_humid, "🍄", DANGER, "Powdery Mildew & Anthracnose",
              "Pre-harvest rains cause anthracnose fruit rot. Spray Carbendazim 50 WP @ 1 g/L "
              "during panicle development."),
        _rule(lambda f: f.is_hot and f.high_uv, "☀️", WARNING, "Sunburn on Fruits",
              "Intense sun causes yellow patching on fruits. Apply whitewash (lime) to tree trunks "
              "and cover exposed clusters."),
        _rule(lambda f: f.is_windy, "💨", WARNING, "Pre-Mature Fruit Drop",
              "Strong winds cause premature fruit drop. Spray NAA @ 20 ppm to improve fruit retention."),
    ],
    "grapes": [
        _rule(lambda f: f.is_humid or f.is_rainy, "🍄", DANGER, "Downy & Powdery Mildew Emergency",
              "Grapes are extremely susceptible. Spray Fosetyl Aluminium @ 2.5 g/L for downy; "
              "Sulfur 80 WP @ 3 g/L for powdery mildew."),
        _rule(lambda f: f.is_rainy, "🌧️", WARNING, "Berry Cracking at Harvest",
              "Rain just before harvest causes berry splitting and botrytis rot. "
              "Harvest ripe clusters immediately if possible."),
        _rule(lambda f: f.is_hot, "🌡️", WARNING, "Berry Shrivelling",
              "Heat causes loss of berry plumpness and sugar concentration. "
              "Irrigate and apply kaolin spray to reduce surface temp."),
        _rule(lambda f: f.is_windy, "💨", INFO, "Check Trellis & Wires",
              "High winds can dislodge canes from trellis wires. Inspect and re-tie all cordons and canes."),
    ],
    "tea": [
        _rule(lambda f: f.is_humid or f.is_rainy, "🍄", WARNING, "Blister Blight Alert",
              "Humid rains promote blister blight on young shoots. "
              "Spray Hexaconazole 5 EC @ 0.5 mL/L at 7-day intervals."),
        _rule(lambda f: f.high_uv, "☀️", INFO, "Optimal Plucking Window",
              "High UV promotes anthocyanin in leaves. Pluck in early morning (before 10 AM) for best quality flush."),
        _rule(lambda f: f.is_cold, "❄️", WARNING, "Frost Burns Young Shoots",
              "Night frost damages tender tea shoots in highland gardens. "
              "Light overhead irrigation before dawn helps prevent frost."),
        _rule(lambda f: f.is_dry, "💧", WARNING, "Drought Reduces Flush Yield",
              "Dry spells significantly reduce new growth. Irrigate if possible; "
              "apply mulch to conserve soil moisture in rows."),
    ],
}


def favourable_precaution(crop_id: str) -> CropPrecaution:
    return CropPrecaution(
        icon="✅", severity=INFO,
        title="Conditions Look Favourable",
        detail=f"Current weather poses no immediate risk to your {crop_name(crop_id)} crop. "
               "Continue normal farm operations.",
    )


def get_crop_precautions(crop_id: str, snapshot: WeatherSnapshot) -> List[CropPrecaution]:
    """
    All precautions that apply to `crop_id` under the current weather.

    Ids outside the catalog have no rules and get the favourable fallback
    (or only the storm warning during a thunderstorm).
    """
    flags = ConditionFlags.from_snapshot(snapshot)
    precautions: List[CropPrecaution] = []

    if flags.is_storm:
        precautions.append(STORM_PRECAUTION)

    for rule in CROP_RULES.get(crop_id, []):
        if rule.when(flags):
            precautions.append(rule.precaution)

    if not precautions:
        precautions.append(favourable_precaution(crop_id))
    return precautions
