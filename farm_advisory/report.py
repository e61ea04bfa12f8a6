"""
Advisory Report

Runs every advisory over one weather snapshot and bundles the results:
- Current conditions summary (classifier output)
- Generic farming tip or crop-specific precautions
- Spray, irrigation and pest/disease advisories
- Best working hours
- Hourly temperature strip and daily outlook (text report)

The advisories are independent reads of the same snapshot, so the report is
a fan-out, not a pipeline.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .advisory import get_farming_tip, get_irrigation_need, get_pest_risk, get_spray_advisory
from .codes import classify, get_weather_description
from .crops import crop_name, get_crop_precautions
from .display import compact_hour_label, day_label, wind_direction_label
from .models import (
    CropPrecaution, FarmingTip, IrrigationNeed, PestRisk, SprayWindow, WeatherSnapshot, WorkWindow,
)
from .work_hours import get_best_work_hours

HOURLY_STRIP_HOURS = 6


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class AdvisoryReport:
    snapshot: WeatherSnapshot
    crop_id: Optional[str]
    spray: SprayWindow
    irrigation: IrrigationNeed
    pest: PestRisk
    work_hours: List[WorkWindow]
    farming_tip: Optional[FarmingTip] = None
    precautions: List[CropPrecaution] = field(default_factory=list)
    generated_at: datetime = field(default_factory=utc_now)

    @property
    def conditions(self) -> Dict[str, Any]:
        c = self.snapshot.current
        summary = classify(c.weather_code, c.is_day)
        summary.update({
            "temp_c": c.temp,
            "feels_like_c": c.feels_like,
            "humidity_pct": c.humidity,
            "wind_kmh": c.wind_speed,
            "wind_dir": wind_direction_label(c.wind_direction),
            "uv_index": c.uv_index,
        })
        return summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generated_at": self.generated_at.isoformat(),
            "location": self.snapshot.location.to_dict(),
            "conditions": self.conditions,
            "crop": self.crop_id,
            "farming_tip": self.farming_tip.to_dict() if self.farming_tip else None,
            "precautions": [p.to_dict() for p in self.precautions],
            "spray": self.spray.to_dict(),
            "irrigation": self.irrigation.to_dict(),
            "pest_risk": self.pest.to_dict(),
            "best_work_hours": [w.to_dict() for w in self.work_hours],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_text(self) -> str:
        """Generate human-readable text report."""
        cond = self.conditions
        loc = self.snapshot.location
        place = ", ".join(p for p in (loc.name, loc.area, loc.country) if p)
        lines = [
            "=" * 60,
            "FARM WEATHER ADVISORY",
            "=" * 60,
            f"Location: {place}",
            f"Now: {cond['description']}, {cond['temp_c']}°C (feels {cond['feels_like_c']}°C), "
            f"humidity {cond['humidity_pct']}%, wind {cond['wind_kmh']} km/h {cond['wind_dir']}, "
            f"UV {cond['uv_index']}",
            "",
        ]

        if self.crop_id:
            lines.extend(["-" * 40, f"{crop_name(self.crop_id).upper()} PRECAUTIONS", "-" * 40])
            for p in self.precautions:
                lines.append(f"{p.icon} [{p.severity.value.upper()}] {p.title}")
                lines.append(f"   {p.detail}")
        elif self.farming_tip:
            lines.extend(["-" * 40, "FARMING TIP", "-" * 40,
                          f"{self.farming_tip.icon} {self.farming_tip.message}"])
        lines.append("")

        if self.snapshot.hourly:
            strip = [f"{compact_hour_label(h.hour)} {h.temp}°" for h in self.snapshot.hourly[:HOURLY_STRIP_HOURS]]
            lines.extend(["Next hours: " + " | ".join(strip), ""])

        if self.snapshot.daily:
            lines.extend(["-" * 40, "DAILY OUTLOOK", "-" * 40])
            for i, d in enumerate(self.snapshot.daily):
                lines.append(f"{day_label(d.date, i):>11}  {d.temp_max}°/{d.temp_min}°  "
                             f"rain {d.precip_sum:g} mm  {get_weather_description(d.weather_code)}")
            lines.append("")

        lines.extend([
            "-" * 40,
            "SPRAY ADVISORY",
            "-" * 40,
            f"{self.spray.label}: {self.spray.reason}",
        ])
        if self.spray.windows:
            lines.append(f"Calm windows: {', '.join(self.spray.windows)}")
        lines.append("")

        lines.extend([
            "-" * 40,
            "IRRIGATION",
            "-" * 40,
            f"{self.irrigation.label} ({self.irrigation.score}/10, ET0 ~{self.irrigation.et_mm} mm)",
            self.irrigation.detail,
            "",
            "-" * 40,
            "PEST & DISEASE RISK",
            "-" * 40,
            f"Fungal: {self.pest.fungal_label} ({self.pest.fungal_score}/10) - {self.pest.fungal_detail}",
            f"Insect: {self.pest.insect_label} ({self.pest.insect_score}/10) - {self.pest.insect_detail}",
            "",
            "-" * 40,
            "BEST WORK HOURS",
            "-" * 40,
        ])
        for w in self.work_hours:
            lines.append(f"{w.hour_label:>6}  {w.score:>2}/10  {w.reason}")
        lines.append("=" * 60)
        return "\n".join(lines)


def build_report(snapshot: WeatherSnapshot, crop_id: Optional[str] = None) -> AdvisoryReport:
    """
    Compute every advisory for one snapshot.

    With a crop selected the precautions replace the generic farming tip.
    """
    return AdvisoryReport(
        snapshot=snapshot,
        crop_id=crop_id,
        farming_tip=None if crop_id else get_farming_tip(snapshot),
        precautions=get_crop_precautions(crop_id, snapshot) if crop_id else [],
        spray=get_spray_advisory(snapshot),
        irrigation=get_irrigation_need(snapshot),
        pest=get_pest_risk(snapshot),
        work_hours=get_best_work_hours(snapshot),
    )
