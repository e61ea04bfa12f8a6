"""Rank the coming hours by how comfortable and safe they are for field work."""
from typing import List

from .display import hour_label
from .models import HourlySample, WeatherSnapshot, WorkWindow

RANK_HORIZON_HOURS = 13
TOP_N = 5
BASE_SCORE = 10


def score_hour(sample: HourlySample) -> WorkWindow:
    hour = sample.hour
    score = BASE_SCORE
    tags = []

    if sample.temp > 38:
        score -= 4
        tags.append("extreme heat")
    elif sample.temp > 33:
        score -= 2
        tags.append("hot")
    elif sample.temp < 8:
        score -= 2
        tags.append("cold")

    if sample.precip > 2:
        score -= 4
        tags.append("heavy rain")
    elif sample.precip > 0:
        score -= 2
        tags.append("light rain")

    if sample.is_day == 0:
        score -= 3
        tags.append("night")

    if 11 <= hour <= 15 and sample.is_day == 1:
        score -= 2
        tags.append("peak UV")

    # cool morning and evening hours get a small bonus, untagged
    if 5 <= hour <= 9:
        score += 1
    if 16 <= hour <= 18:
        score += 1

    score = max(0, min(10, score))
    return WorkWindow(hour_label=hour_label(hour), score=score, reason_tags=tuple(tags))


def get_best_work_hours(snapshot: WeatherSnapshot) -> List[WorkWindow]:
    """Top five of the next 13 hours, best first; ties keep forecast order."""
    scored = [score_hour(h) for h in snapshot.hourly[:RANK_HORIZON_HOURS]]
    return sorted(scored, key=lambda w: w.score, reverse=True)[:TOP_N]
