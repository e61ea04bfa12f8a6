"""Clock, day and compass labels shared by the advisories and the reports."""
from datetime import date, datetime
from typing import Union

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def _split_hour(hour: int):
    if hour == 0:
        return 12, "AM"
    if hour < 12:
        return hour, "AM"
    if hour == 12:
        return 12, "PM"
    return hour - 12, "PM"


def clock_label(hour: int) -> str:
    """6 -> '6:00 AM', 0 -> '12:00 AM', 13 -> '1:00 PM'."""
    h, suffix = _split_hour(hour)
    return f"{h}:00 {suffix}"


def hour_label(hour: int) -> str:
    """6 -> '6 AM', 12 -> '12 PM'."""
    h, suffix = _split_hour(hour)
    return f"{h} {suffix}"


def compact_hour_label(hour: int) -> str:
    """6 -> '6am', 23 -> '11pm'."""
    h, suffix = _split_hour(hour)
    return f"{h}{suffix.lower()}"


def day_label(day: Union[date, datetime], index: int) -> str:
    if index == 0:
        return "Today"
    return f"{day.strftime('%a')}, {day.strftime('%b')} {day.day}"


def wind_direction_label(degrees: float) -> str:
    # half-up so 22.5 lands on NE
    return COMPASS_POINTS[int(degrees / 45 + 0.5) % 8]
