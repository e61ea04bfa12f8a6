"""Shared snapshot builders for the advisory tests."""
from datetime import date, datetime, timedelta

import pytest

from farm_advisory.models import CurrentConditions, DailySample, HourlySample, Location, WeatherSnapshot

START = datetime(2024, 6, 1, 6, 0)


def build_hourly(start=START, hours=24, temp=25, precip=0.0, code=0):
    samples = []
    for i in range(hours):
        ts = start + timedelta(hours=i)
        samples.append(HourlySample(
            time=ts,
            temp=temp,
            weather_code=code,
            precip=precip,
            is_day=1 if 6 <= ts.hour < 18 else 0,
        ))
    return samples


def build_daily(precip_sums=(3.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0), t_max=30, t_min=20, code=0):
    return [
        DailySample(
            date=date(2024, 6, 1) + timedelta(days=i),
            temp_max=t_max,
            temp_min=t_min,
            weather_code=code,
            precip_sum=p,
            wind_max=15,
            uv_index_max=7,
        )
        for i, p in enumerate(precip_sums)
    ]


def build_snapshot(temp=25, feels_like=None, humidity=60, wind=10, code=2, uv=5, is_day=1,
                   hourly=None, daily=None, **daily_kwargs):
    """
    Defaults describe a mild, partly cloudy morning with 3 mm of rain today:
    none of the crop condition flags are set.
    """
    current = CurrentConditions(
        temp=temp,
        feels_like=temp if feels_like is None else feels_like,
        humidity=humidity,
        wind_speed=wind,
        weather_code=code,
        is_day=is_day,
        uv_index=uv,
    )
    return WeatherSnapshot(
        current=current,
        hourly=build_hourly() if hourly is None else hourly,
        daily=build_daily(**daily_kwargs) if daily is None else daily,
        location=Location(name="Test Farm", lat=28.6, lon=77.2),
    )


@pytest.fixture
def make_snapshot():
    return build_snapshot


@pytest.fixture
def make_hourly():
    return build_hourly


@pytest.fixture
def make_daily():
    return build_daily
