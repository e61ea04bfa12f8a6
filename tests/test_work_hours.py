"""
Best-work-hours ranking tests
"""
from datetime import datetime

import pytest

from farm_advisory.models import HourlySample
from farm_advisory.work_hours import get_best_work_hours, score_hour


def sample(hour, temp=25, precip=0.0, is_day=1):
    return HourlySample(time=datetime(2024, 6, 1, hour, 0), temp=temp, weather_code=0,
                        precip=precip, is_day=is_day)


class TestScoreHour:
    def test_ideal_morning(self):
        window = score_hour(sample(7))
        assert window.score == 10
        assert window.reason == "ideal"
        assert window.hour_label == "7 AM"

    def test_all_midday_penalties(self):
        window = score_hour(sample(13, temp=40, precip=3))
        assert window.score == 0
        assert window.reason == "(extreme heat, heavy rain, peak UV)"

    def test_cold_wet_night(self):
        window = score_hour(sample(2, temp=5, precip=0.5, is_day=0))
        assert window.score == 3
        assert window.reason_tags == ("cold", "light rain", "night")

    def test_evening_bonus_untagged(self):
        window = score_hour(sample(17, temp=35))
        assert window.score == 9
        assert window.reason == "(hot)"

    def test_clamped_at_zero(self):
        assert score_hour(sample(2, temp=40, precip=3, is_day=0)).score == 0

    def test_peak_uv_only_by_day(self):
        assert "peak UV" not in score_hour(sample(12, is_day=0)).reason_tags

    @pytest.mark.parametrize("temp", [-20, 7.9, 8, 33, 33.1, 38, 38.1, 55])
    @pytest.mark.parametrize("hour", [0, 5, 9, 11, 15, 16, 18, 23])
    def test_bounds(self, temp, hour):
        assert 0 <= score_hour(sample(hour, temp=temp, is_day=int(6 <= hour < 18))).score <= 10


class TestBestWorkHours:
    def test_morning_start(self, make_snapshot):
        best = get_best_work_hours(make_snapshot())
        assert [w.hour_label for w in best] == ["6 AM", "7 AM", "8 AM", "9 AM", "10 AM"]
        assert all(w.score == 10 and w.reason == "ideal" for w in best)

    def test_ties_keep_forecast_order(self, make_snapshot, make_hourly):
        snap = make_snapshot(hourly=make_hourly(start=datetime(2024, 6, 1, 11, 0)))
        best = get_best_work_hours(snap)
        assert [w.hour_label for w in best] == ["4 PM", "5 PM", "11 AM", "12 PM", "1 PM"]
        assert [w.score for w in best] == [10, 10, 8, 8, 8]

    def test_horizon_is_thirteen_hours(self, make_snapshot, make_hourly):
        # hour 19 onwards is outside the ranking window
        hourly = make_hourly(start=datetime(2024, 6, 1, 6, 0), temp=40)
        hourly[13] = sample(19, temp=20, is_day=1)
        labels = [w.hour_label for w in get_best_work_hours(make_snapshot(hourly=hourly))]
        assert "7 PM" not in labels

    def test_short_forecast(self, make_snapshot):
        best = get_best_work_hours(make_snapshot(hourly=[sample(8), sample(9)]))
        assert len(best) == 2

    def test_empty_forecast(self, make_snapshot):
        assert get_best_work_hours(make_snapshot(hourly=[])) == []

    def test_sorted_descending(self, make_snapshot, make_hourly):
        best = get_best_work_hours(make_snapshot(hourly=make_hourly(start=datetime(2024, 6, 1, 20, 0))))
        scores = [w.score for w in best]
        assert scores == sorted(scores, reverse=True)
        assert len(best) == 5
