"""
Weather-code classifier and display helper tests
"""
from datetime import date

import pytest

from farm_advisory.codes import (
    WMO_DESCRIPTIONS, BackgroundCategory, IconCategory, classify, get_background_category,
    get_icon_category, get_weather_description, is_rain, is_rain_tip, is_rainy_crop, is_storm, is_wet,
)
from farm_advisory.display import (
    clock_label, compact_hour_label, day_label, hour_label, wind_direction_label,
)


class TestDescriptions:
    def test_known_codes(self):
        assert get_weather_description(0) == "Clear Sky"
        assert get_weather_description(63) == "Rain"
        assert get_weather_description(99) == "Thunderstorm w/ Heavy Hail"

    def test_table_is_dashboard_set_plus_freezing_codes(self):
        dashboard = {0, 1, 2, 3, 45, 48, 51, 53, 55, 61, 63, 65, 71, 73, 75, 77,
                     80, 81, 82, 85, 86, 95, 96, 99}
        assert set(WMO_DESCRIPTIONS) == dashboard | {56, 57, 66, 67}
        assert len(WMO_DESCRIPTIONS) == 28

    def test_freezing_codes(self):
        assert get_weather_description(56) == "Freezing Drizzle"
        assert get_weather_description(67) == "Heavy Freezing Rain"

    @pytest.mark.parametrize("code", [4, 42, 100, -1])
    def test_unknown_code(self, code):
        assert get_weather_description(code) == "Unknown"


class TestIconCategory:
    @pytest.mark.parametrize("code,expected", [
        (2, IconCategory.PARTLY_CLOUDY),
        (45, IconCategory.FOG),
        (55, IconCategory.DRIZZLE_RAIN),
        (66, IconCategory.DRIZZLE_RAIN),
        (73, IconCategory.SNOW),
        (81, IconCategory.SHOWERS),
        (86, IconCategory.SNOW),
        (96, IconCategory.STORM),
        (30, IconCategory.CLEAR_DAY),
    ])
    def test_buckets(self, code, expected):
        assert get_icon_category(code) == expected

    def test_clear_has_night_variant(self):
        assert get_icon_category(0, is_day=1) == IconCategory.CLEAR_DAY
        assert get_icon_category(1, is_day=0) == IconCategory.CLEAR_NIGHT

    def test_night_only_affects_clear(self):
        assert get_icon_category(3, is_day=0) == IconCategory.PARTLY_CLOUDY


class TestBackgroundCategory:
    def test_night_wins(self):
        assert get_background_category(95, is_day=0) == BackgroundCategory.NIGHT
        assert get_background_category(0, is_day=0) == BackgroundCategory.NIGHT

    @pytest.mark.parametrize("code,expected", [
        (0, BackgroundCategory.CLEAR),
        (3, BackgroundCategory.CLOUDY),
        (63, BackgroundCategory.RAIN),
        (73, BackgroundCategory.RAIN),
        (85, BackgroundCategory.SNOW),
        (99, BackgroundCategory.STORM),
        (45, BackgroundCategory.CLEAR),
    ])
    def test_day_buckets(self, code, expected):
        assert get_background_category(code, is_day=1) == expected


class TestPredicates:
    def test_wet_range(self):
        assert is_wet(51) and is_wet(73) and is_wet(99)
        assert not is_wet(50)
        assert not is_wet(100)

    def test_rain_excludes_snow(self):
        assert is_rain(63)
        assert is_rain(95)
        assert not is_rain(73)
        assert not is_rain(85)

    def test_storm_bounded(self):
        assert is_storm(95)
        assert not is_storm(94)
        assert not is_storm(120)

    def test_crop_and_tip_ranges(self):
        assert is_rainy_crop(51) and is_rainy_crop(82)
        assert not is_rainy_crop(85)
        assert is_rain_tip(61)
        assert not is_rain_tip(55)

    def test_classify(self):
        info = classify(95, 1)
        assert info["description"] == "Thunderstorm"
        assert info["icon"] == "storm"
        assert info["background"] == "storm"
        assert info["is_storm"] is True


class TestDisplayLabels:
    @pytest.mark.parametrize("hour,expected", [
        (0, "12:00 AM"), (6, "6:00 AM"), (11, "11:00 AM"),
        (12, "12:00 PM"), (13, "1:00 PM"), (23, "11:00 PM"),
    ])
    def test_clock_label(self, hour, expected):
        assert clock_label(hour) == expected

    def test_hour_labels(self):
        assert hour_label(0) == "12 AM"
        assert hour_label(6) == "6 AM"
        assert hour_label(12) == "12 PM"
        assert compact_hour_label(18) == "6pm"

    def test_day_label(self):
        assert day_label(date(2024, 6, 3), 0) == "Today"
        assert day_label(date(2024, 6, 3), 1) == "Mon, Jun 3"

    @pytest.mark.parametrize("degrees,expected", [
        (0, "N"), (22.5, "NE"), (45, "NE"), (200, "S"), (290, "W"), (350, "N"),
    ])
    def test_wind_direction(self, degrees, expected):
        assert wind_direction_label(degrees) == expected
