"""
Advisory report assembly tests
"""
import json

from farm_advisory.report import build_report


class TestBuildReport:
    def test_generic_report_has_tip(self, make_snapshot):
        report = build_report(make_snapshot())
        assert report.crop_id is None
        assert report.farming_tip is not None
        assert report.precautions == []
        assert len(report.work_hours) == 5

    def test_crop_report_replaces_tip(self, make_snapshot):
        report = build_report(make_snapshot(feels_like=5), "wheat")
        assert report.farming_tip is None
        assert [p.title for p in report.precautions] == ["Frost Risk on Seedlings"]

    def test_deterministic(self, make_snapshot):
        snap = make_snapshot(code=63, humidity=85)
        a = build_report(snap, "rice").to_dict()
        b = build_report(snap, "rice").to_dict()
        a.pop("generated_at")
        b.pop("generated_at")
        assert a == b

    def test_conditions_summary(self, make_snapshot):
        cond = build_report(make_snapshot(code=95)).conditions
        assert cond["description"] == "Thunderstorm"
        assert cond["is_storm"] is True
        assert cond["wind_dir"] == "N"
        assert cond["temp_c"] == 25


class TestSerialization:
    def test_to_dict_keys(self, make_snapshot):
        body = build_report(make_snapshot()).to_dict()
        assert set(body) == {
            "generated_at", "location", "conditions", "crop", "farming_tip", "precautions",
            "spray", "irrigation", "pest_risk", "best_work_hours",
        }
        assert body["pest_risk"]["fungal"]["label"] in {"Low", "Moderate", "High", "Very High"}
        assert "et0_mm" in body["irrigation"]

    def test_to_json_keeps_unicode(self, make_snapshot):
        text = build_report(make_snapshot(feels_like=5), "wheat").to_json()
        assert "❄️" in text
        assert json.loads(text)["crop"] == "wheat"

    def test_to_text_sections(self, make_snapshot):
        text = build_report(make_snapshot(), "maize").to_text()
        for heading in ("FARM WEATHER ADVISORY", "MAIZE PRECAUTIONS", "SPRAY ADVISORY",
                        "IRRIGATION", "PEST & DISEASE RISK", "BEST WORK HOURS"):
            assert heading in text
        assert "Location: Test Farm" in text
        assert "Calm windows: 6:00 AM" in text

    def test_to_text_outlook(self, make_snapshot):
        text = build_report(make_snapshot()).to_text()
        assert "Next hours: 6am 25° | 7am 25° | 8am 25° | 9am 25° | 10am 25° | 11am 25°" in text
        assert "DAILY OUTLOOK" in text
        assert "Today  30°/20°  rain 3 mm  Clear Sky" in text
        assert "Sun, Jun 2  30°/20°  rain 0 mm  Clear Sky" in text

    def test_to_text_without_series(self, make_snapshot):
        text = build_report(make_snapshot(hourly=[], daily=[])).to_text()
        assert "DAILY OUTLOOK" not in text
        assert "Next hours" not in text
        assert "BEST WORK HOURS" in text
