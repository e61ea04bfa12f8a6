"""
CLI tests (offline mode and patched fetch)
"""
import json
from unittest.mock import patch

from farm_advisory.cli import main
from farm_advisory.weather import WeatherServiceError


class TestCLI:
    def test_offline_text(self, capsys):
        assert main(["--offline"]) == 0
        out = capsys.readouterr().out
        assert "FARM WEATHER ADVISORY" in out
        assert "FARMING TIP" in out
        assert "BEST WORK HOURS" in out

    def test_offline_json(self, capsys):
        assert main(["--offline", "--json", "--lat", "19.0", "--lon", "72.8"]) == 0
        body = json.loads(capsys.readouterr().out)
        assert body["location"]["name"] == "Synthetic Farm"
        assert body["location"]["lat"] == 19.0
        assert body["crop"] is None
        assert 0 <= body["irrigation"]["score"] <= 10

    def test_crop_section(self, capsys):
        assert main(["--offline", "--crop", "rice"]) == 0
        out = capsys.readouterr().out
        assert "RICE PRECAUTIONS" in out
        assert "FARMING TIP" not in out

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "report.json"
        assert main(["--offline", "--crop", "wheat", "--output", str(target)]) == 0
        assert "Saved:" in capsys.readouterr().out
        saved = json.loads(target.read_text(encoding="utf-8"))
        assert saved["crop"] == "wheat"
        assert saved["precautions"]

    @patch('farm_advisory.cli.load_snapshot')
    def test_live_fetch(self, mock_load, make_snapshot, capsys):
        mock_load.return_value = make_snapshot(code=63)
        assert main(["--lat", "10", "--lon", "76"]) == 0
        mock_load.assert_called_once_with(10.0, 76.0)
        assert "Avoid Spraying" in capsys.readouterr().out

    @patch('farm_advisory.cli.load_snapshot', side_effect=WeatherServiceError("unreachable"))
    def test_service_error_exit_code(self, mock_load, capsys):
        assert main([]) == 1
        assert "unreachable" in capsys.readouterr().err
