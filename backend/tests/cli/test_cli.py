"""
Tests for the blocklens CLI.
"""

import json

import pytest
from click.testing import CliRunner

from blocklens.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


# =============================================================================
# Test project
# =============================================================================

class TestProjectCommand:

    def test_console_defaults(self, runner):
        result = runner.invoke(cli, ["project"])

        assert result.exit_code == 0, result.output
        assert "PACING PROJECTION (Marathon)" in result.output
        assert "3:28:30" in result.output
        assert "SPLITS" in result.output
        assert "26–26.2" in result.output
        assert "SCENARIOS" not in result.output

    def test_compare(self, runner):
        result = runner.invoke(cli, ["project", "--compare", "--adjustment=-10"])

        assert result.exit_code == 0, result.output
        assert "SCENARIOS" in result.output
        assert "Aggressive (-10s/mi)" in result.output
        assert "10s/mi faster" in result.output

    def test_km_labels(self, runner):
        result = runner.invoke(cli, ["project", "--unit", "km", "--compare"])

        assert result.exit_code == 0, result.output
        assert "/km" in result.output
        assert "Aggressive (-6s/km)" in result.output

    def test_temperature_enables_weather(self, runner):
        result = runner.invoke(cli, ["project", "--temperature", "85"])

        assert result.exit_code == 0, result.output
        assert "Weather:" in result.output
        assert "85°F" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["project", "--output", "json", "--goal-race", "10k",
                                     "--goal-time", "45:00", "--recent-race", "5k",
                                     "--recent-time", "21:00"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["goal_race"] == "10k"
        assert len(data["projection"]["segments"]) == 7

    def test_output_file(self, runner, tmp_path):
        path = tmp_path / "reports" / "plan.json"
        result = runner.invoke(cli, ["project", "--output-file", str(path)])

        assert result.exit_code == 0, result.output
        assert "JSON saved" in result.output
        assert json.loads(path.read_text(encoding="utf-8"))["goal_race"] == "marathon"

    def test_saved_inputs(self, runner, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps({
            "goal_race": "half",
            "goal_time": "1:45:00",
            "recent_race": "10k",
            "recent_time": "48:00",
            "unit_preference": "km",
        }), encoding="utf-8")

        result = runner.invoke(cli, ["project", "--inputs", str(path)])

        assert result.exit_code == 0, result.output
        assert "PACING PROJECTION (Half Marathon)" in result.output
        assert "/km" in result.output

    def test_options_override_saved_inputs(self, runner, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps({"unit_preference": "km"}), encoding="utf-8")

        result = runner.invoke(cli, ["project", "--inputs", str(path), "--unit", "miles"])

        assert result.exit_code == 0, result.output
        assert "/mi" in result.output
        assert "/km" not in result.output

    def test_invalid_goal_time(self, runner):
        result = runner.invoke(cli, ["project", "--goal-time", "3:30:75"])

        assert result.exit_code == 2
        assert "Seconds must be 0-59" in result.output
        assert "--goal-time" in result.output

    def test_unknown_race(self, runner):
        result = runner.invoke(cli, ["project", "--goal-race", "ultra"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("args", [
        ["--temperature", "inf"],
        ["--adjustment=nan"],
    ])
    def test_non_finite_numbers_rejected(self, runner, args):
        result = runner.invoke(cli, ["project", *args])

        assert result.exit_code == 2
        assert "Invalid value for" in result.output

    def test_impossible_start_pace(self, runner):
        result = runner.invoke(cli, ["project", "--adjustment=-1000"])

        assert result.exit_code == 1
        assert "Start pace must be positive" in result.output


# =============================================================================
# Test validate
# =============================================================================

class TestValidateCommand:

    def test_valid(self, runner):
        result = runner.invoke(cli, ["validate", "1:30:00"])

        assert result.exit_code == 0
        assert "1:30:00 = 5400 seconds" in result.output

    def test_invalid(self, runner):
        result = runner.invoke(cli, ["validate", "5:75"])

        assert result.exit_code == 1
        assert "Invalid time: Seconds must be 0-59" in result.output
