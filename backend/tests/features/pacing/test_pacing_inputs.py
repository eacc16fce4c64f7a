"""
Tests for PacingInputs restore from a saved record.
"""

import json
import logging

import pytest
from pydantic import ValidationError

from blocklens.features.pacing import PacingInputs
from blocklens.shared.constants import HumidityLevel, RaceKey, UnitPreference


class TestDefaults:

    def test_defaults(self):
        inputs = PacingInputs()

        assert inputs.goal_race == RaceKey.MARATHON
        assert inputs.goal_time == "3:30:00"
        assert inputs.recent_race == RaceKey.HALF
        assert inputs.recent_time == "1:40:00"
        assert inputs.pacing_adjustment == 0
        assert inputs.compare_mode is False
        assert inputs.unit_preference == UnitPreference.MILES
        assert inputs.weather_enabled is False
        assert inputs.temperature == 55
        assert inputs.humidity == HumidityLevel.MODERATE

    def test_rejects_unknown_race(self):
        with pytest.raises(ValidationError):
            PacingInputs(goal_race="ultra")

    @pytest.mark.parametrize("field", ["pacing_adjustment", "temperature"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_numbers(self, field, value):
        with pytest.raises(ValidationError):
            PacingInputs(**{field: value})


class TestFromSaved:
    """Saved records merge over defaults."""

    def test_none(self):
        assert PacingInputs.from_saved(None) == PacingInputs()

    def test_partial_mapping(self):
        inputs = PacingInputs.from_saved({"goal_race": "10k", "pacing_adjustment": -5})

        assert inputs.goal_race == RaceKey.TEN_K
        assert inputs.pacing_adjustment == -5
        assert inputs.recent_time == "1:40:00"

    def test_json_string(self):
        raw = json.dumps({"unit_preference": "km", "compare_mode": True})
        inputs = PacingInputs.from_saved(raw)

        assert inputs.unit_preference == UnitPreference.KM
        assert inputs.compare_mode is True

    def test_json_bytes(self):
        inputs = PacingInputs.from_saved(b'{"goal_time": "3:00:00"}')
        assert inputs.goal_time == "3:00:00"

    def test_times_kept_verbatim(self):
        """Invalid time text survives restore; validation happens later."""
        inputs = PacingInputs.from_saved({"goal_time": "3:30:75"})
        assert inputs.goal_time == "3:30:75"

    def test_unknown_keys_ignored(self):
        inputs = PacingInputs.from_saved({"theme": "dark", "goal_race": "5k"})
        assert inputs.goal_race == RaceKey.FIVE_K

    def test_invalid_json_gives_defaults(self, caplog):
        with caplog.at_level(logging.WARNING):
            inputs = PacingInputs.from_saved("{not json")

        assert inputs == PacingInputs()
        assert "not valid JSON" in caplog.text

    def test_non_object_gives_defaults(self):
        assert PacingInputs.from_saved("[1, 2, 3]") == PacingInputs()

    def test_bad_field_dropped(self, caplog):
        with caplog.at_level(logging.WARNING):
            inputs = PacingInputs.from_saved({
                "goal_race": "ultra",
                "humidity": "soggy",
                "goal_time": "2:59:59",
            })

        assert inputs.goal_race == RaceKey.MARATHON
        assert inputs.humidity == HumidityLevel.MODERATE
        assert inputs.goal_time == "2:59:59"
        assert "goal_race" in caplog.text

    def test_non_finite_saved_number_dropped(self):
        inputs = PacingInputs.from_saved('{"temperature": NaN, "weather_enabled": true}')

        assert inputs.temperature == 55
        assert inputs.weather_enabled is True

    def test_camel_case_keys(self):
        inputs = PacingInputs.from_saved({
            "goalRace": "half",
            "goalTime": "1:35:00",
            "pacingAdjustment": -10,
            "compareMode": True,
            "unitPreference": "km",
            "weatherEnabled": True,
        })

        assert inputs.goal_race == RaceKey.HALF
        assert inputs.goal_time == "1:35:00"
        assert inputs.pacing_adjustment == -10
        assert inputs.compare_mode is True
        assert inputs.unit_preference == UnitPreference.KM
        assert inputs.weather_enabled is True

    def test_no_known_fields_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            inputs = PacingInputs.from_saved({"theme": "dark", "fontSize": 14})

        assert inputs == PacingInputs()
        assert "no known fields" in caplog.text
