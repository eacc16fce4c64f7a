"""
Tests for weather slowdown.
"""

import pytest

from blocklens.features.pacing.calculators.weather import (
    apply_weather,
    calculate_weather_adjustment,
)
from blocklens.shared.constants import HumidityLevel


class TestAdjustment:
    """1.5% per 10°F above 55°F, scaled by humidity."""

    @pytest.mark.parametrize("temp_f", [20, 40, 54.9, 55])
    def test_cool_weather_is_free(self, temp_f):
        assert calculate_weather_adjustment(temp_f, "high") == 0

    def test_low_humidity(self):
        assert calculate_weather_adjustment(75, HumidityLevel.LOW) == pytest.approx(0.03)

    def test_moderate_humidity(self):
        assert calculate_weather_adjustment(75, "moderate") == pytest.approx(0.033)
        assert calculate_weather_adjustment(85, "moderate") == pytest.approx(0.0495)

    def test_high_humidity(self):
        assert calculate_weather_adjustment(75, "high") == pytest.approx(0.036)

    def test_humidity_ordering(self):
        low = calculate_weather_adjustment(80, "low")
        moderate = calculate_weather_adjustment(80, "moderate")
        high = calculate_weather_adjustment(80, "high")
        assert low < moderate < high

    @pytest.mark.parametrize("temp_f", [float("nan"), float("inf")])
    def test_non_finite_temperature(self, temp_f):
        with pytest.raises(ValueError, match="finite"):
            calculate_weather_adjustment(temp_f, "moderate")

    def test_unknown_humidity(self):
        with pytest.raises(ValueError):
            calculate_weather_adjustment(80, "soggy")


class TestApplyWeather:
    """Adjusted finish time for display."""

    def test_adds_time(self):
        impact = apply_weather(12000, 75, "low")

        assert impact.adjusted_finish_time == pytest.approx(12360)
        assert impact.time_added == pytest.approx(360)
        assert impact.humidity == HumidityLevel.LOW

    def test_no_change_when_cool(self):
        impact = apply_weather(12000, 50, "moderate")

        assert impact.adjusted_finish_time == 12000
        assert impact.time_added == 0

    def test_to_dict(self):
        data = apply_weather(12000, 85, "moderate").to_dict()

        assert data["humidity"] == "moderate"
        assert data["adjustment"] == 0.0495
        assert data["adjusted_finish_time"] == pytest.approx(12594.0)
        assert data["time_added"] == pytest.approx(594.0)
