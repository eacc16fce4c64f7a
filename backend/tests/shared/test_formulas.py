"""
Tests for shared formulas module.

Tests the mathematical formulas used across calculators.
"""

import pytest

from blocklens.shared.constants import RIEGEL_EXPONENT
from blocklens.shared.formulas import predict_race_time


# =============================================================================
# Test Riegel Prediction
# =============================================================================

class TestPredictRaceTime:
    """Tests for predict_race_time function."""

    def test_longer_race_slower_than_proportional(self):
        """20:00 5K -> 10K should take more than 40:00."""
        ten_k = predict_race_time(1200, 3.1, 6.2)
        assert ten_k > 1200 * 2

    def test_documented_example(self):
        """20:00 5K -> ~41:42 10K."""
        ten_k = predict_race_time(1200, 3.1, 6.2)
        assert ten_k == pytest.approx(2501.9, abs=0.5)

    def test_half_to_marathon_ratio(self):
        """Marathon should be roughly 2.08x the half."""
        half = 90 * 60
        marathon = predict_race_time(half, 13.1, 26.2)

        ratio = marathon / half
        assert 2.05 < ratio < 2.15

    def test_shorter_target_uses_same_exponent(self):
        """Predicting down should invert predicting up."""
        up = predict_race_time(1200, 3.1, 6.2)
        down = predict_race_time(up, 6.2, 3.1)
        assert down == pytest.approx(1200, rel=1e-9)

    def test_same_distance_returns_same_time(self):
        assert predict_race_time(3000, 6.2, 6.2) == pytest.approx(3000)

    def test_formula_matches_documentation(self):
        """Verify formula: T2 = T1 * (D2/D1) ^ 1.06."""
        for t1, d1, d2 in [(1200, 3.1, 26.2), (6000, 13.1, 3.1), (2700, 6.2, 13.1)]:
            expected = t1 * (d2 / d1) ** RIEGEL_EXPONENT
            assert predict_race_time(t1, d1, d2) == pytest.approx(expected, rel=0.001)

    def test_custom_exponent(self):
        """Exponent 1.0 means even pace across distances."""
        assert predict_race_time(1200, 3.1, 6.2, exponent=1.0) == pytest.approx(2400)

    @pytest.mark.parametrize("t1, d1, d2", [
        (0, 3.1, 6.2),
        (-10, 3.1, 6.2),
        (1200, 0, 6.2),
        (1200, 3.1, 0),
        (1200, -3.1, 6.2),
    ])
    def test_rejects_non_positive_inputs(self, t1, d1, d2):
        """Fail fast instead of returning NaN/Infinity."""
        with pytest.raises(ValueError):
            predict_race_time(t1, d1, d2)

    @pytest.mark.parametrize("t1, d1, d2", [
        (float("nan"), 3.1, 6.2),
        (float("inf"), 3.1, 6.2),
        (1200, float("nan"), 6.2),
        (1200, 3.1, float("inf")),
    ])
    def test_rejects_non_finite_inputs(self, t1, d1, d2):
        """NaN slips past a plain <= 0 check."""
        with pytest.raises(ValueError):
            predict_race_time(t1, d1, d2)
