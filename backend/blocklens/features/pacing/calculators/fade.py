"""
Fade Model

Late-race slowdown caused by starting faster than sustainable.

Key properties:
1. No fade for even or conservative starts
2. No fade in the first half, however fast the start
3. Fade grows with the square of back-half progress, capped per mile
"""

from dataclasses import dataclass
from typing import Dict, Optional


# Fade model constants
AGGRESSION_MULTIPLIER = 1.5     # each sec/mile too fast costs 1.5x at the finish
FADE_ONSET_FRACTION = 0.5       # fade starts biting after halfway
MAX_FADE_PENALTY = 30.0         # sec/mile


@dataclass(frozen=True)
class FadeModelConfig:
    """Configuration for fade model."""
    aggression_multiplier: float = AGGRESSION_MULTIPLIER
    onset_fraction: float = FADE_ONSET_FRACTION
    max_penalty: float = MAX_FADE_PENALTY


class FadeModel:
    """
    Positive-split model for aggressive starts.

    Example penalties (deviation 15 sec/mile, default config):
        50% -> 0.0
        60% -> 0.9
        75% -> 5.6
        90% -> 14.4
        100% -> 22.5

    Deviation 25 at 100% -> 37.5, capped to 30.
    """

    def __init__(self, config: Optional[FadeModelConfig] = None):
        self.config = config or FadeModelConfig()

    def calculate_penalty(self, pacing_deviation: float, race_fraction: float) -> float:
        """
        Calculate fade penalty at a point in the race.

        Args:
            pacing_deviation: Sec/mile faster than sustainable (<= 0 = not aggressive)
            race_fraction: Race completion (0-1)

        Returns:
            Seconds to add to the start pace at this point
        """
        if pacing_deviation <= 0:
            return 0.0

        onset = self.config.onset_fraction
        if race_fraction <= onset:
            return 0.0

        progress = (race_fraction - onset) / (1 - onset)
        penalty = progress ** 2 * self.config.aggression_multiplier * pacing_deviation

        return min(penalty, self.config.max_penalty)

    def get_info(self) -> Dict:
        """Get model info for API response."""
        examples = {}
        for deviation in [5, 15, 25]:
            for pct in [50, 60, 75, 90, 100]:
                examples[f"{deviation}s_{pct}pct"] = round(
                    self.calculate_penalty(deviation, pct / 100), 2
                )

        return {
            "model": "quadratic_fade",
            "aggression_multiplier": self.config.aggression_multiplier,
            "onset_fraction": self.config.onset_fraction,
            "max_penalty": self.config.max_penalty,
            "example_penalties": examples,
        }


_default_model = FadeModel()


def calculate_fade_penalty(pacing_deviation: float, race_fraction: float) -> float:
    """Fade penalty (sec/mile) with the default model constants."""
    return _default_model.calculate_penalty(pacing_deviation, race_fraction)
