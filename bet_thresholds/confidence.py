"""Confidence levels with a published rule of thumb."""

from enum import Enum

from parameters import APPROXIMATION_MULTIPLIERS


class ConfidenceLevel(Enum):
    """Confidence levels with a published rule of thumb."""

    LOW = 0.1
    EVEN = 0.5
    HIGH = 0.9

    @property
    def multiplier(self) -> float:
        """Fraction of the dice in play to bet at this confidence."""
        return APPROXIMATION_MULTIPLIERS[self.value]


def confidence_value(confidence: float | ConfidenceLevel) -> float:
    if isinstance(confidence, ConfidenceLevel):
        return confidence.value
    return confidence
