"""Rule-of-thumb bet approximation for use at the table."""

from bet_thresholds.confidence import ConfidenceLevel
from bet_thresholds.distribution import validate_dice_count
from bet_thresholds.errors import UnsupportedConfidenceError


def to_confidence_level(confidence: float | ConfidenceLevel) -> ConfidenceLevel:
    """Map a raw confidence onto the closed set of supported levels."""
    if isinstance(confidence, ConfidenceLevel):
        return confidence
    try:
        return ConfidenceLevel(confidence)
    except ValueError:
        supported = ", ".join(str(level.value) for level in ConfidenceLevel)
        raise UnsupportedConfidenceError(
            f"No approximation for confidence {confidence!r} "
            f"(supported: {supported})"
        ) from None


def approximate_bet(dice_count: int, confidence: float | ConfidenceLevel) -> int:
    """
    Approximate bet: round(multiplier(confidence) * N).

    Multipliers: 0.1 -> 0.40, 0.5 -> 0.33, 0.9 -> 0.25.

    Rounds half to even (Python's built-in round), so 0.25 * 10 = 2.5
    becomes 2 and 0.25 * 6 = 1.5 becomes 2.
    """
    validate_dice_count(dice_count)
    level = to_confidence_level(confidence)
    return round(level.multiplier * dice_count)
