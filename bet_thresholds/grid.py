"""Grid of exact and approximate bets over confidence levels and dice counts."""

from dataclasses import dataclass
from typing import Iterable

from parameters import CONFIDENCE_LEVELS, MAX_DICE
from bet_thresholds.approximation import approximate_bet
from bet_thresholds.confidence import ConfidenceLevel, confidence_value
from bet_thresholds.distribution import calculate_bet, validate_dice_count


@dataclass(frozen=True)
class GridRow:
    """One evaluated (confidence, dice_count) pair."""

    confidence: float
    dice_count: int
    exact_bet: int
    approximate_bet: int

    @property
    def bet(self) -> int:
        return self.exact_bet

    @property
    def error(self) -> int:
        """|exact_bet - approximate_bet|"""
        return abs(self.exact_bet - self.approximate_bet)

    def as_dict(self) -> dict:
        return {
            "confidence": self.confidence,
            "dice_count": self.dice_count,
            "bet": self.exact_bet,
            "approximate_bet": self.approximate_bet,
        }


def evaluate(confidence: float, dice_count: int) -> GridRow:
    """Compute the exact and approximate bet for a single grid point."""
    return GridRow(
        confidence=confidence,
        dice_count=dice_count,
        exact_bet=calculate_bet(dice_count, confidence),
        approximate_bet=approximate_bet(dice_count, confidence),
    )


def build_grid(
    confidences: Iterable[float] = CONFIDENCE_LEVELS,
    max_dice: int = MAX_DICE,
) -> list[GridRow]:
    """Evaluate every (confidence, dice_count) pair for dice_count in [0, max_dice].

    Rows are ordered by confidence (ascending), then dice count (ascending),
    so repeated calls with the same arguments give identical tables.
    Duplicate confidences are evaluated once.

    Args:
        confidences: Confidence levels to evaluate
        max_dice: Largest dice count (inclusive)

    Returns:
        List of GridRow, len(set(confidences)) * (max_dice + 1) long
    """
    validate_dice_count(max_dice, name="max_dice")

    return [
        evaluate(confidence, dice_count)
        for confidence in sorted({confidence_value(c) for c in confidences})
        for dice_count in range(max_dice + 1)
    ]


def rows_for_confidence(
    grid: Iterable[GridRow], confidence: float | ConfidenceLevel
) -> list[GridRow]:
    """Rows of the grid evaluated at a single confidence level."""
    confidence = confidence_value(confidence)
    return [row for row in grid if row.confidence == confidence]
