from __future__ import annotations

import pytest

from bet_thresholds.approximation import ConfidenceLevel, approximate_bet, to_confidence_level
from bet_thresholds.errors import InvalidParameterError, UnsupportedConfidenceError


def test_multipliers_per_level() -> None:
    assert ConfidenceLevel.LOW.multiplier == 0.40
    assert ConfidenceLevel.EVEN.multiplier == 0.33
    assert ConfidenceLevel.HIGH.multiplier == 0.25


@pytest.mark.parametrize(
    "confidence, multiplier",
    [(0.1, 0.4), (0.5, 0.33), (0.9, 0.25)],
)
def test_approximate_bet_is_rounded_multiple(confidence: float, multiplier: float) -> None:
    for n in range(0, 101):
        assert approximate_bet(n, confidence) == round(multiplier * n)


def test_approximate_bet_examples() -> None:
    assert approximate_bet(50, 0.1) == 20
    assert approximate_bet(15, 0.5) == 5
    assert approximate_bet(20, 0.9) == 5
    assert approximate_bet(0, 0.9) == 0


def test_approximate_bet_rounds_half_to_even() -> None:
    # 0.25 * 10 = 2.5 -> 2, 0.25 * 6 = 1.5 -> 2
    assert approximate_bet(10, 0.9) == 2
    assert approximate_bet(6, 0.9) == 2


def test_approximate_bet_accepts_enum_member() -> None:
    assert approximate_bet(40, ConfidenceLevel.LOW) == approximate_bet(40, 0.1) == 16


def test_to_confidence_level_maps_floats() -> None:
    assert to_confidence_level(0.5) is ConfidenceLevel.EVEN
    assert to_confidence_level(ConfidenceLevel.HIGH) is ConfidenceLevel.HIGH


@pytest.mark.parametrize("confidence", [0.3, 0.0, 1.0, 0.95, 0.10000001])
def test_approximate_bet_rejects_unsupported_confidence(confidence: float) -> None:
    with pytest.raises(UnsupportedConfidenceError, match="supported: 0.1, 0.5, 0.9"):
        approximate_bet(10, confidence)


def test_approximate_bet_rejects_negative_dice() -> None:
    with pytest.raises(InvalidParameterError):
        approximate_bet(-1, 0.5)
