"""Binomial probability calculations for optimal bets."""

from fractions import Fraction
from math import comb

from parameters import SUCCESS_PROBABILITY_DENOMINATOR, SUCCESS_PROBABILITY_NUMERATOR
from bet_thresholds.confidence import ConfidenceLevel, confidence_value
from bet_thresholds.errors import InvalidParameterError

# p = P(die shows the target face or the wildcard face)
SUCCESS_PROBABILITY = Fraction(
    SUCCESS_PROBABILITY_NUMERATOR, SUCCESS_PROBABILITY_DENOMINATOR
)


def validate_dice_count(dice_count: int, name: str = "dice_count") -> None:
    """Raise InvalidParameterError unless dice_count is a non-negative integer."""
    if isinstance(dice_count, bool) or not isinstance(dice_count, int):
        raise InvalidParameterError(
            f"{name} must be an integer, got {dice_count!r}"
        )
    if dice_count < 0:
        raise InvalidParameterError(f"{name} must be non-negative, got {dice_count}")


def validate_confidence(confidence: float) -> None:
    """Raise InvalidParameterError unless 0 < confidence < 1."""
    try:
        # Written so that NaN fails the check as well
        in_range = 0.0 < confidence < 1.0
    except TypeError:
        raise InvalidParameterError(
            f"confidence must be a number, got {confidence!r}"
        ) from None
    if not in_range:
        raise InvalidParameterError(
            f"confidence must lie strictly between 0 and 1, got {confidence!r}"
        )


def binomial_pmf(dice_count: int, k: int) -> Fraction:
    """
    P(X = k) where X ~ Binomial(N, p=1/3).

    P(X = k) = C(N, k) * p^k * (1-p)^(N-k)

    Exact rational arithmetic keeps the cumulative sums free of rounding.
    """
    if k < 0 or k > dice_count:
        return Fraction(0)
    p = SUCCESS_PROBABILITY
    q = 1 - p
    return comb(dice_count, k) * p**k * q ** (dice_count - k)


def probability_at_least(dice_count: int, bet: int) -> float:
    """
    Probability that a bet is met: P(X >= bet) with X ~ Binomial(N, p=1/3).

    P(X >= b) = sum_{i=b}^{N} C(N, i) * p^i * (1-p)^(N-i)

    Special cases:
    - If b <= 0, every outcome meets the bet (1.0)
    - If b > N, the bet is impossible (0.0)
    """
    validate_dice_count(dice_count)

    if bet <= 0:
        return 1.0
    if bet > dice_count:
        return 0.0

    total_prob = sum(binomial_pmf(dice_count, i) for i in range(bet, dice_count + 1))
    return float(total_prob)


def calculate_bet(dice_count: int, confidence: float | ConfidenceLevel) -> int:
    """
    Optimal bet: the upper-tail quantile of X ~ Binomial(N, p=1/3).

    b = min{k : P(X > k) <= confidence} = min{k : P(X <= k) >= 1 - confidence}

    This is the largest bet whose probability of being met, P(X >= b), is
    still at least `confidence`. Same convention as R's
    qbinom(confidence, N, 1/3, lower.tail = FALSE).

    Args:
        dice_count: Total dice in play (N)
        confidence: Required probability that the bet is correct, in (0, 1)

    Returns:
        Bet amount in [0, N]
    """
    validate_dice_count(dice_count)
    confidence = confidence_value(confidence)
    validate_confidence(confidence)

    target = 1 - Fraction(confidence)
    cdf = Fraction(0)
    for k in range(dice_count + 1):
        cdf += binomial_pmf(dice_count, k)
        if cdf >= target:
            return k

    # Unreachable: P(X <= N) = 1 >= target for any valid confidence
    return dice_count
