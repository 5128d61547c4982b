"""Error and regression analysis of the bet grid."""

from typing import Iterable, Sequence

from bet_thresholds.confidence import ConfidenceLevel
from bet_thresholds.errors import EmptyInputError, InsufficientDataError
from bet_thresholds.grid import GridRow, rows_for_confidence


def max_absolute_error(grid: Iterable[GridRow]) -> int:
    """
    Largest gap between the exact and the approximate bet.

    MAX_ERR = max_{rows} |exact_bet - approximate_bet|
    """
    rows = list(grid)
    if not rows:
        raise EmptyInputError("Cannot take the maximum error of an empty grid")
    return max(row.error for row in rows)


def fit_line(
    grid: Sequence[GridRow], confidence: float | ConfidenceLevel
) -> tuple[float, float]:
    """
    Ordinary least squares fit of exact_bet (y) on dice_count (x).

    slope = cov(x, y) / var(x)
    intercept = mean(y) - slope * mean(x)

    Args:
        grid: Evaluated grid rows
        confidence: Confidence level whose rows are fitted

    Returns:
        (slope, intercept)
    """
    rows = rows_for_confidence(grid, confidence)

    # A slope needs at least two distinct x values
    distinct_counts = {row.dice_count for row in rows}
    if len(distinct_counts) < 2:
        raise InsufficientDataError(
            f"Need at least 2 distinct dice counts at confidence {confidence!r}, "
            f"got {len(distinct_counts)}"
        )

    n = len(rows)
    mean_x = sum(row.dice_count for row in rows) / n
    mean_y = sum(row.exact_bet for row in rows) / n

    s_xy = sum((row.dice_count - mean_x) * (row.exact_bet - mean_y) for row in rows)
    s_xx = sum((row.dice_count - mean_x) ** 2 for row in rows)

    slope = s_xy / s_xx
    intercept = mean_y - slope * mean_x
    return slope, intercept


def fit_slope(grid: Sequence[GridRow], confidence: float | ConfidenceLevel) -> float:
    """Empirical bet-per-die ratio at a confidence level (intercept dropped)."""
    slope, _ = fit_line(grid, confidence)
    return slope
