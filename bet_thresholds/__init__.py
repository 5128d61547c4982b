"""Optimal bet thresholds for Liar's Dice and their rules of thumb."""

from bet_thresholds.analysis import fit_line, fit_slope, max_absolute_error
from bet_thresholds.approximation import approximate_bet
from bet_thresholds.confidence import ConfidenceLevel
from bet_thresholds.distribution import calculate_bet, probability_at_least
from bet_thresholds.errors import (
    EmptyInputError,
    InsufficientDataError,
    InvalidParameterError,
    ThresholdError,
    UnsupportedConfidenceError,
)
from bet_thresholds.grid import GridRow, build_grid

__all__ = [
    "ConfidenceLevel",
    "EmptyInputError",
    "GridRow",
    "InsufficientDataError",
    "InvalidParameterError",
    "ThresholdError",
    "UnsupportedConfidenceError",
    "approximate_bet",
    "build_grid",
    "calculate_bet",
    "fit_line",
    "fit_slope",
    "max_absolute_error",
    "probability_at_least",
]
