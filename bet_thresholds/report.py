"""Console and plot output for the bet threshold grid."""

from dataclasses import dataclass

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from parameters import PLOT_DPI
from bet_thresholds.analysis import fit_slope, max_absolute_error
from bet_thresholds.confidence import ConfidenceLevel
from bet_thresholds.grid import GridRow, rows_for_confidence


@dataclass(frozen=True)
class ThresholdSummary:
    """Recovered slope per confidence level and the worst approximation gap."""

    slopes: dict[float, float]
    max_error: int


def grid_confidences(grid: list[GridRow]) -> list[float]:
    return sorted({row.confidence for row in grid})


def summarize(grid: list[GridRow]) -> ThresholdSummary:
    """Fit every confidence level in the grid and measure the max error."""
    slopes = {
        confidence: fit_slope(grid, confidence)
        for confidence in grid_confidences(grid)
    }
    return ThresholdSummary(slopes=slopes, max_error=max_absolute_error(grid))


def format_summary(summary: ThresholdSummary) -> str:
    lines = []
    for confidence, slope in summary.slopes.items():
        line = f"  {confidence:.0%} confidence: bet ~= {slope:.3f} x dice in play"
        try:
            multiplier = ConfidenceLevel(confidence).multiplier
        except ValueError:
            pass
        else:
            line += f" (rule of thumb: {multiplier:.2f})"
        lines.append(line)
    lines.append(
        f"  Rule of thumb is never off by more than {summary.max_error} "
        f"{'die' if summary.max_error == 1 else 'dice'}"
    )
    return "\n".join(lines)


def format_table(grid: list[GridRow]) -> str:
    """Fixed-width table: one line per dice count, exact/approx per confidence."""
    confidences = grid_confidences(grid)
    by_confidence = {
        confidence: {row.dice_count: row for row in rows_for_confidence(grid, confidence)}
        for confidence in confidences
    }
    dice_counts = sorted({row.dice_count for row in grid})

    header = f"{'Dice':>5}" + "".join(f"{f'{c:.0%}':>12}" for c in confidences)
    lines = [header, "-" * len(header)]
    for dice_count in dice_counts:
        cells = []
        for confidence in confidences:
            row = by_confidence[confidence].get(dice_count)
            cell = f"{row.exact_bet}/{row.approximate_bet}" if row else "-"
            cells.append(f"{cell:>12}")
        lines.append(f"{dice_count:>5}" + "".join(cells))
    return "\n".join(lines)


def plot_thresholds(grid: list[GridRow], output_path: str) -> str:
    """Step-plot of exact (solid) and approximate (dashed) bets.

    Args:
        grid: Evaluated grid rows
        output_path: PNG file to write

    Returns:
        output_path
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    for confidence in grid_confidences(grid):
        rows = rows_for_confidence(grid, confidence)
        dice_counts = [row.dice_count for row in rows]
        (line,) = ax.step(
            dice_counts,
            [row.exact_bet for row in rows],
            where="post",
            linewidth=2,
            label=f"{confidence:.0%} confidence",
        )
        ax.step(
            dice_counts,
            [row.approximate_bet for row in rows],
            where="post",
            color=line.get_color(),
            linestyle="--",
            alpha=0.6,
            label=f"{confidence:.0%} rule of thumb",
        )

    ax.set_xlabel("Dice in play")
    ax.set_ylabel("Bet (dice showing face or wildcard)")
    ax.set_title("Optimal Liar's Dice Bet by Confidence")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_path, dpi=PLOT_DPI)
    plt.close(fig)

    return output_path
