"""Generate the bet threshold step-plot."""

import argparse
import os
import sys

from parameters import CONFIDENCE_LEVELS, MAX_DICE, PLOT_OUTPUT_FILE
from bet_thresholds.errors import ThresholdError
from bet_thresholds.grid import build_grid
from bet_thresholds.report import plot_thresholds


def main(argv=None) -> int:
    """Build the default grid and save the plot."""
    parser = argparse.ArgumentParser(description="Plot optimal Liar's Dice bets")
    parser.add_argument(
        "--max-dice",
        type=int,
        default=MAX_DICE,
        help="Largest number of dice in play to plot",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=PLOT_OUTPUT_FILE,
        help="Path of the PNG to write",
    )
    args = parser.parse_args(argv)

    print("=" * 60)
    print("Plotting Optimal Liar's Dice Bets")
    print("=" * 60)

    try:
        grid = build_grid(CONFIDENCE_LEVELS, args.max_dice)
    except ThresholdError as e:
        print(f"Error: {e}")
        return 1

    output_dir = os.path.dirname(args.output)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    plot_thresholds(grid, args.output)

    print(f"Plot saved to: {args.output}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
