"""Main entry point for Liar's Dice bet threshold analysis."""

import argparse
import sys

from parameters import CONFIDENCE_LEVELS, MAX_DICE, SUCCESS_PROBABILITY_DENOMINATOR
from bet_thresholds.errors import ThresholdError
from bet_thresholds.grid import build_grid
from bet_thresholds.report import format_summary, format_table, summarize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute optimal Liar's Dice bets and check the rules of thumb"
    )
    parser.add_argument(
        "--max-dice",
        type=int,
        default=MAX_DICE,
        help="Largest number of dice in play to evaluate",
    )
    parser.add_argument(
        "--confidences",
        type=float,
        nargs="+",
        default=list(CONFIDENCE_LEVELS),
        help="Confidence levels to evaluate",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        default=False,
        help="Print the full exact/approximate bet table",
    )
    return parser


def main(args=None) -> int:
    """Build the grid and print the recovered rules of thumb.

    Args:
        args: Optional parsed arguments (for programmatic use)

    Returns:
        Process exit status
    """
    if args is None:
        args = build_parser().parse_args()

    print("=== Liar's Dice Bet Thresholds ===\n")
    print(f"Dice in play: 0 to {args.max_dice}")
    print(f"Confidence levels: {', '.join(f'{c:.0%}' for c in sorted(set(args.confidences)))}")
    print(f"Each die matches with probability 2/{SUCCESS_PROBABILITY_DENOMINATOR} (face or wildcard)")
    print("=" * 60)

    try:
        grid = build_grid(args.confidences, args.max_dice)
        summary = summarize(grid)
    except ThresholdError as e:
        print(f"Error: {e}")
        return 1

    if args.table:
        print("\nExact/approximate bet per confidence level:\n")
        print(format_table(grid))
        print()

    print("\nRecovered rules of thumb:")
    print(format_summary(summary))
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
