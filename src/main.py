"""
Main entry point for playing a scratch game round.

Usage:
    python -m src.main --config configs/config.json --betting-amount 100
    python -m src.main --config configs/config.json --betting-amount 100 --seed 7 --output results/round.json --verbose
    python -m src.main --config configs/config.json --validate-only
"""

import argparse
import json
import math
import sys
from pathlib import Path

from .config import filter_cascading_issues, validate_file
from .engine import ScratchGame, save_result
from .utils.grid_visualizer import render_result


def positive_float(value: str) -> float:
    """argparse type for strictly positive amounts."""
    try:
        amount = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    if not math.isfinite(amount) or amount <= 0:
        raise argparse.ArgumentTypeError(f"the betting amount must be a finite number greater than 0, got {value}")
    return amount


def print_validation(config_path: str) -> int:
    """Print validation errors and warnings for a config file; return the exit status."""
    report = validate_file(config_path)

    for issue in filter_cascading_issues(report.errors):
        location = f" ({issue.path})" if issue.path else ""
        print(f"ERROR [{issue.code}]{location}: {issue.message}", file=sys.stderr)
    for issue in report.warnings:
        location = f" ({issue.path})" if issue.path else ""
        print(f"WARNING [{issue.code}]{location}: {issue.message}")

    if report.valid:
        print(f"Config OK: {config_path}")
        return 0
    return 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play one round of a scratch game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.json:
  {
    "columns": 3, "rows": 3,
    "symbols": {"A": {"reward_multiplier": 5, "type": "standard"}, ...},
    "probabilities": {"standard_symbols": [...], "bonus_symbols": {...}},
    "win_combinations": {"same_symbol_3_times": {...}, ...}
  }
        """
    )
    parser.add_argument(
        "--config",
        required=True,
        help="Path to JSON or YAML game configuration"
    )
    parser.add_argument(
        "--betting-amount",
        type=positive_float,
        help="Amount to bet on the round (required unless --validate-only)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible round"
    )
    parser.add_argument(
        "--output", "-o",
        help="Also save the result JSON to this path"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and the rendered grid"
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only validate the configuration and report issues"
    )

    args = parser.parse_args(argv)

    if args.validate_only:
        try:
            return print_validation(args.config)
        except FileNotFoundError as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

    if args.betting_amount is None:
        print("Error: --betting-amount is required", file=sys.stderr)
        return 1

    try:
        game = ScratchGame.create(args.config, seed=args.seed)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Config: {args.config}", file=sys.stderr)
        print(f"Board: {game.config.rows}x{game.config.columns}, betting amount: {args.betting_amount:g}", file=sys.stderr)
        if args.seed is not None:
            print(f"Seed: {args.seed}", file=sys.stderr)
        print(file=sys.stderr)

    try:
        result = game.play(args.betting_amount)
    except ValueError as e:
        print(f"Error during round: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(render_result(result), file=sys.stderr)
        print(file=sys.stderr)

    print(json.dumps(result.to_output(), indent=2))

    if args.output:
        output_path = Path(args.output)
        save_result(result, output_path)
        if args.verbose:
            print(f"Result saved to: {output_path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
