"""
Standalone CLI for estimating return-to-player over many rounds.

Usage:
    python -m src.simulate --config configs/config.json
    python -m src.simulate --config configs/config.json --rounds 100000 --seed 42 --output results/sim.json
"""

import argparse
import json
import sys
from pathlib import Path

from .config import load_config
from .engine import simulate


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Simulate many scratch game rounds and report statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.simulate --config configs/config.json
  python -m src.simulate --config configs/config.json --rounds 100000 --seed 42
        """
    )
    parser.add_argument(
        "--config",
        required=True,
        help="Path to JSON or YAML game configuration"
    )
    parser.add_argument(
        "--betting-amount",
        type=float,
        default=1.0,
        help="Amount bet on every round (default: 1)"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=10000,
        help="Number of rounds to play (default: 10000)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible run"
    )
    parser.add_argument(
        "--output", "-o",
        help="Save the report JSON to this path"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        report = simulate(config, args.betting_amount, args.rounds, seed=args.seed)
    except ValueError as e:
        print(f"Error during simulation: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(report.model_dump(), f, indent=2)
        print(f"Report saved to: {output_path}")

    # Print summary
    print()
    print("=== Simulation Summary ===")
    print(f"Rounds: {report.rounds}")
    print(f"Total wagered: {report.total_wagered:.2f}")
    print(f"Total won: {report.total_won:.2f}")
    print(f"RTP: {report.rtp:.2f}%")
    print(f"Hit rate: {report.hit_rate:.2f}%")
    print(f"Bonus rounds: {report.bonus_rounds}")
    print(f"Max reward: {report.max_reward:g}")
    for name, hits in sorted(report.pattern_hits.items()):
        print(f"  {name}: {hits}")
    print(f"Duration: {report.duration_seconds:.2f}s")

    return 0


if __name__ == "__main__":
    sys.exit(main())
