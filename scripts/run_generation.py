#!/usr/bin/env python3
"""
Standalone generation script.
Prints frequency-weighted number sets from the local draw store.
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lottogen.generator import generate
from lottogen.planner import MAX_SETS
from lottogen.rng import new_seed
from lottogen.scraper import load_draws
from lottogen.stats import set_stats


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate Lotto 6/45 number sets.")
    parser.add_argument("--count", type=int, default=5, help=f"sets to generate (1-{MAX_SETS})")
    parser.add_argument("--seed", type=int, default=None, help="32-bit seed; random if omitted")
    parser.add_argument("--include-bonus", action="store_true",
                        help="count bonus numbers in the frequency table")
    parser.add_argument("--no-dedup", action="store_true",
                        help="do not down-weight numbers repeated across sets")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    seed = args.seed if args.seed is not None else new_seed()

    print("Loading data...")
    df = load_draws()
    print(f"Loaded {len(df)} draws")

    try:
        sets = generate(df, args.count, seed,
                        include_bonus=args.include_bonus,
                        cross_set_dedup=not args.no_dedup)
    except ValueError as e:
        print(f"[Generate] {e}")
        return 2

    print(f"\n{'='*60}")
    print(f"GENERATED SETS (seed={seed})")
    print(f"{'='*60}")
    for i, s in enumerate(sets):
        stats = set_stats(s.numbers)
        nums = ", ".join(f"{n:2d}" for n in s.numbers)
        print(f"  Set {i+1:2d} [{s.type.label}]: {nums}")
        print(f"         Sum: {stats['sum']} | Odd/Even: {stats['odd_even']} | Bands: {stats['band_count']}")

    print(f"\n{'='*60}")
    print("DISCLAIMER: Lotto is random. Frequency weighting does not improve odds.")
    print(f"{'='*60}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
