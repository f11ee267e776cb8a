#!/usr/bin/env python3
"""
Generate synthetic datasets for BUC runs.

Usage:
    python scripts/generate_data.py --preset weather
    python scripts/generate_data.py --preset skewed --tuples 1000000 --seed 7
    python scripts/generate_data.py --cardinalities 10 10 5 --skew 1.5 --tuples 500
"""

import os
import sys
import argparse
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bucube.io.synthetic import generate_dataset
from bucube.io.reader import write_dataset
from configs.datasets import DATASET_PRESETS, get_preset

DATA_DIR = Path(__file__).parent.parent / "data"


def main():
    parser = argparse.ArgumentParser(description="Generate synthetic BUC datasets")
    parser.add_argument("--preset", choices=list(DATASET_PRESETS.keys()), default=None,
                        help="Dataset preset")
    parser.add_argument("--cardinalities", type=int, nargs="+", default=None,
                        help="Cardinality per dimension (overrides the preset)")
    parser.add_argument("--skew", type=float, default=None, help="Zipf skew")
    parser.add_argument("--tuples", type=int, default=None, help="Number of tuples")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", type=str, default=None, help="Output file")
    args = parser.parse_args()

    if args.preset is None and args.cardinalities is None:
        parser.error("either --preset or --cardinalities is required")

    if args.preset:
        preset = get_preset(args.preset)
        cardinalities = args.cardinalities or preset.cardinalities
        names = preset.dimension_names if args.cardinalities is None else None
        skew = preset.skew if args.skew is None else args.skew
        num_tuples = args.tuples or preset.num_tuples
        name = preset.name
    else:
        cardinalities = args.cardinalities
        names = None
        skew = args.skew or 0.0
        num_tuples = args.tuples or 10000
        name = "custom"

    output = Path(args.output) if args.output else DATA_DIR / f"{name}_{num_tuples}.txt"
    output.parent.mkdir(parents=True, exist_ok=True)

    print(f"Generating {num_tuples:,} tuples ({name})")
    print(f"  Cardinalities: {cardinalities}")
    print(f"  Skew: {skew}")

    dataset = generate_dataset(cardinalities, num_tuples, skew=skew,
                               seed=args.seed, dimension_names=names)
    write_dataset(dataset, output)

    print(f"Saved to {output}")


if __name__ == "__main__":
    main()
