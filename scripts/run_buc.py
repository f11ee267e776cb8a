#!/usr/bin/env python3
"""
Compute an iceberg cube with BUC.

Writes every emitted cell to the first output file and the number of cells
per cuboid to the second.

Usage:
    python scripts/run_buc.py data/sample.txt 2
    python scripts/run_buc.py data/sample.txt 2 --debug --verify
    python scripts/run_buc.py data/sales.csv 10 --csv --columns store item
"""

import os
import sys
import time
import logging
import argparse

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from bucube.cube.engine import BUCConfig, BUCEngine
from bucube.io.reader import read_dataset, read_csv_dataset
from bucube.io.writer import write_cells, write_cuboid_counts
from bucube.eval.checks import CubeValidator


def setup_logging(debug_to_console: bool, debug_file: str = "debug.txt"):
    """Route debug output to the console, or to `debug_file` by default."""
    if debug_to_console:
        handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(debug_file, mode="w")
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
    logging.basicConfig(level=logging.DEBUG, handlers=[handler])


def main():
    parser = argparse.ArgumentParser(description="Bottom-up computation of sparse and iceberg cubes")
    parser.add_argument("datafile", type=str, help="Input dataset")
    parser.add_argument("minsup", type=int, help="Minimum support")
    parser.add_argument("--debug", action="store_true",
                        help="Log debug output to the console instead of debug.txt")
    parser.add_argument("--out1", type=str, default="out.1", help="Cell output file")
    parser.add_argument("--out2", type=str, default="out.2", help="Cuboid count output file")
    parser.add_argument("--no-ordering", action="store_true",
                        help="Consume dimensions in declared order")
    parser.add_argument("--verify", action="store_true",
                        help="Check the computed cube for consistency")
    parser.add_argument("--csv", action="store_true",
                        help="Read a CSV file and encode its columns as dimensions")
    parser.add_argument("--columns", nargs="+", default=None,
                        help="CSV columns to use as dimensions (default: all)")
    args = parser.parse_args()

    setup_logging(args.debug)

    print("BUC: bottom-up computation of iceberg cubes")
    print("=" * 60)
    print(f"Reading input: [{args.datafile}]")

    try:
        if args.csv:
            dataset = read_csv_dataset(args.datafile, args.columns)
        else:
            dataset = read_dataset(args.datafile)
        config = BUCConfig(minsup=args.minsup, order_dimensions=not args.no_ordering)
    except (OSError, ValueError) as e:
        print(f"Couldn't read input data! Aborting... ({e})", file=sys.stderr)
        sys.exit(1)

    total = len(dataset)
    print(f"  Tuples: {total:,}")
    print(f"  Dimensions: {dataset.num_dimensions}")
    print(f"  Cardinalities: {dataset.schema.cardinalities}")
    print(f"  minsup: {config.minsup}")

    print("Running bottom up computation of data cube... ", end="", flush=True)
    started = time.time()
    result = BUCEngine(config).compute(dataset)
    elapsed = time.time() - started
    print("done!")

    write_cells(result, args.out1)
    write_cuboid_counts(result, args.out2)

    print(f"\nCells emitted: {result.cell_count:,} in {elapsed:.2f}s")
    print(f"Dimension order: {[dataset.schema.dimension_names[d] for d in result.dimension_order]}")
    print(f"Pruned buckets: {result.statistics['pruned_buckets']:,}")
    print(f"Results saved to {args.out1} and {args.out2}")

    if args.verify:
        validation = CubeValidator().validate(result, total)
        print(f"\nValidation: {'passed' if validation.passed else 'FAILED'}")
        for key, value in validation.to_dict().items():
            print(f"  {key}: {value}")
        if not validation.passed:
            sys.exit(1)


if __name__ == "__main__":
    main()
