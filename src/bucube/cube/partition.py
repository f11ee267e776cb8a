"""
In-place partitioning of a tuple range on one dimension.
"""

import logging
from typing import Iterator, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def partition_range(data: np.ndarray, start: int, stop: int,
                    dim: int, cardinality: int) -> np.ndarray:
    """
    Group rows data[start:stop] by their value at `dim`.

    Rows are stably reordered in place so equal values become contiguous in
    increasing value order; the relative order of rows sharing a value is
    kept, which preserves any grouping made earlier on other dimensions.

    Args:
        data: (n, d) int array, modified in place
        start, stop: Row range to partition
        dim: Column to partition on
        cardinality: Declared cardinality C of `dim`

    Returns:
        Array of C + 1 bucket sizes, one per value 0..C, summing to stop - start
    """
    block = data[start:stop]
    column = block[:, dim]

    if len(column) and (column.min() < 0 or column.max() > cardinality):
        raise ValueError(
            f"Dimension {dim} has values outside [0, {cardinality}] "
            f"in rows {start}:{stop}"
        )

    counts = np.bincount(column, minlength=cardinality + 1)

    order = np.argsort(column, kind="stable")
    data[start:stop] = block[order]

    return counts


def bucket_bounds(counts: np.ndarray, start: int = 0) -> Iterator[Tuple[int, int, int]]:
    """
    Walk bucket sizes in value order.

    Yields:
        (value, lo, hi) for every bucket, empty ones included
    """
    lo = start
    for value, count in enumerate(counts.tolist()):
        hi = lo + count
        yield value, lo, hi
        lo = hi
