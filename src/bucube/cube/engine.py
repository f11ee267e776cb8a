"""
Cube Engine: computes iceberg cubes.

This module handles:
- BUC (Bottom-Up Computation) of sparse and iceberg cubes
- A brute-force pandas groupby engine used as a reference
- Run statistics and result export
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Tuple
from abc import ABC, abstractmethod
from collections import Counter
from itertools import combinations
import logging

import numpy as np
import pandas as pd

from bucube.cube.schema import CubeSchema, Dataset, Cell, ALL
from bucube.cube.ordering import order_dimensions, identity_order
from bucube.cube.partition import partition_range, bucket_bounds
from bucube.cube.recorder import (
    CubeCell, CellSink, CuboidRecorder, cuboid_of, cells_to_frame
)

logger = logging.getLogger(__name__)


@dataclass
class BUCConfig:
    """
    Configuration for a cube computation.

    Attributes:
        minsup: Minimum support; cells with fewer tuples are pruned
        order_dimensions: Consume high-cardinality dimensions first
        copy_data: Partition a copy instead of reordering the dataset in place
    """
    minsup: int = 1
    order_dimensions: bool = True
    copy_data: bool = False

    def __post_init__(self):
        if int(self.minsup) != self.minsup or self.minsup < 0:
            raise ValueError(f"minsup must be a non-negative integer, got {self.minsup}")
        self.minsup = int(self.minsup)


@dataclass
class CubeResult:
    """
    Result of a cube computation.

    Attributes:
        schema: Schema of the input dataset
        minsup: Threshold the cube was computed with
        dimension_order: Order in which dimensions were consumed
        cells: Emitted cells in emission order
        cuboid_counts: Cuboid label -> number of cells emitted under it
        statistics: Run counters (emitted, partitions, pruned_buckets, ...)
    """
    schema: CubeSchema
    minsup: int
    dimension_order: List[int]
    cells: List[CubeCell]
    cuboid_counts: Dict[str, int]
    statistics: Dict[str, int] = field(default_factory=dict)

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    @property
    def root(self) -> CubeCell:
        """The apex cell (ALL, ..., ALL)."""
        return self.cells[0]

    def cell_map(self) -> Dict[Tuple[Cell, ...], int]:
        """Record -> count, independent of emission order."""
        return {cell.record: cell.count for cell in self.cells}

    def to_frame(self) -> pd.DataFrame:
        return cells_to_frame(self.cells, self.schema)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for reporting."""
        return {
            "minsup": self.minsup,
            "dimensions": self.schema.dimension_names,
            "dimension_order": self.dimension_order,
            "cell_count": self.cell_count,
            "cuboids": self.cuboid_counts,
            "statistics": self.statistics,
        }


class CubeEngine(ABC):
    """
    Abstract base class for cube engines.
    """

    def __init__(self, config: BUCConfig = None):
        self.config = config or BUCConfig()

    @abstractmethod
    def compute(self, dataset: Dataset) -> CubeResult:
        """Compute the iceberg cube of `dataset`."""
        pass

    def dimension_order(self, schema: CubeSchema) -> List[int]:
        if self.config.order_dimensions:
            return order_dimensions(schema.cardinalities)
        return identity_order(schema.cardinalities)


@dataclass(frozen=True)
class _BUCRun:
    """State shared by every recursive call of one run."""
    data: np.ndarray
    cardinalities: Tuple[int, ...]
    order: Tuple[int, ...]
    minsup: int
    sink: CellSink
    recorder: CuboidRecorder
    stats: Counter


class BUCEngine(CubeEngine):
    """
    Bottom-Up Computation of sparse and iceberg cubes (Beyer & Ramakrishnan).

    The dataset is recursively partitioned one dimension at a time, in
    dimension order. Every partition is emitted as a cell; partitions below
    minimum support are never refined, since all their refinements are at
    most as large.

    Unless `copy_data` is set, the dataset's rows are reordered in place.
    """

    def compute(self, dataset: Dataset) -> CubeResult:
        dataset.validate()
        schema = dataset.schema
        data = dataset.tuples.copy() if self.config.copy_data else dataset.tuples
        order = self.dimension_order(schema)

        run = _BUCRun(
            data=data,
            cardinalities=tuple(schema.cardinalities),
            order=tuple(order),
            minsup=self.config.minsup,
            sink=CellSink(),
            recorder=CuboidRecorder(schema),
            stats=Counter(),
        )

        logger.info(
            f"Running BUC over {len(data)} tuples, {schema.num_dimensions} dimensions, "
            f"minsup={run.minsup}, order={order}"
        )

        apex = tuple(ALL for _ in range(schema.num_dimensions))
        self._buc(run, 0, len(data), 0, apex)

        statistics = {
            "emitted": len(run.sink),
            "partitions": run.stats["partitions"],
            "pruned_buckets": run.stats["pruned_buckets"],
            "max_depth": run.stats["max_depth"],
        }
        logger.info(f"BUC finished: {statistics}")

        return CubeResult(
            schema=schema,
            minsup=run.minsup,
            dimension_order=order,
            cells=run.sink.cells,
            cuboid_counts=run.recorder.report(),
            statistics=statistics,
        )

    def _buc(self, run: _BUCRun, start: int, stop: int,
             start_dim: int, record: Tuple[Cell, ...]):
        """
        Emit the cell for data[start:stop], then refine it on every
        dimension from order position `start_dim` on.

        `record` is never mutated; each refinement gets its own copy with the
        partitioned dimension fixed, so siblings and the caller still see ALL
        there.
        """
        run.sink.emit(record, stop - start)
        run.recorder.record(cuboid_of(record))
        run.stats["max_depth"] = max(run.stats["max_depth"], start_dim)

        for i in range(start_dim, len(run.order)):
            d = run.order[i]
            counts = partition_range(run.data, start, stop, d, run.cardinalities[d])
            run.stats["partitions"] += 1

            for value, lo, hi in bucket_bounds(counts, start):
                count = hi - lo
                if count == 0:
                    continue
                if count < run.minsup:
                    run.stats["pruned_buckets"] += 1
                    continue
                child = record[:d] + (value,) + record[d + 1:]
                self._buc(run, lo, hi, i + 1, child)


class PandasCubeEngine(CubeEngine):
    """
    Reference engine: one pandas groupby per cuboid.

    Materializes every cuboid in full before filtering, so it is only
    suitable for small inputs and for cross-checking BUC. Cells are emitted
    cuboid by cuboid (fewest concrete dimensions first) and sorted by value
    within a cuboid.
    """

    def compute(self, dataset: Dataset) -> CubeResult:
        dataset.validate()
        schema = dataset.schema
        num_dims = schema.num_dimensions
        threshold = max(self.config.minsup, 1)

        df = pd.DataFrame(dataset.tuples, columns=list(range(num_dims)))

        sink = CellSink()
        recorder = CuboidRecorder(schema)
        apex = tuple(ALL for _ in range(num_dims))
        sink.emit(apex, len(df))
        recorder.record(())

        groupbys = 0
        for size in range(1, num_dims + 1):
            for cuboid in combinations(range(num_dims), size):
                groupbys += 1
                if df.empty:
                    continue
                sizes = df.groupby(list(cuboid), sort=True).size()
                sizes = sizes[sizes >= threshold]
                for key, count in sizes.items():
                    if not isinstance(key, tuple):
                        key = (key,)
                    record = [ALL] * num_dims
                    for d, value in zip(cuboid, key):
                        record[d] = int(value)
                    sink.emit(tuple(record), int(count))
                    recorder.record(cuboid)

        statistics = {"emitted": len(sink), "groupbys": groupbys}
        logger.info(f"Pandas cube finished: {statistics}")

        return CubeResult(
            schema=schema,
            minsup=self.config.minsup,
            dimension_order=list(range(num_dims)),
            cells=sink.cells,
            cuboid_counts=recorder.report(),
            statistics=statistics,
        )
