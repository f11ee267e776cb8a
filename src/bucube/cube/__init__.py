"""
Cube module: Data structures and engines for iceberg cube computation.
"""

from bucube.cube.schema import CubeSchema, Dataset, Wildcard, ALL
from bucube.cube.ordering import order_dimensions, identity_order
from bucube.cube.partition import partition_range, bucket_bounds
from bucube.cube.recorder import CubeCell, CellSink, CuboidRecorder, cuboid_of
from bucube.cube.engine import (
    BUCConfig, CubeResult, CubeEngine, BUCEngine, PandasCubeEngine
)

__all__ = [
    "CubeSchema", "Dataset", "Wildcard", "ALL",
    "order_dimensions", "identity_order",
    "partition_range", "bucket_bounds",
    "CubeCell", "CellSink", "CuboidRecorder", "cuboid_of",
    "BUCConfig", "CubeResult", "CubeEngine", "BUCEngine", "PandasCubeEngine",
]
