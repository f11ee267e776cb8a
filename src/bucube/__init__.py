"""
BUCube: Bottom-Up Computation of Sparse and Iceberg Cubes

Computes, for every combination of group-by dimensions, the number of
matching tuples, keeping only combinations that meet a minimum support.
"""

__version__ = "0.1.0"
__author__ = "BUCube Team"

from bucube.cube.schema import CubeSchema, Dataset, ALL
from bucube.cube.engine import BUCConfig, BUCEngine, PandasCubeEngine, CubeResult
from bucube.io.reader import read_dataset, read_csv_dataset
from bucube.eval.checks import CubeValidator

__all__ = [
    "CubeSchema",
    "Dataset",
    "ALL",
    "BUCConfig",
    "BUCEngine",
    "PandasCubeEngine",
    "CubeResult",
    "read_dataset",
    "read_csv_dataset",
    "CubeValidator",
]
