"""
I/O module: Dataset readers, synthetic data and cube output writers.
"""

from bucube.io.reader import read_dataset, read_csv_dataset, write_dataset
from bucube.io.synthetic import generate_dataset, zipf_probabilities
from bucube.io.writer import (
    write_cells, write_cuboid_counts, format_cells, format_cuboid_counts
)

__all__ = [
    "read_dataset", "read_csv_dataset", "write_dataset",
    "generate_dataset", "zipf_probabilities",
    "write_cells", "write_cuboid_counts", "format_cells", "format_cuboid_counts",
]
