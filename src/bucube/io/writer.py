"""
Cube output files.

- Cell file: a 'minsup: <n>' line, then '(v0 v1 * ) <count>' per emitted cell
- Cuboid file: '<label>:<count> ' per cuboid, sorted by label
"""

from pathlib import Path
from typing import Union, TextIO

from bucube.cube.engine import CubeResult

PathLike = Union[str, Path]


def format_cells(result: CubeResult, out: TextIO):
    out.write(f"minsup: {result.minsup}\n")
    for cell in result.cells:
        out.write(cell.describe() + "\n")


def format_cuboid_counts(result: CubeResult, out: TextIO):
    for label, count in result.cuboid_counts.items():
        out.write(f"{label}:{count} \n")


def write_cells(result: CubeResult, path: PathLike = "out.1") -> Path:
    """Write every emitted cell in emission order."""
    path = Path(path)
    with open(path, "w") as f:
        format_cells(result, f)
    return path


def write_cuboid_counts(result: CubeResult, path: PathLike = "out.2") -> Path:
    """Write the number of cells emitted per cuboid."""
    path = Path(path)
    with open(path, "w") as f:
        format_cuboid_counts(result, f)
    return path
