"""
Emission bookkeeping: the aggregate sink and the cuboid recorder.
"""

from dataclasses import dataclass
from typing import List, Dict, Any, Tuple
from collections import Counter

import pandas as pd

from bucube.cube.schema import CubeSchema, Cell, ALL


@dataclass(frozen=True)
class CubeCell:
    """
    One emitted group-by cell.

    Attributes:
        record: One Cell per dimension (concrete value or ALL)
        count: Number of tuples matching the record
    """
    record: Tuple[Cell, ...]
    count: int

    @property
    def cuboid(self) -> Tuple[int, ...]:
        """Indices of the concrete dimensions."""
        return cuboid_of(self.record)

    def describe(self) -> str:
        """Render as '(v0 v1 * ) count'."""
        values = " ".join(str(c) for c in self.record)
        return f"({values} ) {self.count}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": [None if c is ALL else c for c in self.record],
            "count": self.count,
        }


def cuboid_of(record: Tuple[Cell, ...]) -> Tuple[int, ...]:
    """Return the cuboid identity of an output record."""
    return tuple(d for d, cell in enumerate(record) if cell is not ALL)


def cells_to_frame(cells: List[CubeCell], schema: CubeSchema) -> pd.DataFrame:
    """Tabulate cells; ALL becomes <NA> in nullable Int64 columns."""
    names = list(schema.dimension_names)
    rows = [
        [None if c is ALL else c for c in cell.record] + [cell.count]
        for cell in cells
    ]
    df = pd.DataFrame(rows, columns=names + ["count"])
    dtypes = {name: "Int64" for name in names}
    dtypes["count"] = "int64"
    return df.astype(dtypes)


class CellSink:
    """Collects emitted cells in emission order."""

    def __init__(self):
        self.cells: List[CubeCell] = []

    def emit(self, record: Tuple[Cell, ...], count: int):
        self.cells.append(CubeCell(record, count))

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def to_frame(self, schema: CubeSchema) -> pd.DataFrame:
        """
        Export cells as a DataFrame.

        One nullable Int64 column per dimension (ALL becomes <NA>) plus a
        'count' column.
        """
        return cells_to_frame(self.cells, schema)


class CuboidRecorder:
    """
    Counts emitted cells per cuboid.

    The apex cuboid (no concrete dimension) is not counted.
    """

    def __init__(self, schema: CubeSchema):
        self.schema = schema
        self._counts: Counter = Counter()

    def record(self, cuboid: Tuple[int, ...]):
        if cuboid:
            self._counts[cuboid] += 1

    def counts(self) -> Dict[Tuple[int, ...], int]:
        """Counts keyed by cuboid identity."""
        return dict(self._counts)

    def report(self) -> Dict[str, int]:
        """Counts keyed by cuboid label, sorted by label."""
        labelled = {
            self.schema.cuboid_label(cuboid): count
            for cuboid, count in self._counts.items()
        }
        return dict(sorted(labelled.items()))
