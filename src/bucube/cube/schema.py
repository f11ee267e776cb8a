"""
Cube schema and dataset definitions.

A relation R over dimensions D = {D_0, ..., D_{n-1}} is stored as an
integer-coded tuple array. Each dimension D_i has a cardinality C_i and every
coded value at D_i lies in [0, C_i].
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Sequence, Tuple, Union
from enum import Enum
import string

import numpy as np
import pandas as pd


class Wildcard(Enum):
    """The aggregated-over cell value."""
    ALL = "*"

    def __repr__(self):
        return "ALL"

    def __str__(self):
        return self.value


ALL = Wildcard.ALL

Cell = Union[int, Wildcard]


def default_dimension_names(num_dims: int) -> List[str]:
    """Name dimensions 'a', 'b', 'c', ... then 'd26', 'd27', ..."""
    letters = string.ascii_lowercase
    return [letters[i] if i < len(letters) else f"d{i}" for i in range(num_dims)]


@dataclass
class CubeSchema:
    """
    Cube schema: dimension names and their cardinality vector.

    Attributes:
        cardinalities: Number of distinct coded values per dimension
        dimension_names: Display name per dimension (defaults to a, b, c, ...)
    """
    cardinalities: List[int]
    dimension_names: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.cardinalities = [int(c) for c in self.cardinalities]
        if not self.cardinalities:
            raise ValueError("Cube schema needs at least one dimension")
        for i, c in enumerate(self.cardinalities):
            if c < 0:
                raise ValueError(f"Dimension {i} has negative cardinality {c}")

        if not self.dimension_names:
            self.dimension_names = default_dimension_names(len(self.cardinalities))
        elif len(self.dimension_names) != len(self.cardinalities):
            raise ValueError(
                f"Got {len(self.dimension_names)} dimension names for "
                f"{len(self.cardinalities)} dimensions"
            )

    @property
    def num_dimensions(self) -> int:
        return len(self.cardinalities)

    def get_dimension_index(self, name: str) -> Optional[int]:
        """Get dimension index by name."""
        for i, dim_name in enumerate(self.dimension_names):
            if dim_name == name:
                return i
        return None

    def cuboid_label(self, cuboid: Tuple[int, ...]) -> str:
        """
        Render a cuboid identity (sorted concrete dimension indices).

        Single-character names are concatenated ('ac'), longer names are
        comma separated ('region,year').
        """
        names = [self.dimension_names[d] for d in cuboid]
        if all(len(n) == 1 for n in names):
            return "".join(names)
        return ",".join(names)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cardinalities": list(self.cardinalities),
            "dimension_names": list(self.dimension_names),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CubeSchema":
        return cls(
            cardinalities=data["cardinalities"],
            dimension_names=data.get("dimension_names", []),
        )


@dataclass
class Dataset:
    """
    An in-memory relation of integer-coded tuples.

    Rows are reordered in place during cube computation but never edited.

    Attributes:
        tuples: (n, d) int64 array, one row per tuple
        schema: Schema describing the d columns
        labels: Optional per-dimension decoding tables (code -> original value)
    """
    tuples: np.ndarray
    schema: CubeSchema
    labels: Optional[List[List[Any]]] = None

    def __post_init__(self):
        self.tuples = np.asarray(self.tuples, dtype=np.int64)
        if self.tuples.ndim == 1 and self.tuples.size == 0:
            self.tuples = self.tuples.reshape(0, self.schema.num_dimensions)
        self.validate()

    def validate(self):
        """Check the cardinality invariant; raise ValueError on violation."""
        if self.tuples.ndim != 2:
            raise ValueError(f"Tuples must be a 2-D array, got {self.tuples.ndim}-D")

        num_dims = self.schema.num_dimensions
        if self.tuples.shape[1] != num_dims:
            raise ValueError(
                f"Tuples have {self.tuples.shape[1]} columns but schema has "
                f"{num_dims} dimensions"
            )

        if len(self.tuples) == 0:
            return

        lows = self.tuples.min(axis=0)
        highs = self.tuples.max(axis=0)
        for d in range(num_dims):
            if lows[d] < 0:
                raise ValueError(f"Dimension {d} holds negative value {lows[d]}")
            if highs[d] > self.schema.cardinalities[d]:
                raise ValueError(
                    f"Dimension {d} holds value {highs[d]} above its "
                    f"cardinality {self.schema.cardinalities[d]}"
                )

    def __len__(self):
        return len(self.tuples)

    @property
    def num_dimensions(self) -> int:
        return self.schema.num_dimensions

    def decode(self, dim: int, value: Cell) -> Any:
        """Map a coded value back to its original label, if known."""
        if value is ALL or self.labels is None:
            return value
        return self.labels[dim][value]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]],
                  cardinalities: Sequence[int],
                  dimension_names: List[str] = None) -> "Dataset":
        """Build a dataset from already-coded rows."""
        schema = CubeSchema(list(cardinalities), dimension_names or [])
        tuples = np.array(rows, dtype=np.int64).reshape(-1, schema.num_dimensions)
        return cls(tuples=tuples, schema=schema)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, columns: List[str] = None) -> "Dataset":
        """
        Encode DataFrame columns into a coded dataset.

        Each column is factorized (codes in first-seen order); its cardinality
        is the number of distinct non-null values. Rows with nulls in any of
        the selected columns are dropped.
        """
        columns = list(columns or df.columns)
        if not columns:
            raise ValueError("No columns selected for the cube")

        df = df[columns].dropna()
        codes = []
        labels = []
        for col in columns:
            col_codes, uniques = pd.factorize(df[col])
            codes.append(col_codes.astype(np.int64))
            labels.append(list(uniques))

        tuples = np.column_stack(codes) if len(df) else np.empty((0, len(columns)), dtype=np.int64)
        schema = CubeSchema(
            cardinalities=[len(u) for u in labels],
            dimension_names=[str(c) for c in columns],
        )
        return cls(tuples=tuples, schema=schema, labels=labels)
