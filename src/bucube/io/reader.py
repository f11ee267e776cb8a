"""
Dataset loading.

Text format: whitespace separated integers. The first line holds the tuple
count followed by one cardinality per dimension; the remaining tokens are the
tuples, one dimension value after another (one tuple per line by convention):

    5 2 2
    0 0
    0 0
    0 1
    1 0
    1 1
"""

import logging
from pathlib import Path
from typing import List, Union

import numpy as np
import pandas as pd

from bucube.cube.schema import CubeSchema, Dataset

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_ints(tokens: List[str], what: str, path: Path) -> List[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError as e:
        raise ValueError(f"{path}: non-integer token in {what}: {e}") from e


def read_dataset(path: PathLike, dimension_names: List[str] = None) -> Dataset:
    """
    Read a dataset in the text format.

    Args:
        path: Input file
        dimension_names: Optional names; defaults to a, b, c, ...

    Returns:
        Validated Dataset
    """
    path = Path(path)
    with open(path) as f:
        header = f.readline().split()
        body = f.read().split()

    if len(header) < 2:
        raise ValueError(f"{path}: header must hold a tuple count and at least one cardinality")

    values = _parse_ints(header, "header", path)
    tuple_count, cardinalities = values[0], values[1:]
    if tuple_count < 0:
        raise ValueError(f"{path}: negative tuple count {tuple_count}")

    num_dims = len(cardinalities)
    needed = tuple_count * num_dims
    if len(body) < needed:
        raise ValueError(
            f"{path}: expected {tuple_count} tuples of {num_dims} values, "
            f"found only {len(body)} values"
        )
    if len(body) > needed:
        logger.warning(f"{path}: ignoring {len(body) - needed} trailing values")

    logger.debug(f"Data header  : {tuple_count} tuples")
    logger.debug(f"Cardinalities: {cardinalities}")
    logger.debug(f"Dimensions   : {num_dims}")

    rows = _parse_ints(body[:needed], "tuples", path)
    tuples = np.array(rows, dtype=np.int64).reshape(tuple_count, num_dims)

    schema = CubeSchema(cardinalities, dimension_names or [])
    return Dataset(tuples=tuples, schema=schema)


def read_csv_dataset(path: PathLike, columns: List[str] = None, **read_kwargs) -> Dataset:
    """
    Read a CSV file and encode the selected columns as cube dimensions.

    Any column type is accepted; values are factorized into integer codes.
    """
    df = pd.read_csv(path, **read_kwargs)
    if columns:
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValueError(f"{path}: unknown columns {missing}")

    dataset = Dataset.from_frame(df, columns)
    logger.info(
        f"Loaded {len(dataset)} tuples from {path} with cardinalities "
        f"{dataset.schema.cardinalities}"
    )
    return dataset


def write_dataset(dataset: Dataset, path: PathLike):
    """Write a dataset in the text format read by `read_dataset`."""
    path = Path(path)
    header = " ".join(str(v) for v in [len(dataset)] + dataset.schema.cardinalities)
    with open(path, "w") as f:
        f.write(header + "\n")
        for row in dataset.tuples:
            f.write(" ".join(str(v) for v in row.tolist()) + "\n")
