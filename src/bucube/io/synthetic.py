"""
Synthetic dataset generation.
"""

import logging
from typing import List

import numpy as np

from bucube.cube.schema import CubeSchema, Dataset

logger = logging.getLogger(__name__)


def zipf_probabilities(cardinality: int, skew: float) -> np.ndarray:
    """P(value = k) proportional to 1 / (k + 1)^skew, for k in [0, cardinality)."""
    weights = 1.0 / np.power(np.arange(1, cardinality + 1, dtype=float), skew)
    return weights / weights.sum()


def generate_dataset(cardinalities: List[int], num_tuples: int,
                     skew: float = 0.0, seed: int = 42,
                     dimension_names: List[str] = None) -> Dataset:
    """
    Draw `num_tuples` independent tuples.

    Each dimension's values follow a Zipf law over [0, cardinality); skew 0
    gives uniform values. Dimensions with cardinality 0 are constant 0.
    """
    if num_tuples < 0:
        raise ValueError(f"num_tuples must be non-negative, got {num_tuples}")

    schema = CubeSchema(list(cardinalities), dimension_names or [])
    rng = np.random.default_rng(seed)

    columns = []
    for c in schema.cardinalities:
        if c == 0:
            columns.append(np.zeros(num_tuples, dtype=np.int64))
            continue
        columns.append(rng.choice(c, size=num_tuples, p=zipf_probabilities(c, skew)))

    tuples = np.column_stack(columns).astype(np.int64)
    logger.info(f"Generated {num_tuples} tuples over cardinalities {schema.cardinalities}")
    return Dataset(tuples=tuples, schema=schema)
