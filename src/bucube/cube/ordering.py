"""
Dimension ordering heuristic.

Dimensions with higher cardinality split the data into smaller partitions
sooner, so BUC consumes them first and prunes earlier.
"""

import logging
from typing import List, Sequence

logger = logging.getLogger(__name__)


def order_dimensions(cardinalities: Sequence[int]) -> List[int]:
    """
    Order dimension indices by cardinality, highest first.

    The sort is stable: dimensions with equal cardinality keep their
    original relative order.

    Args:
        cardinalities: Cardinality per dimension

    Returns:
        Permutation of range(len(cardinalities))
    """
    if len(cardinalities) == 0:
        raise ValueError("Cannot order an empty cardinality vector")

    pairs = [(c, i) for i, c in enumerate(cardinalities)]
    pairs.sort(key=lambda p: p[0], reverse=True)
    order = [i for _, i in pairs]

    logger.debug(f"Dimension order for cardinalities {list(cardinalities)}: {order}")
    return order


def identity_order(cardinalities: Sequence[int]) -> List[int]:
    """Keep dimensions in their declared order."""
    if len(cardinalities) == 0:
        raise ValueError("Cannot order an empty cardinality vector")
    return list(range(len(cardinalities)))
