#!/usr/bin/env python3
"""
Simple test runner without pytest dependency.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np

from bucube.cube.schema import Dataset, ALL
from bucube.cube.ordering import order_dimensions
from bucube.cube.partition import partition_range
from bucube.cube.engine import BUCConfig, BUCEngine, PandasCubeEngine
from bucube.eval.checks import CubeValidator
from bucube.io.synthetic import generate_dataset


def create_test_dataset():
    """Five tuples over two dimensions with cardinalities [2, 2]."""
    return Dataset.from_rows(
        [(0, 0), (0, 0), (0, 1), (1, 0), (1, 1)],
        cardinalities=[2, 2],
    )


def test_dimension_order():
    """Test stable descending-cardinality ordering."""
    assert order_dimensions([2, 5, 5, 1]) == [1, 2, 0, 3]
    print("✓ test_dimension_order passed")


def test_partition():
    """Test in-place partitioning."""
    data = np.array([[1, 0], [0, 1], [1, 2], [0, 3]], dtype=np.int64)
    counts = partition_range(data, 0, 4, 0, 1)
    assert counts.tolist() == [2, 2]
    assert data[:, 1].tolist() == [1, 3, 0, 2]
    print("✓ test_partition passed")


def test_iceberg_cube():
    """Test BUC emissions with minsup 2."""
    result = BUCEngine(BUCConfig(minsup=2)).compute(create_test_dataset())
    assert result.root.count == 5
    assert result.cell_map()[(0, 0)] == 2
    assert (0, 1) not in result.cell_map()
    assert result.cuboid_counts == {"a": 2, "ab": 1, "b": 2}
    print("✓ test_iceberg_cube passed")


def test_full_cube():
    """Test that minsup 0 keeps every non-empty cell."""
    result = BUCEngine(BUCConfig(minsup=0)).compute(create_test_dataset())
    assert result.cell_count == 9
    print("✓ test_full_cube passed")


def test_empty_dataset():
    """Test the degenerate empty input."""
    dataset = Dataset.from_rows([], cardinalities=[3])
    result = BUCEngine(BUCConfig(minsup=0)).compute(dataset)
    assert [(c.record, c.count) for c in result.cells] == [((ALL,), 0)]
    print("✓ test_empty_dataset passed")


def test_matches_reference():
    """Test BUC against the pandas groupby engine."""
    dataset = generate_dataset([5, 3, 4], num_tuples=200, skew=1.0, seed=5)
    config = BUCConfig(minsup=3, copy_data=True)
    buc = BUCEngine(config).compute(dataset)
    reference = PandasCubeEngine(config).compute(dataset)

    validator = CubeValidator()
    assert validator.validate(buc, len(dataset)).passed
    diff = validator.compare(buc, reference)
    assert not any(diff.values())
    print("✓ test_matches_reference passed")


def run_all_tests():
    """Run all tests."""
    print("Running BUCube tests...\n")

    tests = [
        test_dimension_order,
        test_partition,
        test_iceberg_cube,
        test_full_cube,
        test_empty_dataset,
        test_matches_reference,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            print(f"✗ {test.__name__} FAILED: {e}")
            failed += 1
        except Exception as e:
            print(f"✗ {test.__name__} ERROR: {e}")
            failed += 1

    print(f"\n{'='*40}")
    print(f"Results: {passed} passed, {failed} failed")
    print(f"{'='*40}")

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
