"""
Consistency checks for computed iceberg cubes.

Implements the properties every BUC result must satisfy:
- Root aggregate: the apex cell counts the whole dataset
- Threshold: no non-apex cell below minimum support
- Monotonicity: every cell's parents (one concrete dimension relaxed to ALL)
  were emitted with a count at least as large
- Uniqueness: no group-by cell emitted twice
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Tuple
import logging

from bucube.cube.schema import Cell, ALL
from bucube.cube.engine import CubeResult

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of validating one cube result."""
    root_ok: bool
    threshold_violations: List[Tuple[Cell, ...]] = field(default_factory=list)
    monotonicity_violations: List[Tuple[Cell, ...]] = field(default_factory=list)
    duplicate_cells: List[Tuple[Cell, ...]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return (self.root_ok
                and not self.threshold_violations
                and not self.monotonicity_violations
                and not self.duplicate_cells)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "root_ok": self.root_ok,
            "threshold_violations": len(self.threshold_violations),
            "monotonicity_violations": len(self.monotonicity_violations),
            "duplicate_cells": len(self.duplicate_cells),
        }


class CubeValidator:
    """
    Validates cube results against the iceberg cube properties.
    """

    def validate(self, result: CubeResult, total_tuples: int) -> ValidationResult:
        """
        Validate a cube result.

        Args:
            result: Computed cube
            total_tuples: Size of the dataset the cube was computed from

        Returns:
            ValidationResult listing offending records
        """
        cells = result.cell_map()

        root_ok = self._check_root(result, total_tuples)
        duplicates = self._find_duplicates(result)

        threshold_violations = []
        monotonicity_violations = []
        for record, count in cells.items():
            if all(c is ALL for c in record):
                continue
            if count < result.minsup or count == 0:
                threshold_violations.append(record)
            if not self._parents_dominate(record, count, cells):
                monotonicity_violations.append(record)

        validation = ValidationResult(
            root_ok=root_ok,
            threshold_violations=threshold_violations,
            monotonicity_violations=monotonicity_violations,
            duplicate_cells=duplicates,
        )
        if not validation.passed:
            logger.warning(f"Cube validation failed: {validation.to_dict()}")
        return validation

    def compare(self, result: CubeResult, reference: CubeResult) -> Dict[str, List[Tuple[Cell, ...]]]:
        """
        Compare two results cell by cell, ignoring emission order.

        Returns:
            Records only in `result`, only in `reference`, and with
            differing counts
        """
        ours = result.cell_map()
        theirs = reference.cell_map()
        return {
            "missing": [r for r in theirs if r not in ours],
            "unexpected": [r for r in ours if r not in theirs],
            "mismatched": [r for r in ours if r in theirs and ours[r] != theirs[r]],
        }

    def _check_root(self, result: CubeResult, total_tuples: int) -> bool:
        if not result.cells:
            return False
        root = result.root
        return all(c is ALL for c in root.record) and root.count == total_tuples

    def _find_duplicates(self, result: CubeResult) -> List[Tuple[Cell, ...]]:
        seen = set()
        duplicates = []
        for cell in result.cells:
            if cell.record in seen:
                duplicates.append(cell.record)
            seen.add(cell.record)
        return duplicates

    def _parents_dominate(self, record: Tuple[Cell, ...], count: int,
                          cells: Dict[Tuple[Cell, ...], int]) -> bool:
        for d, cell in enumerate(record):
            if cell is ALL:
                continue
            parent = record[:d] + (ALL,) + record[d + 1:]
            if parent not in cells or cells[parent] < count:
                return False
        return True
