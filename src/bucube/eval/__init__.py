"""
Evaluation module: Consistency checks for computed cubes.
"""

from bucube.eval.checks import CubeValidator, ValidationResult

__all__ = [
    "CubeValidator", "ValidationResult",
]
