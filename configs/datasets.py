"""
Synthetic dataset presets for BUC runs.

Each preset fixes the dimensions, their cardinalities and a Zipf skew; the
skew controls how sparse the cube is (higher skew, denser head values).
"""

from dataclasses import dataclass
from typing import List

from bucube.cube.schema import CubeSchema


@dataclass
class DatasetPreset:
    """
    A synthetic dataset shape.

    Attributes:
        name: Preset name
        dimension_names: One name per dimension
        cardinalities: Cardinality per dimension
        skew: Zipf exponent; 0 draws values uniformly
        num_tuples: Default number of tuples to generate
    """
    name: str
    dimension_names: List[str]
    cardinalities: List[int]
    skew: float = 0.0
    num_tuples: int = 10000

    def schema(self) -> CubeSchema:
        return CubeSchema(list(self.cardinalities), list(self.dimension_names))


def create_weather_preset() -> DatasetPreset:
    """
    Weather-station style data: a few high-cardinality dimensions
    (station, day) and several small ones (condition, season).
    """
    return DatasetPreset(
        name="weather",
        dimension_names=["station", "day", "hour", "condition", "season"],
        cardinalities=[500, 365, 24, 10, 4],
        skew=1.0,
        num_tuples=50000,
    )


def create_uniform_preset() -> DatasetPreset:
    """Uniform values, so most cells fall below any non-trivial minsup."""
    return DatasetPreset(
        name="uniform",
        dimension_names=["a", "b", "c", "d", "e", "f"],
        cardinalities=[100, 100, 100, 100, 100, 100],
        skew=0.0,
        num_tuples=10000,
    )


def create_skewed_preset() -> DatasetPreset:
    """Strongly skewed values over mixed cardinalities."""
    return DatasetPreset(
        name="skewed",
        dimension_names=["a", "b", "c", "d", "e", "f", "g", "h"],
        cardinalities=[1000, 500, 100, 50, 20, 10, 5, 2],
        skew=2.0,
        num_tuples=100000,
    )


# Preset registry
DATASET_PRESETS = {
    "weather": create_weather_preset,
    "uniform": create_uniform_preset,
    "skewed": create_skewed_preset,
}


def get_preset(name: str) -> DatasetPreset:
    """Get dataset preset by name."""
    if name not in DATASET_PRESETS:
        raise ValueError(f"Unknown preset: {name}. Available: {list(DATASET_PRESETS.keys())}")
    return DATASET_PRESETS[name]()
