"""
Unit tests for dataset loading and cube output files.
"""

import pytest
import pandas as pd
import numpy as np
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from bucube.cube.engine import BUCConfig, BUCEngine
from bucube.io.reader import read_dataset, read_csv_dataset, write_dataset
from bucube.io.writer import write_cells, write_cuboid_counts
from bucube.io.synthetic import generate_dataset, zipf_probabilities


SAMPLE = "5 2 2\n0 0\n0 0\n0 1\n1 0\n1 1\n"


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE)
    return path


class TestReader:
    def test_read_dataset(self, sample_file):
        dataset = read_dataset(sample_file)
        assert dataset.tuples.shape == (5, 2)
        assert dataset.schema.cardinalities == [2, 2]
        assert dataset.tuples[2].tolist() == [0, 1]

    def test_tuples_may_span_lines(self, tmp_path):
        path = tmp_path / "flat.txt"
        path.write_text("2 3 3 3\n0 1 2 3\n3 2\n")
        dataset = read_dataset(path, dimension_names=["x", "y", "z"])
        assert dataset.tuples.tolist() == [[0, 1, 2], [3, 3, 2]]
        assert dataset.schema.dimension_names == ["x", "y", "z"]

    def test_truncated_body(self, tmp_path):
        path = tmp_path / "short.txt"
        path.write_text("3 2 2\n0 0\n1 1\n")
        with pytest.raises(ValueError, match="expected 3 tuples"):
            read_dataset(path)

    def test_non_integer_token(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("1 2 2\n0 x\n")
        with pytest.raises(ValueError):
            read_dataset(path)

    def test_missing_cardinalities(self, tmp_path):
        path = tmp_path / "header.txt"
        path.write_text("4\n")
        with pytest.raises(ValueError):
            read_dataset(path)

    def test_value_outside_cardinality(self, tmp_path):
        path = tmp_path / "range.txt"
        path.write_text("1 2 2\n0 7\n")
        with pytest.raises(ValueError):
            read_dataset(path)

    def test_write_then_read(self, tmp_path):
        dataset = generate_dataset([5, 3], num_tuples=20, seed=3)
        path = tmp_path / "generated.txt"
        write_dataset(dataset, path)
        loaded = read_dataset(path)
        assert np.array_equal(loaded.tuples, dataset.tuples)
        assert loaded.schema.cardinalities == [5, 3]

    def test_read_csv(self, tmp_path):
        path = tmp_path / "sales.csv"
        pd.DataFrame({
            "store": ["s1", "s2", "s1", "s1"],
            "item": ["apple", "apple", "pear", "apple"],
            "units": [3, 1, 4, 1],
        }).to_csv(path, index=False)

        dataset = read_csv_dataset(path, columns=["store", "item"])
        assert dataset.schema.dimension_names == ["store", "item"]
        assert dataset.schema.cardinalities == [2, 2]
        assert len(dataset) == 4

        with pytest.raises(ValueError):
            read_csv_dataset(path, columns=["region"])


class TestWriter:
    def test_output_files(self, sample_file, tmp_path):
        result = BUCEngine(BUCConfig(minsup=2)).compute(read_dataset(sample_file))

        cells_path = write_cells(result, tmp_path / "out.1")
        cuboids_path = write_cuboid_counts(result, tmp_path / "out.2")

        assert cells_path.read_text().splitlines() == [
            "minsup: 2",
            "(* * ) 5",
            "(0 * ) 3",
            "(0 0 ) 2",
            "(1 * ) 2",
            "(* 0 ) 3",
            "(* 1 ) 2",
        ]
        assert cuboids_path.read_text().splitlines() == ["a:2 ", "ab:1 ", "b:2 "]


class TestSynthetic:
    def test_shape_and_range(self):
        dataset = generate_dataset([10, 4, 0], num_tuples=500, skew=1.5, seed=1)
        assert dataset.tuples.shape == (500, 3)
        assert dataset.tuples[:, 0].max() < 10
        assert dataset.tuples[:, 2].tolist() == [0] * 500

    def test_seeded(self):
        a = generate_dataset([6, 6], num_tuples=50, seed=11)
        b = generate_dataset([6, 6], num_tuples=50, seed=11)
        assert np.array_equal(a.tuples, b.tuples)

    def test_zipf_probabilities(self):
        p = zipf_probabilities(5, 1.0)
        assert p.sum() == pytest.approx(1.0)
        assert all(p[i] > p[i + 1] for i in range(4))
        assert np.allclose(zipf_probabilities(4, 0.0), 0.25)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            generate_dataset([2], num_tuples=-1)


class TestPresets:
    def test_presets_build_valid_datasets(self):
        sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
        from configs.datasets import DATASET_PRESETS, get_preset

        for name in DATASET_PRESETS:
            preset = get_preset(name)
            schema = preset.schema()
            assert schema.num_dimensions == len(preset.dimension_names)
            dataset = generate_dataset(preset.cardinalities, num_tuples=100,
                                       skew=preset.skew,
                                       dimension_names=preset.dimension_names)
            assert dataset.schema.dimension_names == preset.dimension_names

        with pytest.raises(ValueError):
            get_preset("unknown")
