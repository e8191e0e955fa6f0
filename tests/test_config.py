"""
Tests for benchmark configuration parsing and validation.
"""

import pytest

from sortbench.algorithms import AVAILABLE_ALGORITHMS
from sortbench.benchmark.profiler import ProfilingMode
from sortbench.config import (
    BenchmarkConfig,
    ValidatedConfig,
    parse_shapes,
    select_algorithms,
    validate_config,
)
from sortbench.data.dataset import DataShape
from sortbench.errors import InvalidArgumentError


def _config(**overrides):
    values = dict(
        algorithms=["QuickSort"],
        shapes=[DataShape.RANDOM],
        sizes=[10],
        iterations=3,
        profiling_mode=ProfilingMode.DATA_WRITE_COUNT,
    )
    values.update(overrides)
    return BenchmarkConfig(**values)


class TestSelectAlgorithms:
    """Test suite for select_algorithms."""

    @pytest.mark.parametrize("name", ["all", "ALL", " All "])
    def test_all_selects_every_algorithm(self, name):
        """Test that a single 'all' expands to the registry."""
        assert select_algorithms([name]) == list(AVAILABLE_ALGORITHMS)

    def test_preserves_given_order(self):
        """Test that names are resolved in the given order."""
        assert select_algorithms(["mergesort", "BubbleSort"]) == ["MergeSort", "BubbleSort"]

    def test_duplicates_rejected_case_insensitively(self):
        """Test that the same algorithm cannot be selected twice."""
        with pytest.raises(InvalidArgumentError):
            select_algorithms(["QuickSort", "quicksort"])

    def test_unknown_rejected(self):
        """Test that unknown names raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            select_algorithms(["QuickSort", "TimSort"])

    @pytest.mark.parametrize("names", [None, [], "QuickSort", ["QuickSort", None]])
    def test_invalid_collections(self, names):
        """Test None, empty, string and None-containing inputs."""
        with pytest.raises(InvalidArgumentError):
            select_algorithms(names)


class TestParseShapes:
    """Test suite for parse_shapes."""

    def test_parse_names(self):
        """Test parsing shape names and passing through members."""
        assert parse_shapes(["random", DataShape.SORTED]) == [
            DataShape.RANDOM,
            DataShape.SORTED,
        ]

    def test_duplicates_rejected(self):
        """Test that the same shape cannot be given twice."""
        with pytest.raises(InvalidArgumentError):
            parse_shapes(["random", "RANDOM"])

    @pytest.mark.parametrize("values", [None, [], ["nearly_sorted"]])
    def test_invalid_values(self, values):
        """Test empty and unknown shape lists."""
        with pytest.raises(InvalidArgumentError):
            parse_shapes(values)


class TestValidateConfig:
    """Test suite for validate_config."""

    def test_valid_config(self):
        """Test that a valid configuration is normalized."""
        validated = validate_config(_config(algorithms=["quicksort", "heapsort"]))

        assert validated == ValidatedConfig(
            algorithms=["QuickSort", "HeapSort"],
            shapes=[DataShape.RANDOM],
            sizes=[10],
            iterations=3,
            profiling_mode=ProfilingMode.DATA_WRITE_COUNT,
        )

    def test_default_profiling_mode(self):
        """Test that execution time is the default mode."""
        config = BenchmarkConfig(["QuickSort"], [DataShape.SORTED], [5], 1)

        assert validate_config(config).profiling_mode is ProfilingMode.EXECUTION_TIME

    def test_none_config(self):
        """Test that a None configuration is rejected."""
        with pytest.raises(InvalidArgumentError):
            validate_config(None)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"algorithms": []},
            {"algorithms": ["Unknown"]},
            {"algorithms": ["QuickSort", "QUICKSORT"]},
            {"shapes": []},
            {"shapes": ["RANDOM"]},
            {"shapes": [DataShape.RANDOM, DataShape.RANDOM]},
            {"sizes": []},
            {"sizes": [0]},
            {"sizes": [10, -5]},
            {"sizes": [2.5]},
            {"sizes": [True]},
            {"sizes": [10, 10]},
            {"iterations": 0},
            {"iterations": -1},
            {"iterations": "3"},
            {"profiling_mode": "EXECUTION_TIME"},
        ],
    )
    def test_invalid_config(self, overrides):
        """Test every rejected configuration field."""
        with pytest.raises(InvalidArgumentError):
            validate_config(_config(**overrides))

    def test_custom_registry(self):
        """Test validation against a caller-supplied registry."""
        registry = {"Fake": object}

        validated = validate_config(_config(algorithms=["fake"]), registry)

        assert validated.algorithms == ["Fake"]
        with pytest.raises(InvalidArgumentError):
            validate_config(_config(algorithms=["QuickSort"]), registry)
