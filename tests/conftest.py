"""
Pytest configuration and fixtures for sortbench tests.

This file contains shared fixtures and configuration for all test modules.
"""

import sys
from pathlib import Path

import matplotlib
import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Render plots without a display
matplotlib.use("Agg")

from sortbench.benchmark.profiler import Profiler, ProfilingMode  # noqa: E402
from sortbench.benchmark.results import RawResult, RunContext  # noqa: E402
from sortbench.data.dataset import DataShape  # noqa: E402
from sortbench.data.generate import DatasetFactory  # noqa: E402


@pytest.fixture
def write_profiler():
    """A profiler counting data writes."""
    return Profiler(ProfilingMode.DATA_WRITE_COUNT)


@pytest.fixture
def time_profiler():
    """A profiler measuring execution time."""
    return Profiler(ProfilingMode.EXECUTION_TIME)


@pytest.fixture
def seeded_factory():
    """A dataset factory with reproducible output."""
    return DatasetFactory(seed=42)


@pytest.fixture
def make_raw_results():
    """Build raw results for one context from a list of values."""

    def _make(values, shape=DataShape.RANDOM, length=10, name="QuickSort",
              mode=ProfilingMode.EXECUTION_TIME):
        context = RunContext(shape, length, name)
        return [RawResult(context, mode, value) for value in values]

    return _make


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "integration" in item.nodeid or "end_to_end" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if any(keyword in item.nodeid for keyword in ["large", "stress"]):
            item.add_marker(pytest.mark.slow)

        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Skip slow tests unless --run-slow is passed."""
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
