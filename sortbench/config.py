"""
Benchmark configuration and its validation.

A configuration names the algorithms, input shapes, input sizes and iteration
count of one run together with the single profiling mode used throughout.
Validation is done in full before anything is measured, so a bad
configuration never produces partial results.
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence

from .algorithms import AVAILABLE_ALGORITHMS, resolve_algorithm_name
from .benchmark.profiler import ProfilingMode
from .data.dataset import DataShape
from .errors import InvalidArgumentError

ALL_ALGORITHMS = "all"


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run"""

    algorithms: Sequence[str]
    shapes: Sequence[DataShape]
    sizes: Sequence[int]
    iterations: int
    profiling_mode: ProfilingMode = ProfilingMode.EXECUTION_TIME


@dataclass(frozen=True)
class ValidatedConfig:
    """A configuration whose algorithm names are resolved to registry keys."""

    algorithms: List[str]
    shapes: List[DataShape]
    sizes: List[int]
    iterations: int
    profiling_mode: ProfilingMode


def _require_items(values, label: str) -> list:
    if values is None:
        raise InvalidArgumentError(f"{label} must not be None")
    if isinstance(values, (str, bytes)):
        raise InvalidArgumentError(f"{label} must be a collection, not a string")
    try:
        items = list(values)
    except TypeError:
        raise InvalidArgumentError(f"{label} must be a collection") from None
    if not items:
        raise InvalidArgumentError(f"{label} must not be empty")
    if any(item is None for item in items):
        raise InvalidArgumentError(f"{label} must not contain None")
    return items


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def select_algorithms(
    names: Iterable[str], available: Optional[Mapping[str, object]] = None
) -> List[str]:
    """
    Resolve user-supplied algorithm names against a registry.

    Args:
        names: Names to resolve, case-insensitively; a single "all" selects
               every available algorithm
        available: Registry to resolve against, AVAILABLE_ALGORITHMS by default

    Returns:
        Registry keys in the order given, without duplicates
    """
    if available is None:
        available = AVAILABLE_ALGORITHMS

    items = _require_items(names, "Algorithms")
    if len(items) == 1 and isinstance(items[0], str) and items[0].strip().lower() == ALL_ALGORITHMS:
        return list(available)

    resolved: List[str] = []
    for name in items:
        key = resolve_algorithm_name(name, available)
        if key in resolved:
            raise InvalidArgumentError(f"Duplicate algorithm: {name}")
        resolved.append(key)
    return resolved


def parse_shapes(values: Iterable) -> List[DataShape]:
    """Parse shape names (or pass through DataShape members), rejecting duplicates."""
    shapes: List[DataShape] = []
    for value in _require_items(values, "Shapes"):
        shape = value if isinstance(value, DataShape) else DataShape.from_string(value)
        if shape in shapes:
            raise InvalidArgumentError(f"Duplicate data shape: {shape}")
        shapes.append(shape)
    return shapes


def validate_config(
    config: BenchmarkConfig, available: Optional[Mapping[str, object]] = None
) -> ValidatedConfig:
    """
    Validate a configuration in full.

    Args:
        config: The configuration to check
        available: Algorithm registry, AVAILABLE_ALGORITHMS by default

    Returns:
        The normalized configuration

    Raises:
        InvalidArgumentError: If any part of the configuration is invalid
    """
    if config is None:
        raise InvalidArgumentError("Config must not be None")

    algorithms = select_algorithms(config.algorithms, available)

    shapes = []
    for shape in _require_items(config.shapes, "Shapes"):
        if not isinstance(shape, DataShape):
            raise InvalidArgumentError(f"Shape must be a DataShape, found {shape!r}")
        if shape in shapes:
            raise InvalidArgumentError(f"Duplicate data shape: {shape}")
        shapes.append(shape)

    sizes = []
    for size in _require_items(config.sizes, "Sizes"):
        if not _is_int(size) or size <= 0:
            raise InvalidArgumentError(f"Sizes must be positive integers, found {size!r}")
        if size in sizes:
            raise InvalidArgumentError(f"Duplicate input size: {size}")
        sizes.append(size)

    if not _is_int(config.iterations) or config.iterations <= 0:
        raise InvalidArgumentError("Iterations must be a positive integer")

    if not isinstance(config.profiling_mode, ProfilingMode):
        raise InvalidArgumentError("Profiling mode must be a ProfilingMode")

    return ValidatedConfig(
        algorithms=algorithms,
        shapes=shapes,
        sizes=sizes,
        iterations=config.iterations,
        profiling_mode=config.profiling_mode,
    )
