"""
Instrumented sort algorithms and the registry used to select them by name.
"""

from typing import Dict, Type

from ..benchmark.profiler import Profiler
from ..errors import InvalidArgumentError
from .algorithm import SortAlgorithm
from .bubble_sort import BubbleSort
from .heap_sort import HeapSort
from .insertion_sort import InsertionSort
from .merge_sort import MergeSort
from .quick_sort import QuickSort

AVAILABLE_ALGORITHMS: Dict[str, Type[SortAlgorithm]] = {
    "BubbleSort": BubbleSort,
    "HeapSort": HeapSort,
    "InsertionSort": InsertionSort,
    "MergeSort": MergeSort,
    "QuickSort": QuickSort,
}


def resolve_algorithm_name(name: str, available=None) -> str:
    """Map a case-insensitive algorithm name onto its registry key."""
    if available is None:
        available = AVAILABLE_ALGORITHMS
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Algorithm name must be a non-blank string")

    by_lower_name = {key.lower(): key for key in available}
    key = by_lower_name.get(name.strip().lower())
    if key is None:
        raise InvalidArgumentError(
            f"Unknown algorithm: {name}. Available: {', '.join(sorted(available))}"
        )
    return key


def create_algorithm(name: str, profiler: Profiler) -> SortAlgorithm:
    """Instantiate a registered algorithm bound to the given profiler."""
    return AVAILABLE_ALGORITHMS[resolve_algorithm_name(name)](profiler)


__all__ = [
    "AVAILABLE_ALGORITHMS",
    "BubbleSort",
    "HeapSort",
    "InsertionSort",
    "MergeSort",
    "QuickSort",
    "SortAlgorithm",
    "create_algorithm",
    "resolve_algorithm_name",
]
