from abc import ABC, abstractmethod
from typing import List

from ..benchmark.profiler import Metric, Profiler
from ..errors import InvalidArgumentError


class SortAlgorithm(ABC):
    """
    Abstract base class for instrumented sort algorithms.

    This class defines the interface that all sort algorithms must implement.
    An implementation sorts the array in place inside exactly one profiler
    start/stop cycle and reports every element write through the profiler
    hooks, so write counts stay comparable across algorithms.
    """

    def __init__(self, profiler: Profiler):
        """
        Initialize the algorithm with a profiler.

        Args:
            profiler: The profiler receiving the instrumentation callbacks
        """
        if profiler is None:
            raise InvalidArgumentError("Profiler must not be None")
        self.profiler = profiler

    def sort(self, array: List[int]) -> Metric:
        """
        Sort the array in place and measure the run.

        Args:
            array: The array to sort, never None

        Returns:
            The Metric produced by the profiler for this run
        """
        self.profiler.start()
        self._sort(array)
        self.profiler.stop()
        return self.profiler.metric()

    @abstractmethod
    def _sort(self, array: List[int]) -> None:
        """
        Sort the array in place while the profiler is running.

        Args:
            array: The array to sort
        """
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the unique short name of the algorithm.

        Returns:
            A string such as "QuickSort"
        """
        pass

    @property
    def name(self) -> str:
        return self.get_algorithm_name()

    def _swap(self, array: List[int], i: int, j: int) -> None:
        array[i], array[j] = array[j], array[i]
        self.profiler.report_swap()

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"
