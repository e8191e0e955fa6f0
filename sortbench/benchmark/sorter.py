import logging
from typing import List, Optional

from ..errors import InvalidArgumentError, InvalidStateError
from .profiler import Metric, ProfilingMode

logger = logging.getLogger(__name__)


class Sorter:
    """
    Execution context delegating sort calls to the selected algorithm.

    All input validation happens here so algorithms can assume a non-None
    array. Empty arrays are trivially sorted and are never measured.
    """

    def __init__(self, algorithm=None):
        self._algorithm = None
        if algorithm is not None:
            self.set_algorithm(algorithm)

    @property
    def algorithm(self):
        return self._algorithm

    def set_algorithm(self, algorithm) -> None:
        """
        Select the algorithm used by the next sort call.

        Args:
            algorithm: A SortAlgorithm instance
        """
        if algorithm is None:
            raise InvalidArgumentError("Algorithm must not be None")

        logger.debug("Setting sort algorithm to %s", algorithm)
        self._algorithm = algorithm

    def sort(self, array: Optional[List[int]]) -> Metric:
        """
        Sort the array with the selected algorithm.

        Args:
            array: The array to sort in place

        Returns:
            The algorithm's Metric, or a zero NONE metric for an empty array
        """
        if array is None:
            raise InvalidArgumentError("Array must not be None")
        if self._algorithm is None:
            raise InvalidStateError("No sort algorithm selected")

        if len(array) == 0:
            logger.debug("Array is empty, no sorting performed")
            return Metric(ProfilingMode.NONE, 0)

        return self._algorithm.sort(array)
