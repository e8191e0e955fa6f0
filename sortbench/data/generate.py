import logging
from typing import List, Optional

from mimesis import Numeric

from ..errors import InvalidArgumentError
from .dataset import DataShape, Dataset

logger = logging.getLogger(__name__)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class DatasetFactory:
    """Generates benchmark input arrays using mimesis, optionally seeded."""

    def __init__(self, seed: Optional[int] = None):
        self.numeric = Numeric(seed=seed)
        self._builders = {
            DataShape.SORTED: self._sorted,
            DataShape.REVERSED: self._reversed,
            DataShape.RANDOM: self._random,
            DataShape.PARTIALLY_SORTED: self._partially_sorted,
        }

    def create_data(self, shape: DataShape, length: int) -> Dataset:
        """
        Create a dataset of the requested shape.

        Args:
            shape: Ordering of the generated array
            length: Number of elements, must be positive

        Returns:
            A new Dataset
        """
        if not isinstance(shape, DataShape):
            raise InvalidArgumentError(f"Unknown data shape: {shape!r}")
        if not isinstance(length, int) or isinstance(length, bool) or length <= 0:
            raise InvalidArgumentError("Length must be a positive integer")

        logger.debug("Generating %s data of length %d", shape, length)
        return Dataset(self._builders[shape](length), shape)

    def _sorted(self, length: int) -> List[int]:
        return list(range(length))

    def _reversed(self, length: int) -> List[int]:
        return list(range(length - 1, -1, -1))

    def _random(self, length: int) -> List[int]:
        return self.numeric.integers(start=INT_MIN, end=INT_MAX, n=length)

    def _partially_sorted(self, length: int) -> List[int]:
        # Sorted half first or random half first, chosen per call
        sorted_half = self._sorted(length // 2)
        random_half = self._random(length - length // 2)
        if self.numeric.integer_number(0, 1) == 1:
            return sorted_half + random_half
        return random_half + sorted_half
