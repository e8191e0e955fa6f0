from enum import Enum
from typing import Iterable, List

from ..errors import InvalidArgumentError

PREVIEW_LENGTH = 5


class DataShape(Enum):
    """Ordering of an input array. Declaration order is the report order."""

    PARTIALLY_SORTED = "PARTIALLY_SORTED"
    RANDOM = "RANDOM"
    REVERSED = "REVERSED"
    SORTED = "SORTED"

    @classmethod
    def from_string(cls, value: str) -> "DataShape":
        """Parse a shape name, ignoring case and surrounding blanks."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError("Data shape must be a non-blank string")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown data shape: {value}") from None

    @property
    def rank(self) -> int:
        return _SHAPE_ORDER[self]

    def __str__(self) -> str:
        return self.value


_SHAPE_ORDER = {shape: index for index, shape in enumerate(DataShape)}


class Dataset:
    """
    Read-only input array tagged with its shape.

    The array is copied when the dataset is built and again every time it is
    read, so one dataset can feed every algorithm of a run unchanged.
    """

    __slots__ = ("_data", "_shape")

    def __init__(self, data: Iterable[int], shape: DataShape):
        if data is None:
            raise InvalidArgumentError("Data must not be None")
        if not isinstance(shape, DataShape):
            raise InvalidArgumentError("Shape must be a DataShape")

        self._data = list(data)
        self._shape = shape

    @property
    def data(self) -> List[int]:
        """A fresh copy of the array."""
        return list(self._data)

    @property
    def shape(self) -> DataShape:
        return self._shape

    def copy(self) -> "Dataset":
        return Dataset(self._data, self._shape)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._shape is other._shape and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._shape, tuple(self._data)))

    def __repr__(self) -> str:
        preview = ", ".join(str(value) for value in self._data[:PREVIEW_LENGTH])
        if len(self._data) > PREVIEW_LENGTH:
            preview += ", ..."
        return f"Dataset(length={len(self._data)}, shape={self._shape}, data=[{preview}])"
