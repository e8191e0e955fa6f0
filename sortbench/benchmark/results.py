from dataclasses import dataclass
from functools import total_ordering
from typing import Union

from ..data.dataset import DataShape
from ..errors import InvalidArgumentError
from .profiler import Metric, ProfilingMode


@total_ordering
@dataclass(frozen=True)
class RunContext:
    """
    Identity of one cell of the run matrix.

    Attributes:
        shape: Shape of the sorted input
        length: Length of the sorted input
        algorithm_name: Unique short name of the algorithm

    Contexts order by shape, then length, then algorithm name.
    """

    shape: DataShape
    length: int
    algorithm_name: str

    def __post_init__(self):
        if not isinstance(self.shape, DataShape):
            raise InvalidArgumentError("Shape must be a DataShape")
        if self.length < 0:
            raise InvalidArgumentError("Length must not be negative")
        if not isinstance(self.algorithm_name, str) or not self.algorithm_name:
            raise InvalidArgumentError("Algorithm name must be a non-empty string")

    def sort_key(self):
        return (self.shape.rank, self.length, self.algorithm_name)

    def __lt__(self, other):
        if not isinstance(other, RunContext):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{{shape={self.shape}, length={self.length}, algorithm={self.algorithm_name}}}"


@dataclass(frozen=True)
class RawResult:
    """One unreduced measurement tagged with the context it was produced under."""

    context: RunContext
    mode: ProfilingMode
    value: Union[int, float]

    def __post_init__(self):
        if not isinstance(self.context, RunContext):
            raise InvalidArgumentError("Context must be a RunContext")
        if not isinstance(self.mode, ProfilingMode):
            raise InvalidArgumentError("Profiling mode must be a ProfilingMode")
        if self.value < 0:
            raise InvalidArgumentError("Result value must not be negative")

    @classmethod
    def from_metric(cls, context: RunContext, metric: Metric) -> "RawResult":
        return cls(context, metric.mode, metric.value)


@dataclass(frozen=True)
class SummaryResult:
    """
    Reduction of every RawResult sharing a context.

    Attributes:
        context: The run context summarized
        mode: Profiling mode of the underlying results
        aggregate: Reduced value
        iterations: Number of raw results in the group before filtering
    """

    context: RunContext
    mode: ProfilingMode
    aggregate: float
    iterations: int

    def __post_init__(self):
        if not isinstance(self.context, RunContext):
            raise InvalidArgumentError("Context must be a RunContext")
        if not isinstance(self.mode, ProfilingMode):
            raise InvalidArgumentError("Profiling mode must be a ProfilingMode")
        if self.aggregate < 0:
            raise InvalidArgumentError("Aggregate must not be negative")
        if self.iterations <= 0:
            raise InvalidArgumentError("Iterations must be positive")
