import logging
import os
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import psutil

from ..errors import InvalidArgumentError, InvalidStateError

logger = logging.getLogger(__name__)


class ProfilingMode(Enum):
    """Metric dimension recorded by a Profiler."""

    NONE = "NONE"
    MEMORY_USAGE = "MEMORY_USAGE"
    DATA_WRITE_COUNT = "DATA_WRITE_COUNT"
    EXECUTION_TIME = "EXECUTION_TIME"

    @classmethod
    def from_string(cls, value: str) -> "ProfilingMode":
        """Parse a profiling mode name, ignoring case and surrounding blanks."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError("Profiling mode must be a non-blank string")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown profiling mode: {value}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Metric:
    """
    Single-iteration output of a Profiler.

    Attributes:
        mode: Profiling mode the value was recorded in
        value: Non-negative measurement (ms, KiB or write count)
    """

    mode: ProfilingMode
    value: Union[int, float]

    def __post_init__(self):
        if not isinstance(self.mode, ProfilingMode):
            raise InvalidArgumentError("Profiling mode must be a ProfilingMode")
        if self.value < 0:
            raise InvalidArgumentError("Metric value must not be negative")


class Profiler:
    """
    Measures exactly one metric per start/stop cycle.

    The profiler is a two-state machine (idle, profiling). Sort algorithms
    bracket their whole run with start() and stop() and report data writes
    and memory checkpoints in between. Only the hooks matching the configured
    mode accumulate anything; the others are accepted and ignored.

    A profiler is owned by a single execution chain and must not be shared
    between algorithms running at the same time.
    """

    def __init__(self, mode: ProfilingMode):
        """
        Initialize the profiler.

        Args:
            mode: The profiling mode to record
        """
        if not isinstance(mode, ProfilingMode):
            raise InvalidArgumentError("Profiling mode must be a ProfilingMode")

        self._mode = mode
        self._profiling = False
        self._process = psutil.Process(os.getpid())
        self._clear()
        logger.debug("Profiler created with mode %s", mode)

    @property
    def mode(self) -> ProfilingMode:
        return self._mode

    @property
    def is_profiling(self) -> bool:
        return self._profiling

    def start(self) -> None:
        """Begin a measurement cycle."""
        if self._profiling:
            raise InvalidStateError("Profiling is already in progress")

        self._profiling = True

        if self._mode is ProfilingMode.EXECUTION_TIME:
            self._start_ns = time.perf_counter_ns()
            self._stop_ns = None
        elif self._mode is ProfilingMode.MEMORY_USAGE:
            self._initial_memory_kb = self._used_memory_kb()
            self._peak_memory_kb = self._initial_memory_kb

    def stop(self) -> None:
        """End the current measurement cycle."""
        if not self._profiling:
            raise InvalidStateError("Profiling is not in progress")

        if self._mode is ProfilingMode.EXECUTION_TIME:
            self._stop_ns = time.perf_counter_ns()
        elif self._mode is ProfilingMode.MEMORY_USAGE:
            self._peak_memory_kb = max(self._peak_memory_kb, self._used_memory_kb())

        self._profiling = False

    def sample_memory(self) -> None:
        """Record an intermediate memory checkpoint."""
        if not self._profiling:
            raise InvalidStateError("Memory can only be sampled while profiling")

        if self._mode is ProfilingMode.MEMORY_USAGE:
            self._peak_memory_kb = max(self._peak_memory_kb, self._used_memory_kb())

    def report_operations(self, count: int) -> None:
        """
        Report data writes performed by the algorithm.

        Args:
            count: Number of element writes, must be non-negative
        """
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            raise InvalidArgumentError("Operation count must be a non-negative integer")
        if not self._profiling:
            raise InvalidStateError("Operations can only be reported while profiling")

        if self._mode is ProfilingMode.DATA_WRITE_COUNT:
            self._write_count += count

    def report_swap(self) -> None:
        """A swap writes two elements."""
        self.report_operations(2)

    def report_write(self, count: int = 1) -> None:
        self.report_operations(count)

    def reset(self) -> None:
        """Discard everything accumulated by previous cycles."""
        if self._profiling:
            raise InvalidStateError("Cannot reset while profiling is in progress")
        self._clear()

    def metric(self) -> Metric:
        """
        Get the metric of the last completed cycle.

        Returns:
            A Metric for the configured mode, zero-valued if no cycle has
            completed since construction or the last reset
        """
        if self._profiling:
            raise InvalidStateError("Cannot read the metric while profiling is in progress")

        if self._mode is ProfilingMode.EXECUTION_TIME:
            if self._start_ns is None or self._stop_ns is None:
                return Metric(self._mode, 0.0)
            return Metric(self._mode, (self._stop_ns - self._start_ns) / 1e6)

        if self._mode is ProfilingMode.MEMORY_USAGE:
            return Metric(self._mode, max(self._peak_memory_kb - self._initial_memory_kb, 0))

        if self._mode is ProfilingMode.DATA_WRITE_COUNT:
            return Metric(self._mode, self._write_count)

        return Metric(self._mode, 0)

    def _clear(self) -> None:
        self._start_ns: Optional[int] = None
        self._stop_ns: Optional[int] = None
        self._initial_memory_kb = 0
        self._peak_memory_kb = 0
        self._write_count = 0

    def _used_memory_kb(self) -> int:
        return self._process.memory_info().rss // 1024
