"""
Benchmarking module for sort algorithms.

This module provides the profiler, the execution context, the result value
objects and the aggregation of raw measurements. The matrix runner lives in
sortbench.benchmark.runner.
"""

from .aggregator import (
    DEFAULT_FILTER_FACTORY,
    DEFAULT_REDUCER_FACTORY,
    MeanReducer,
    MedianReducer,
    ResultAggregator,
    SkipIterationFilter,
)
from .profiler import Metric, Profiler, ProfilingMode
from .results import RawResult, RunContext, SummaryResult
from .sorter import Sorter

__all__ = [
    "DEFAULT_FILTER_FACTORY",
    "DEFAULT_REDUCER_FACTORY",
    "MeanReducer",
    "MedianReducer",
    "Metric",
    "Profiler",
    "ProfilingMode",
    "RawResult",
    "ResultAggregator",
    "RunContext",
    "SkipIterationFilter",
    "Sorter",
    "SummaryResult",
]
