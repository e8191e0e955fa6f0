import logging
import statistics
from typing import Callable, Dict, List, Sequence

from ..errors import InvalidArgumentError, InvalidStateError
from .results import RawResult, RunContext, SummaryResult

logger = logging.getLogger(__name__)

ResultFilter = Callable[[RawResult], bool]
Reducer = Callable[[Sequence[float]], float]


class SkipIterationFilter:
    """
    Skips the first results it is asked about.

    Discards warm-up iterations before aggregation. The filter counts the
    results it has seen, so each group of results needs its own instance.
    """

    def __init__(self, iterations_to_skip: int):
        if (
            not isinstance(iterations_to_skip, int)
            or isinstance(iterations_to_skip, bool)
            or iterations_to_skip < 0
        ):
            raise InvalidArgumentError("Iterations to skip must be a non-negative integer")
        self.iterations_to_skip = iterations_to_skip
        self.iteration_counter = 0

    def __call__(self, result: RawResult) -> bool:
        if result is None:
            raise InvalidArgumentError("Result must not be None")
        self.iteration_counter += 1
        return self.iteration_counter > self.iterations_to_skip


class MedianReducer:
    """
    Median of the values.

    Robust against single outliers such as a garbage collection pause or
    a scheduling hiccup. Even-sized inputs yield the mean of the two middle
    values.
    """

    def __call__(self, values: Sequence[float]) -> float:
        if not values:
            raise InvalidArgumentError("Cannot compute the median of no values")
        return float(statistics.median(values))


class MeanReducer:
    """Arithmetic mean of the values."""

    def __call__(self, values: Sequence[float]) -> float:
        if not values:
            raise InvalidArgumentError("Cannot compute the mean of no values")
        return float(statistics.mean(values))


def accept_all() -> ResultFilter:
    return lambda result: True


DEFAULT_FILTER_FACTORY: Callable[[], ResultFilter] = accept_all
DEFAULT_REDUCER_FACTORY: Callable[[], Reducer] = MedianReducer


def _build(factory: Callable, label: str):
    try:
        product = factory()
    except TypeError as e:
        raise InvalidArgumentError(
            f"{label} factory must be callable without arguments: {e}"
        ) from e

    if product is None:
        raise InvalidStateError(f"{label} factory returned None")
    if not callable(product):
        raise InvalidStateError(f"{label} factory returned a non-callable: {product!r}")
    return product


class ResultAggregator:
    """
    Reduces raw results to one summary per run context.

    Filters and reducers are supplied as factories and a fresh instance of
    each is created for every context group, so stateful filters such as
    SkipIterationFilter apply to every group and not only the first.
    """

    def __init__(
        self,
        filter_factory: Callable[[], ResultFilter] = DEFAULT_FILTER_FACTORY,
        reducer_factory: Callable[[], Reducer] = DEFAULT_REDUCER_FACTORY,
    ):
        """
        Initialize the aggregator.

        Args:
            filter_factory: Zero-argument callable returning a result predicate
            reducer_factory: Zero-argument callable returning a reducer over values
        """
        if not callable(filter_factory):
            raise InvalidArgumentError("Filter factory must be callable")
        if not callable(reducer_factory):
            raise InvalidArgumentError("Reducer factory must be callable")

        # A filter or reducer instance passed in place of its factory fails here
        _build(filter_factory, "Filter")
        _build(reducer_factory, "Reducer")

        self.filter_factory = filter_factory
        self.reducer_factory = reducer_factory

    def process(self, results: List[RawResult]) -> List[SummaryResult]:
        """
        Summarize raw results.

        Args:
            results: Raw results of a single run, all in one profiling mode

        Returns:
            One SummaryResult per run context, sorted by context
        """
        if results is None:
            raise InvalidArgumentError("Results must not be None")
        if len(results) == 0:
            raise InvalidArgumentError("Results must not be empty")
        if any(result is None for result in results):
            raise InvalidArgumentError("Results must not contain None")

        mode = results[0].mode
        if any(result.mode is not mode for result in results):
            raise InvalidArgumentError("All results must have the same profiling mode")

        groups: Dict[RunContext, List[RawResult]] = {}
        for result in results:
            groups.setdefault(result.context, []).append(result)

        summaries = [self._process_group(context, group) for context, group in groups.items()]
        summaries.sort(key=lambda summary: summary.context)

        logger.debug("Aggregated %d result(s) into %d summaries", len(results), len(summaries))
        return summaries

    def _process_group(self, context: RunContext, group: List[RawResult]) -> SummaryResult:
        result_filter = _build(self.filter_factory, "Filter")

        filtered = [result for result in group if result_filter(result)]
        if not filtered:
            raise InvalidArgumentError(f"No results of {context} match the filter criteria")

        reducer = _build(self.reducer_factory, "Reducer")

        aggregate = reducer([result.value for result in filtered])

        # Iteration count reflects the group before filtering
        return SummaryResult(context, group[0].mode, aggregate, len(group))
