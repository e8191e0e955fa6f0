"""
Command-line benchmark runner for sort algorithms.

Usage examples:
    python -m sortbench --sizes 100,1000
    sortbench --algorithms QuickSort,MergeSort --types random,sorted --sizes 100,500,1000
    sortbench --mode data_write_count --sizes 1000 --iterations 7 --plot writes.png
"""

import argparse
import logging
import sys
from datetime import datetime
from functools import partial
from typing import List, Optional

from .benchmark.aggregator import MedianReducer, ResultAggregator, SkipIterationFilter
from .benchmark.profiler import ProfilingMode
from .benchmark.runner import BenchmarkRunner
from .config import BenchmarkConfig, parse_shapes, select_algorithms
from .data.generate import DatasetFactory
from .errors import InvalidArgumentError, InvalidStateError
from .logging_util import configure_logging
from .reporting.plots import plot_summary
from .reporting.table import AsciiTableFormatter

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 5
WARMUP_ITERATIONS_TO_SKIP = 2


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_sizes(value: str) -> List[int]:
    try:
        return [int(item) for item in _split(value)]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size list: {value}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench", description="Benchmark sort algorithms"
    )
    parser.add_argument(
        "-a",
        "--algorithms",
        default="all",
        help="Comma-separated list of algorithms to benchmark, or 'all'",
    )
    parser.add_argument(
        "-t",
        "--types",
        default="RANDOM",
        help="Comma-separated list of data types (random, sorted, reversed, partially_sorted)",
    )
    parser.add_argument(
        "-s",
        "--sizes",
        type=_parse_sizes,
        required=True,
        help="Comma-separated list of input sizes",
    )
    parser.add_argument(
        "-i",
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help="Number of iterations per algorithm, data type and size",
    )
    parser.add_argument(
        "-m",
        "--mode",
        default=ProfilingMode.EXECUTION_TIME.value,
        help="Profiling mode (execution_time, memory_usage, data_write_count, none)",
    )
    parser.add_argument(
        "--skip",
        type=int,
        default=WARMUP_ITERATIONS_TO_SKIP,
        help="Number of warm-up iterations discarded per run context",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for data generation")
    parser.add_argument("--plot", default=None, help="Save a summary plot to this path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = BenchmarkConfig(
            algorithms=select_algorithms(_split(args.algorithms)),
            shapes=parse_shapes(_split(args.types)),
            sizes=args.sizes,
            iterations=args.iterations,
            profiling_mode=ProfilingMode.from_string(args.mode),
        )

        print(f"Started at {datetime.now().strftime('%H:%M:%S')}")
        runner = BenchmarkRunner(data_factory=DatasetFactory(seed=args.seed))
        results = runner.run(config)

        aggregator = ResultAggregator(
            filter_factory=partial(SkipIterationFilter, args.skip),
            reducer_factory=MedianReducer,
        )
        summaries = aggregator.process(results)

        print(AsciiTableFormatter().format(summaries))

        if args.plot:
            path = plot_summary(summaries, output_path=args.plot)
            print(f"Plot saved as {path}")

        print(f"Benchmark completed at {datetime.now().strftime('%H:%M:%S')}")

    except (InvalidArgumentError, InvalidStateError) as e:
        logger.debug("Benchmark aborted", exc_info=True)
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
