import logging
from typing import Callable, Dict, List, Mapping, Optional

from ..algorithms import AVAILABLE_ALGORITHMS, SortAlgorithm
from ..config import BenchmarkConfig, ValidatedConfig, validate_config
from ..data.dataset import DataShape, Dataset
from ..data.generate import DatasetFactory
from ..errors import InvalidStateError
from .profiler import Profiler
from .results import RawResult, RunContext
from .sorter import Sorter

logger = logging.getLogger(__name__)

AlgorithmFactory = Callable[[Profiler], SortAlgorithm]


class BenchmarkRunner:
    """
    Expands a configuration into the full run matrix and executes it.

    Every algorithm is run on the same pre-generated datasets, each
    invocation receiving its own copy. Execution is strictly sequential: one
    algorithm, one dataset and one profiler cycle at a time.
    """

    def __init__(
        self,
        registry: Optional[Mapping[str, AlgorithmFactory]] = None,
        data_factory: Optional[DatasetFactory] = None,
    ):
        """
        Initialize the runner.

        Args:
            registry: Maps algorithm names to factories taking a Profiler,
                      AVAILABLE_ALGORITHMS by default
            data_factory: Generator of input datasets
        """
        self.registry = AVAILABLE_ALGORITHMS if registry is None else registry
        self.data_factory = data_factory if data_factory is not None else DatasetFactory()
        self.total_steps: int = 0
        self.current_step: int = 0

    def run(self, config: BenchmarkConfig) -> List[RawResult]:
        """
        Run the complete benchmark matrix.

        Args:
            config: The benchmark configuration

        Returns:
            One RawResult per (algorithm, shape, size, iteration), ordered by
            algorithm, then shape, then size, then iteration
        """
        validated = validate_config(config, self.registry)

        profiler = Profiler(validated.profiling_mode)
        algorithms = self._instantiate_algorithms(validated.algorithms, profiler)
        datasets = self._generate_datasets(validated)
        sorter = Sorter()

        self.total_steps = (
            len(algorithms) * len(validated.shapes) * len(validated.sizes) * validated.iterations
        )
        self.current_step = 0

        logger.info(
            "Running %d algorithm(s) on %d shape(s) and %d size(s), %d iteration(s) each [%s]",
            len(algorithms),
            len(validated.shapes),
            len(validated.sizes),
            validated.iterations,
            validated.profiling_mode,
        )

        results: List[RawResult] = []
        for algorithm in algorithms:
            sorter.set_algorithm(algorithm)
            for shape in validated.shapes:
                for size in validated.sizes:
                    context = RunContext(shape, size, algorithm.name)
                    for dataset in datasets[size][shape]:
                        results.append(self._run_single(sorter, profiler, context, dataset))

        logger.info("Benchmark completed with %d raw result(s)", len(results))
        return results

    def _run_single(
        self, sorter: Sorter, profiler: Profiler, context: RunContext, dataset: Dataset
    ) -> RawResult:
        self.current_step += 1
        profiler.reset()

        array = dataset.data
        metric = sorter.sort(array)

        logger.debug(
            "[%d/%d] %s -> %s", self.current_step, self.total_steps, context, metric.value
        )
        return RawResult.from_metric(context, metric)

    def _instantiate_algorithms(
        self, names: List[str], profiler: Profiler
    ) -> List[SortAlgorithm]:
        algorithms = []
        for name in names:
            factory = self.registry[name]
            try:
                algorithm = factory(profiler)
            except Exception as e:
                raise InvalidStateError(f"Failed to instantiate algorithm {name}: {e}") from e

            if not isinstance(algorithm, SortAlgorithm):
                raise InvalidStateError(
                    f"Factory for {name} did not produce a SortAlgorithm: {algorithm!r}"
                )
            algorithms.append(algorithm)
        return algorithms

    def _generate_datasets(
        self, config: ValidatedConfig
    ) -> Dict[int, Dict[DataShape, List[Dataset]]]:
        """Generate every dataset of the run up front, grouped by size."""
        datasets: Dict[int, Dict[DataShape, List[Dataset]]] = {}
        for size in config.sizes:
            datasets[size] = {
                shape: [
                    self.data_factory.create_data(shape, size)
                    for _ in range(config.iterations)
                ]
                for shape in config.shapes
            }
            logger.debug(
                "Generated %d dataset(s) of size %d",
                len(config.shapes) * config.iterations,
                size,
            )
        return datasets
