from pathlib import Path
from typing import Dict, List, Optional, Union

import matplotlib.pyplot as plt

from ..benchmark.profiler import ProfilingMode
from ..benchmark.results import SummaryResult
from ..data.dataset import DataShape
from ..errors import InvalidArgumentError

YLABELS = {
    ProfilingMode.NONE: "Value",
    ProfilingMode.MEMORY_USAGE: "Memory (KiB)",
    ProfilingMode.DATA_WRITE_COUNT: "Data Writes",
    ProfilingMode.EXECUTION_TIME: "Time (ms)",
}

MARKERS = ["o", "s", "^", "d", "h", "v", "*"]


def plot_summary(
    results: List[SummaryResult],
    output_path: Optional[Union[str, Path]] = None,
    show: bool = False,
) -> Optional[Path]:
    """
    Plot aggregate against input size, one line per algorithm and one
    panel per data shape.

    Args:
        results: Summary results of a single run
        output_path: Where to save the PNG, nothing is saved if None
        show: Whether to display the figure interactively

    Returns:
        The path the figure was saved to, or None
    """
    if not results:
        raise InvalidArgumentError("Results must not be empty")

    mode = results[0].mode
    shapes = sorted({r.context.shape for r in results}, key=lambda shape: shape.rank)

    series: Dict[DataShape, Dict[str, List[SummaryResult]]] = {shape: {} for shape in shapes}
    for result in sorted(results, key=lambda r: r.context):
        series[result.context.shape].setdefault(result.context.algorithm_name, []).append(result)

    fig, axes = plt.subplots(
        1, len(shapes), figsize=(6 * len(shapes), 5), squeeze=False, sharey=True
    )

    for ax, shape in zip(axes[0], shapes):
        for i, (name, points) in enumerate(series[shape].items()):
            ax.plot(
                [p.context.length for p in points],
                [p.aggregate for p in points],
                f"{MARKERS[i % len(MARKERS)]}-",
                label=name,
                linewidth=2,
                markersize=6,
            )
        ax.set_title(str(shape))
        ax.set_xlabel("Input Size (N)")
        ax.grid(True, alpha=0.3)
        ax.legend()

    axes[0][0].set_ylabel(YLABELS[mode])
    fig.suptitle(f"Sort Benchmark - {mode}")
    fig.tight_layout()

    saved_path = None
    if output_path is not None:
        saved_path = Path(output_path)
        fig.savefig(saved_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()
    else:
        plt.close(fig)

    return saved_path
