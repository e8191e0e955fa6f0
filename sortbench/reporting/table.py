from typing import Dict, List, Union

from ..benchmark.results import SummaryResult
from ..errors import InvalidArgumentError

COLUMN_TITLES = [
    "Algorithm",
    "Data Type",
    "Data Size",
    "Profiling Mode",
    "Aggregate",
    "Iterations",
]

FLOAT_DECIMALS = 2
NO_RESULTS_MESSAGE = "No benchmark results to format."
TOO_FEW_ROWS_MESSAGE = "Table formatting requires at least two results."


def _is_printable_ascii(char: str) -> bool:
    return isinstance(char, str) and len(char) == 1 and 32 <= ord(char) <= 126


class AsciiTableFormatter:
    """
    Renders summary results as a plain-text table.

    Columns whose value is the same for every result are listed above the
    table as "Title: value"; only the columns that vary become table columns.
    """

    def __init__(self, title_row_delimiter: str = "-", column_delimiter: str = "|"):
        if not _is_printable_ascii(title_row_delimiter):
            raise InvalidArgumentError("Title row delimiter must be a printable ASCII character")
        if not _is_printable_ascii(column_delimiter):
            raise InvalidArgumentError("Column delimiter must be a printable ASCII character")

        self.title_row_delimiter = title_row_delimiter
        self.column_delimiter = column_delimiter

    def format(self, results: List[SummaryResult]) -> str:
        """
        Format summary results.

        Args:
            results: Summary results, typically as returned by ResultAggregator

        Returns:
            The invariant parameters followed by the table, as one string
        """
        if results is None:
            raise InvalidArgumentError("Results must not be None")
        if not results:
            return NO_RESULTS_MESSAGE

        columns = self._to_columns(results)
        variable = {title: len(set(values)) > 1 for title, values in columns.items()}
        widths = {
            title: max(len(title), *(len(value) for value in values))
            for title, values in columns.items()
        }

        lines = ["Benchmark results (invariant parameters above table):"]
        for title in COLUMN_TITLES:
            if not variable[title]:
                lines.append(f"{title}: {columns[title][0]}")

        lines.append("")
        if len(results) < 2:
            lines.append(TOO_FEW_ROWS_MESSAGE)
            return "\n".join(lines) + "\n"

        shown = [title for title in COLUMN_TITLES if variable[title]]
        delimiter = self.column_delimiter

        lines.append(
            "".join(f"{delimiter} {title:>{widths[title]}} " for title in shown) + delimiter
        )
        lines.append(
            "".join(
                f"{delimiter}{self.title_row_delimiter * (widths[title] + 2)}" for title in shown
            )
            + delimiter
        )
        for row in range(len(results)):
            lines.append(
                "".join(f"{delimiter} {columns[title][row]:>{widths[title]}} " for title in shown)
                + delimiter
            )

        return "\n".join(lines) + "\n"

    def _to_columns(self, results: List[SummaryResult]) -> Dict[str, List[str]]:
        return {
            "Algorithm": [r.context.algorithm_name for r in results],
            "Data Type": [str(r.context.shape) for r in results],
            "Data Size": [format_number(r.context.length) for r in results],
            "Profiling Mode": [str(r.mode) for r in results],
            "Aggregate": [format_number(r.aggregate) for r in results],
            "Iterations": [format_number(r.iterations) for r in results],
        }


def format_number(number: Union[int, float]) -> str:
    """Group digits; floats keep two decimals."""
    if number is None:
        raise InvalidArgumentError("Number must not be None")
    if isinstance(number, float):
        return f"{number:,.{FLOAT_DECIMALS}f}"
    return f"{number:,}"
