"""
Tests for the command-line entry point.
"""

import io
import logging

import pytest

from sortbench.cli import build_parser, main
from sortbench.logging_util import LOGGER_NAME, configure_logging


class TestParser:
    """Test suite for argument parsing."""

    def test_defaults(self):
        """Test default option values."""
        args = build_parser().parse_args(["--sizes", "10,100"])

        assert args.algorithms == "all"
        assert args.types == "RANDOM"
        assert args.sizes == [10, 100]
        assert args.iterations == 5
        assert args.mode == "EXECUTION_TIME"
        assert args.skip == 2
        assert args.seed is None
        assert args.plot is None
        assert args.verbose is False

    def test_sizes_tolerate_blanks(self):
        """Test whitespace and trailing commas in the size list."""
        args = build_parser().parse_args(["-s", " 5, 50 ,"])

        assert args.sizes == [5, 50]

    def test_invalid_sizes_exit(self):
        """Test that a non-numeric size list is an argparse error."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--sizes", "10,ten"])

    def test_sizes_required(self):
        """Test that sizes must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    """Test suite for main."""

    def test_small_run(self, capsys):
        """Test a complete run printing the summary table."""
        exit_code = main(
            [
                "--algorithms", "QuickSort,MergeSort",
                "--types", "sorted,random",
                "--sizes", "8,16",
                "--iterations", "3",
                "--mode", "data_write_count",
                "--seed", "9",
            ]
        )

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Started at" in out
        assert "Benchmark results (invariant parameters above table):" in out
        assert "Profiling Mode: DATA_WRITE_COUNT" in out
        assert "Iterations: 3" in out
        assert "MergeSort" in out
        assert "Benchmark completed at" in out

    def test_plot_option(self, capsys, tmp_path):
        """Test that --plot writes the figure and reports its path."""
        output = tmp_path / "plot.png"

        exit_code = main(
            ["-a", "InsertionSort", "-s", "4,8", "-i", "3", "--plot", str(output)]
        )

        assert exit_code == 0
        assert output.exists()
        assert f"Plot saved as {output}" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv",
        [
            ["-a", "BogoSort", "-s", "10"],
            ["-a", "QuickSort,quicksort", "-s", "10"],
            ["-t", "nearly_sorted", "-s", "10"],
            ["-s", "0"],
            ["-s", "10", "-i", "0"],
            ["-s", "10", "-m", "cpu_cycles"],
            ["-s", "10", "-i", "2", "--skip", "2"],
        ],
    )
    def test_invalid_arguments_return_error(self, capsys, argv):
        """Test that invalid input is reported and yields exit code 1."""
        exit_code = main(argv)

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().out


class TestLogging:
    """Test suite for logging configuration."""

    def test_minimal_format(self):
        """Test bare INFO messages without timestamps."""
        stream = io.StringIO()
        logger = configure_logging(verbose=False, stream=stream)

        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")
        logging.getLogger(f"{LOGGER_NAME}.test").debug("hidden")

        assert logger.level == logging.INFO
        assert stream.getvalue() == "hello\n"

    def test_verbose_format(self):
        """Test timestamped DEBUG messages."""
        stream = io.StringIO()
        logger = configure_logging(verbose=True, stream=stream)

        logging.getLogger(f"{LOGGER_NAME}.test").debug("details")

        assert logger.level == logging.DEBUG
        assert "DEBUG" in stream.getvalue()
        assert "details" in stream.getvalue()

    def test_reconfiguring_replaces_handler(self):
        """Test that repeated configuration keeps a single handler."""
        configure_logging()
        logger = configure_logging(verbose=True)

        assert len(logger.handlers) == 1
        assert logger.propagate is False
