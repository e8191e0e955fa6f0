"""
Rendering of summary results as text tables and plots.
"""

from .plots import plot_summary
from .table import AsciiTableFormatter, format_number

__all__ = ["AsciiTableFormatter", "format_number", "plot_summary"]
