"""
sortbench - benchmarking framework for interchangeable sorting algorithms.

Measures execution time, memory delta or data-write counts across a matrix of
algorithms, input shapes and input sizes, and summarizes the raw measurements
per run context.
"""

__version__ = "1.0.0"
