"""
Benchmark input datasets and their generator.
"""

from .dataset import DataShape, Dataset
from .generate import DatasetFactory

__all__ = ["DataShape", "Dataset", "DatasetFactory"]
