"""Site percolation model and threshold estimation."""

from .union_find import WeightedQuickUnionUF
from .grid import PercolationGrid
from .stats import ThresholdEstimator

__all__ = ['WeightedQuickUnionUF', 'PercolationGrid', 'ThresholdEstimator']
