"""
Percolation Threshold - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Dynamic connectivity (weighted quick-union with path compression)
- N-by-N site percolation grids with virtual top/bottom nodes
- Repeated-trial threshold estimation with confidence intervals
- YAML-configured runs and a command-line interface
"""

__version__ = "1.0.0"
