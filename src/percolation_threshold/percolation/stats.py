"""
Monte Carlo estimate of the percolation threshold.

Each trial starts from a fresh, fully blocked PercolationGrid and opens
uniformly random blocked sites until the system percolates. The fraction of
open sites at that moment is one sample of the threshold p*. Over all trials
we report the sample mean, the sample standard deviation and a 95% confidence
interval for the mean.

The confidence interval uses the normal approximation
mean +/- 1.96 * stddev / sqrt(trials). It assumes enough trials for the
central limit theorem to apply (roughly trials >= 30); this is not enforced.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import pandas as pd

from .grid import PercolationGrid, check_positive_int


CONFIDENCE_Z = 1.96

SAMPLERS = ('permutation', 'rejection')


def _run_permutation_trial(grid: PercolationGrid, rng: np.random.Generator) -> int:
    """Open sites in the order of a random permutation (shrinking blocked pool)."""
    n = grid.n
    opened = 0
    for site in rng.permutation(n * n):
        row, col = divmod(int(site), n)
        grid.open(row, col)
        opened += 1
        if grid.percolates():
            break
    return opened


def _run_rejection_trial(grid: PercolationGrid, rng: np.random.Generator) -> int:
    """Pick uniformly over all sites, retrying on sites that are already open."""
    n = grid.n
    opened = 0
    while not grid.percolates():
        row = int(rng.integers(0, n))
        col = int(rng.integers(0, n))
        if not grid.is_open(row, col):
            grid.open(row, col)
            opened += 1
    return opened


_TRIAL_RUNNERS = {
    'permutation': _run_permutation_trial,
    'rejection': _run_rejection_trial,
}


class ThresholdEstimator:
    """
    Runs `trials` independent percolation experiments on an n-by-n grid.

    All trials run eagerly on construction; the statistics are read-only
    afterwards. Results are reproducible for a fixed seed (or a Generator in
    a fixed state).

    Example:
        est = ThresholdEstimator(200, 100, seed=42)
        est.mean(), est.stddev()
        est.confidence_lo(), est.confidence_hi()
    """

    def __init__(self, n: int, trials: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 sampler: str = 'permutation', verbose: bool = False):
        """
        Run the experiments.

        Args:
            n: Grid dimension (must be > 0)
            trials: Number of independent trials (must be > 0)
            seed: Seed for a fresh numpy Generator (ignored if rng is given)
            rng: Random source; draws use rng.integers(low, high), i.e. [low, high)
            sampler: 'permutation' (default) or 'rejection'
            verbose: Print each trial's fraction as it completes
        """
        n = check_positive_int(n, "Grid size")
        trials = check_positive_int(trials, "Number of trials")
        if seed is not None and seed < 0:
            raise ValueError(f"Seed must be non-negative, got {seed}")
        if sampler not in _TRIAL_RUNNERS:
            raise ValueError(f"Unknown sampler '{sampler}', expected one of {SAMPLERS}")

        self.n = n
        self.trials = trials
        self.sampler = sampler
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        run_trial = _TRIAL_RUNNERS[sampler]
        n_sites = self.n * self.n
        self._opened = np.zeros(self.trials, dtype=np.int64)
        self._fractions = np.zeros(self.trials, dtype=np.float64)

        for i in range(self.trials):
            grid = PercolationGrid(self.n)
            self._opened[i] = run_trial(grid, self.rng)
            self._fractions[i] = self._opened[i] / n_sites
            if verbose:
                print(f"  Trial {i + 1}/{self.trials}: {self._fractions[i]}")

    @property
    def fractions(self) -> np.ndarray:
        """Per-trial fraction of open sites at percolation (copy)."""
        return self._fractions.copy()

    @property
    def opened_counts(self) -> np.ndarray:
        """Per-trial number of opened sites at percolation (copy)."""
        return self._opened.copy()

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return float(np.mean(self._fractions))

    def stddev(self) -> float:
        """
        Sample standard deviation of the percolation threshold.

        Divides by trials - 1. With a single trial the value is undefined and
        nan is returned (not 0).
        """
        if self.trials == 1:
            return float('nan')
        return float(np.std(self._fractions, ddof=1))

    def _half_width(self) -> float:
        return CONFIDENCE_Z * self.stddev() / np.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval (nan for one trial)."""
        return float(self.mean() - self._half_width())

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval (nan for one trial)."""
        return float(self.mean() + self._half_width())

    def summary(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }

    def to_dataframe(self) -> pd.DataFrame:
        """
        Per-trial results as a DataFrame.

        Returns:
            DataFrame with columns trial (1-based), opened_sites, fraction
        """
        return pd.DataFrame({
            'trial': np.arange(1, self.trials + 1),
            'opened_sites': self._opened,
            'fraction': self._fractions,
        })

    def save_results(self, filename: Union[str, Path]) -> Path:
        """
        Write per-trial results to CSV.

        Args:
            filename: Output .csv path (parent directories are created)

        Returns:
            Path to the written file
        """
        filename = Path(filename)
        filename.parent.mkdir(parents=True, exist_ok=True)
        self.to_dataframe().to_csv(filename, index=False)
        return filename
