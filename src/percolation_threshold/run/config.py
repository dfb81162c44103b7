"""
Simulation configuration.

A SimulationConfig wraps a YAML run definition:

    grid_size: 200
    trials: 100
    seed: 42              # optional
    sampler: permutation  # optional: permutation | rejection
    output: results.csv   # optional per-trial CSV
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from ..percolation.stats import ThresholdEstimator, SAMPLERS


class SimulationConfig:
    """
    Loads and validates a simulation configuration.

    Example:
        config = SimulationConfig.from_yaml('config/run.yaml')
        estimator = config.build_estimator()
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data if data is not None else {}
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'SimulationConfig':
        """Load simulation config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Simulation config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        """Validate required keys and value ranges."""
        if not isinstance(self._data, dict):
            raise ValueError("Simulation config must be a mapping")

        for key in ['grid_size', 'trials']:
            if key not in self._data:
                raise ValueError(f"Missing required config key: '{key}'")
            value = self._data[key]
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"'{key}' must be a positive integer, got {value!r}")

        seed = self._data.get('seed')
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
            raise ValueError(f"'seed' must be an integer, got {seed!r}")
        if seed is not None and seed < 0:
            raise ValueError(f"'seed' must be non-negative, got {seed}")

        if self.sampler not in SAMPLERS:
            raise ValueError(f"'sampler' must be one of {SAMPLERS}, got {self.sampler!r}")

    # --- Properties ---

    @property
    def grid_size(self) -> int:
        return self._data['grid_size']

    @property
    def trials(self) -> int:
        return self._data['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')

    @property
    def sampler(self) -> str:
        return self._data.get('sampler', 'permutation')

    @property
    def output(self) -> Optional[Path]:
        output = self._data.get('output')
        return Path(output) if output else None

    def build_estimator(self, verbose: bool = False) -> ThresholdEstimator:
        """Run the configured simulation."""
        return ThresholdEstimator(
            self.grid_size,
            self.trials,
            seed=self.seed,
            sampler=self.sampler,
            verbose=verbose,
        )
