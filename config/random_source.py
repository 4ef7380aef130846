"""
Seeded random source shared by a sketch run.
"""

from typing import Optional

import numpy as np

MAX_SEED = 1_000_000


def random_seed() -> int:
    """Draw a fresh seed for runs started without one."""
    return int(np.random.default_rng().integers(0, MAX_SEED + 1))


class SeededRandom:
    """Deterministic float source: the same seed yields the same sequence."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = random_seed() if seed is None else int(seed)
        self._rng = np.random.default_rng(self.seed)

    def random(self) -> float:
        """Float in [0, 1)."""
        return float(self._rng.random())

    def uniform(self, low: float, high: float) -> float:
        """Float in [low, high)."""
        return low + self.random() * (high - low)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed})"
