"""
Per-tick memo of bearings between boid pairs, keyed by population index.
"""

from typing import Optional

import numpy as np


class BearingCache:
    def __init__(self, size: int):
        self._values = np.full((size, size), np.nan)

    def reset(self):
        self._values.fill(np.nan)

    def get(self, i: int, j: int) -> Optional[float]:
        value = self._values[i, j]
        if not np.isnan(value):
            return float(value)
        value = self._values[j, i]
        if not np.isnan(value):
            return -float(value)
        return None

    def store(self, i: int, j: int, bearing: float):
        self._values[i, j] = bearing
        self._values[j, i] = -bearing

    def __len__(self) -> int:
        return int(np.count_nonzero(~np.isnan(self._values)))
