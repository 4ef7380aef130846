"""
Bounded history of flock positions for trail rendering.
"""

from collections import deque
from typing import List

import numpy as np

from rendering.geometry import Point


class HistoryBuffer:
    """FIFO of (n_boids, 2) position snapshots, capped at `capacity` frames."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._frames = deque()

    def push(self, snapshot: np.ndarray):
        self._frames.append(np.array(snapshot, dtype=float))
        while len(self._frames) > self.capacity:
            self._frames.popleft()

    def trails(self) -> List[List[Point]]:
        """One line per boid through its retained positions, oldest first."""
        if not self._frames:
            return []
        stacked = np.stack(self._frames, axis=1)  # (n_boids, frames, 2)
        return [[Point(float(x), float(y)) for x, y in track] for track in stacked]

    def frames(self) -> List[np.ndarray]:
        return list(self._frames)

    def __len__(self) -> int:
        return len(self._frames)
