"""
Flock class - advances a fixed population of boids one tick at a time.

Each tick every boid, in population order, moves along its heading, gets an
optional playhead wobble, is turned back when it leaves the containment
circle, then steers against the neighbors it can see. Boids later in the
order react to the already updated state of earlier ones, so the order of
these steps is part of the result.
"""

import math
from typing import List, Optional, Tuple

import numpy as np

from config.boid_config import BoidConfig
from config.random_source import SeededRandom
from rendering.geometry import Point, rotate, square_distance, bearing_between, nudge_angle
from .boid import Boid
from .bearing_cache import BearingCache
from .profiling import profile


class Flock:
    def __init__(self, config: BoidConfig, rng: SeededRandom, origin: Tuple[float, float]):
        self.config = config
        self.rng = rng
        self.origin = Point(float(origin[0]), float(origin[1]))
        self.boids: List[Boid] = [self._spawn() for _ in range(config.count)]
        self.bearings = BearingCache(len(self.boids))
        self.tick_count = 0
        self._positions = self.snapshot()

    def _spawn(self) -> Boid:
        cfg = self.config
        half = cfg.diameter / 2
        x = self.origin.x + self.rng.uniform(-half, half)
        y = self.origin.y + self.rng.uniform(-half, half)
        z = self.rng.uniform(-cfg.depth_range, cfg.depth_range) if cfg.depth_range > 0 else 0.0
        speed = cfg.base_speed
        if cfg.speed_jitter > 0:
            speed *= self.rng.uniform(1 - cfg.speed_jitter, 1 + cfg.speed_jitter)
        angle = self.rng.uniform(-cfg.angle_range, cfg.angle_range)
        return Boid(x, y, z, speed, angle)

    def snapshot(self) -> np.ndarray:
        """Current positions as an (n, 2) array."""
        return np.array([[b.x, b.y] for b in self.boids], dtype=float).reshape(-1, 2)

    def sync_positions(self):
        """Refresh the position array used for neighbor queries."""
        self._positions = self.snapshot()

    # ==================== TICK ====================

    @profile
    def tick(self, playhead: float = 0.0):
        self.bearings.reset()
        self.sync_positions()

        for index, boid in enumerate(self.boids):
            previous = boid.position
            self.move(index)
            self._wobble(index, playhead)
            self.contain(boid, previous)
            self._steer(index)

        self.tick_count += 1

    def move(self, index: int):
        """Advance by `speed` along `angle`."""
        boid = self.boids[index]
        boid.x, boid.y = rotate(boid.x, boid.y, boid.x + boid.speed, boid.y, boid.angle)
        self._positions[index] = (boid.x, boid.y)

    def _wobble(self, index: int, playhead: float):
        cfg = self.config
        if not cfg.wobble_amplitude:
            return
        wave = math.cos if index % 2 else math.sin
        self.boids[index].angle += wave(playhead * cfg.wobble_frequency) * cfg.wobble_amplitude

    def contain(self, boid: Boid, previous: Point) -> bool:
        """
        Reverse a boid that is outside the containment circle.

        With `boundary_outward_only` a boid is only reversed while it is
        moving away from the origin, so boids sliding along the edge keep
        their course. Returns True when the boid was reversed.
        """
        cfg = self.config
        sq_dist = square_distance(boid, self.origin)
        if sq_dist <= cfg.diameter ** 2:
            return False
        if cfg.boundary_outward_only and square_distance(previous, self.origin) >= sq_dist:
            return False

        if cfg.boundary_kick is not None:
            boid.angle += self.rng.uniform(*cfg.boundary_kick)
        boid.speed = -boid.speed
        return True

    @profile
    def _steer(self, index: int):
        if self.config.neighbor_mode == 'nearest':
            nearest = self.nearest(index)
            candidates = [] if nearest is None else [nearest]
        else:
            candidates = self._in_range(index)

        for other in candidates:
            if self.is_viewing(index, other):
                self.interact(index, other)

    def _in_range(self, index: int) -> np.ndarray:
        diff = self._positions - self._positions[index]
        sq_dist = np.einsum('ij,ij->i', diff, diff)
        return np.flatnonzero(sq_dist <= self.config.fov ** 2)

    def nearest(self, index: int) -> Optional[int]:
        """Index of the closest other boid strictly inside the fov, if any."""
        if len(self.boids) < 2:
            return None
        diff = self._positions - self._positions[index]
        sq_dist = np.einsum('ij,ij->i', diff, diff)
        sq_dist[index] = np.inf
        closest = int(np.argmin(sq_dist))
        if sq_dist[closest] < self.config.fov ** 2:
            return closest
        return None

    # ==================== INTERACTION ====================

    def bearing(self, i: int, j: int) -> float:
        """Bearing from boid i to boid j, memoized for the current tick."""
        if not self.config.cache_bearings:
            return bearing_between(self.boids[i], self.boids[j])

        cached = self.bearings.get(i, j)
        if cached is not None:
            return cached

        theta = bearing_between(self.boids[i], self.boids[j])
        self.bearings.store(i, j, theta)
        return theta

    def is_viewing(self, i: int, j: int) -> bool:
        if i == j:
            return False
        cfg = self.config
        if square_distance(self.boids[i], self.boids[j]) > cfg.fov ** 2:
            return False
        half_view = cfg.angle_of_view / 2
        return -half_view <= self.bearing(i, j) <= half_view

    def interact(self, i: int, j: int):
        """
        Turn boid i according to how far boid j is.

        The fov is split in three bands by `right_spot`: too far steers
        toward j, too close steers away from it (with a fraction of the
        inertia), and in between boid i aligns with j's heading.
        """
        if i == j:
            return
        cfg = self.config
        boid, other = self.boids[i], self.boids[j]

        sq_dist = square_distance(boid, other)
        if sq_dist > cfg.fov ** 2:
            return

        bearing = self.bearing(i, j)
        too_far = cfg.fov * (0.5 + cfg.right_spot / 2)
        too_close = cfg.fov * (0.5 - cfg.right_spot / 2)

        if sq_dist > too_far ** 2:
            target = boid.angle + bearing if cfg.relative_steering else bearing
            inertia = cfg.inertia
        elif sq_dist < too_close ** 2:
            target = boid.angle - bearing if cfg.relative_steering else -bearing
            inertia = cfg.inertia * cfg.close_inertia_ratio
        else:
            target = other.angle
            inertia = cfg.inertia

        boid.angle = nudge_angle(inertia, boid.angle, target)
