"""
Tests for the flock simulation.

Boids are placed by hand through the `make_flock` fixture, which takes
(x, y, speed, angle) tuples and BoidConfig overrides.
"""

import math

import numpy as np
import pytest

from boids import Boid, Flock
from config import BoidConfig, SeededRandom, get_boid_preset
from rendering.geometry import Point


class TestSpawn:
    """Initial population."""

    def test_same_seed_same_flock(self):
        config = BoidConfig(count=25)
        a = Flock(config, SeededRandom(7), (10, 10))
        b = Flock(config, SeededRandom(7), (10, 10))
        assert np.array_equal(a.snapshot(), b.snapshot())
        assert [boid.angle for boid in a.boids] == [boid.angle for boid in b.boids]
        assert [boid.speed for boid in a.boids] == [boid.speed for boid in b.boids]

    def test_different_seed_different_flock(self):
        config = BoidConfig(count=25)
        a = Flock(config, SeededRandom(7), (10, 10))
        b = Flock(config, SeededRandom(8), (10, 10))
        assert not np.array_equal(a.snapshot(), b.snapshot())

    def test_spawn_ranges(self):
        config = BoidConfig(count=100)
        flock = Flock(config, SeededRandom(3), (10, 20))
        half = config.diameter / 2
        for boid in flock.boids:
            assert 10 - half <= boid.x < 10 + half
            assert 20 - half <= boid.y < 20 + half
            assert -config.depth_range <= boid.z < config.depth_range
            assert -config.angle_range <= boid.angle < config.angle_range
            low = config.base_speed * (1 - config.speed_jitter)
            high = config.base_speed * (1 + config.speed_jitter)
            assert low <= boid.speed <= high

    def test_snapshot_shape(self):
        flock = Flock(BoidConfig(count=12), SeededRandom(1), (0, 0))
        assert flock.snapshot().shape == (12, 2)

    def test_empty_flock_ticks(self):
        flock = Flock(BoidConfig(count=0), SeededRandom(1), (0, 0))
        flock.tick(0.5)
        assert flock.snapshot().shape == (0, 2)
        assert flock.tick_count == 1


class TestMovement:

    def test_single_boid_moves_straight(self, make_flock):
        """Without neighbors a boid heading 0 advances by speed along x each tick."""
        flock = make_flock([(1.0, 2.0, 0.25, 0.0)], fov=0.0, diameter=1000.0)
        for _ in range(20):
            flock.tick()
        boid = flock.boids[0]
        assert boid.x == pytest.approx(1.0 + 20 * 0.25)
        assert boid.y == pytest.approx(2.0)
        assert boid.angle == 0.0

    def test_move_follows_heading(self, make_flock):
        flock = make_flock([(0.0, 0.0, 2.0, 90.0)])
        flock.move(0)
        assert flock.boids[0].x == pytest.approx(0.0, abs=1e-12)
        assert flock.boids[0].y == pytest.approx(2.0)
        assert tuple(flock._positions[0]) == (flock.boids[0].x, flock.boids[0].y)

    def test_wobble_alternates_sine_and_cosine(self, make_flock):
        flock = make_flock(
            [(0.0, 0.0, 0.0, 0.0), (500.0, 0.0, 0.0, 0.0)],
            fov=0.0, diameter=1000.0, wobble_amplitude=4.0, wobble_frequency=10.0
        )
        flock.tick(0.1)
        assert flock.boids[0].angle == pytest.approx(math.sin(1.0) * 4.0)
        assert flock.boids[1].angle == pytest.approx(math.cos(1.0) * 4.0)


class TestContainment:
    """Turning back boids that leave the containment circle."""

    def test_inside_circle_not_reversed(self, make_flock):
        flock = make_flock([(4.0, 3.0, 1.0, 0.0)], diameter=5.0)
        assert not flock.contain(flock.boids[0], Point(3.0, 4.0))
        assert flock.boids[0].speed == 1.0

    def test_orbiting_at_constant_radius_not_reversed(self, make_flock):
        flock = make_flock([(4.0, 3.0, 1.0, 0.0)], diameter=4.9)
        assert not flock.contain(flock.boids[0], Point(3.0, 4.0))
        assert flock.boids[0].speed == 1.0

    def test_moving_inward_not_reversed(self, make_flock):
        flock = make_flock([(5.5, 0.0, 1.0, 0.0)], diameter=5.0)
        assert not flock.contain(flock.boids[0], Point(6.0, 0.0))
        assert flock.boids[0].speed == 1.0

    def test_moving_outward_reversed_with_kick(self, make_flock):
        flock = make_flock([(6.0, 0.0, 1.0, 30.0)], diameter=5.0)
        assert flock.contain(flock.boids[0], Point(5.0, 0.0))
        boid = flock.boids[0]
        assert boid.speed == -1.0
        assert 30.0 - 90.0 <= boid.angle <= 30.0

    def test_always_flip_reverses_inward_motion(self, make_flock):
        flock = make_flock(
            [(5.5, 0.0, 1.0, 30.0)],
            diameter=5.0, boundary_outward_only=False, boundary_kick=None
        )
        assert flock.contain(flock.boids[0], Point(6.0, 0.0))
        assert flock.boids[0].speed == -1.0
        assert flock.boids[0].angle == 30.0

    def test_reversal_during_tick(self, make_flock):
        flock = make_flock([(4.9, 0.0, 0.5, 0.0)], diameter=5.0, fov=0.0)
        flock.tick()
        assert flock.boids[0].speed == -0.5


class TestVisibility:

    def test_self_never_visible(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0)], angle_of_view=360.0)
        assert not flock.is_viewing(0, 0)

    def test_inside_fov_and_angle(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (1.0, 0.5, 0.0, 0.0)], fov=2.0, angle_of_view=100.0)
        assert flock.is_viewing(0, 1)

    def test_outside_angle_of_view(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0)], fov=2.0, angle_of_view=100.0)
        assert not flock.is_viewing(0, 1)

    def test_outside_fov(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (3.0, 0.0, 0.0, 0.0)], fov=2.0, angle_of_view=360.0)
        assert not flock.is_viewing(0, 1)

    def test_fov_boundary_is_inclusive(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (2.0, 0.0, 0.0, 0.0)], fov=2.0, angle_of_view=360.0)
        assert flock.is_viewing(0, 1)


class TestBearingCache:
    """Per-tick memo of pair bearings."""

    def test_pairs_antisymmetric(self, rng):
        flock = Flock(BoidConfig(count=8), rng, (0, 0))
        for i in range(8):
            for j in range(8):
                if i != j:
                    assert flock.bearing(i, j) == pytest.approx(-flock.bearing(j, i))
        # Again, now served from the cache
        for i in range(8):
            for j in range(8):
                if i != j:
                    assert flock.bearing(i, j) == pytest.approx(-flock.bearing(j, i))

    def test_store_fills_both_directions(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0)])
        assert flock.bearings.get(0, 1) is None
        assert flock.bearing(0, 1) == pytest.approx(90.0)
        assert len(flock.bearings) == 2
        assert flock.bearings.get(1, 0) == pytest.approx(-90.0)

    def test_cleared_every_tick(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0)], fov=0.0, diameter=100.0)
        flock.bearing(0, 1)
        flock.tick()
        assert len(flock.bearings) == 0

    def test_uncached_mode_leaves_cache_empty(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0)], cache_bearings=False)
        assert flock.bearing(0, 1) == pytest.approx(90.0)
        assert len(flock.bearings) == 0


class TestSteering:
    """The three distance bands of `interact`."""

    FOV = 10.0

    def _pair(self, make_flock, dy, **overrides):
        return make_flock(
            [(0.0, 0.0, 0.0, 10.0), (0.0, dy, 0.0, -40.0)],
            fov=self.FOV, angle_of_view=360.0, inertia=1.0, right_spot=0.8, **overrides
        )

    def test_too_far_turns_toward(self, make_flock):
        flock = self._pair(make_flock, 0.95 * self.FOV)
        flock.interact(0, 1)
        assert flock.boids[0].angle == pytest.approx((10.0 + 10.0 + 90.0) / 2)

    def test_too_close_turns_away_faster(self, make_flock):
        flock = self._pair(make_flock, 0.05 * self.FOV)
        flock.interact(0, 1)
        assert flock.boids[0].angle == pytest.approx((10.0 * 0.1 + 10.0 - 90.0) / 1.1)

    def test_comfortable_band_aligns(self, make_flock):
        flock = self._pair(make_flock, 0.5 * self.FOV)
        flock.interact(0, 1)
        assert flock.boids[0].angle == pytest.approx((10.0 - 40.0) / 2)

    def test_absolute_steering_targets_bearing(self, make_flock):
        flock = self._pair(make_flock, 0.95 * self.FOV, relative_steering=False)
        flock.interact(0, 1)
        assert flock.boids[0].angle == pytest.approx((10.0 + 90.0) / 2)

    def test_self_and_out_of_range_ignored(self, make_flock):
        flock = self._pair(make_flock, 2 * self.FOV)
        flock.interact(0, 0)
        flock.interact(0, 1)
        assert flock.boids[0].angle == 10.0

    def test_comfortable_pair_averages_angles_over_a_tick(self, make_flock):
        """Two still boids fov/2 apart: each averages its angle with the other's."""
        flock = make_flock(
            [(0.0, 0.0, 0.0, 20.0), (self.FOV / 2, 0.0, 0.0, 60.0)],
            fov=self.FOV, angle_of_view=360.0, inertia=1.0, diameter=100.0
        )
        flock.tick()
        first = (20.0 + 60.0) / 2
        assert flock.boids[0].angle == pytest.approx(first)
        # The second boid sees the first one's updated heading
        assert flock.boids[1].angle == pytest.approx((60.0 + first) / 2)


class TestNearestMode:

    def test_nearest_other_boid(self, make_flock):
        flock = make_flock(
            [(0.0, 0.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0), (3.0, 0.0, 0.0, 0.0)],
            fov=2.5, neighbor_mode='nearest'
        )
        assert flock.nearest(0) == 1
        assert flock.nearest(2) == 1

    def test_fov_is_strict(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0)], fov=1.0, neighbor_mode='nearest')
        assert flock.nearest(0) is None

    def test_lonely_boid(self, make_flock):
        flock = make_flock([(0.0, 0.0, 0.0, 0.0)], neighbor_mode='nearest')
        assert flock.nearest(0) is None

    def test_murmuration_preset_ticks(self):
        config = get_boid_preset('murmuration').with_overrides(count=30)
        flock = Flock(config, SeededRandom(5), (10.0, 10.0))
        for _ in range(3):
            flock.tick()
        assert flock.tick_count == 3
        assert np.all(np.isfinite(flock.snapshot()))


class TestBoid:

    def test_position(self):
        assert Boid(1, 2).position == Point(1.0, 2.0)
