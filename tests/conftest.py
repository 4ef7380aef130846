"""Pytest configuration - run from the project root and share fixtures."""
import os
from pathlib import Path

import cairo
import pytest

from boids import Flock
from config import BoidConfig, SeededRandom, RunConfig

ROOT = Path(__file__).resolve().parents[1]


def pytest_sessionstart(session):
    os.chdir(ROOT)


class RecordingContext:
    """Stands in for a cairo context and records the path calls it receives."""

    def __init__(self):
        self.calls = []

    def move_to(self, x, y):
        self.calls.append(('move_to', x, y))

    def line_to(self, x, y):
        self.calls.append(('line_to', x, y))

    def curve_to(self, x1, y1, x2, y2, x3, y3):
        self.calls.append(('curve_to', x1, y1, x2, y2, x3, y3))

    def set_line_cap(self, cap):
        self.calls.append(('set_line_cap', cap))

    def stroke(self):
        self.calls.append(('stroke',))


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def rng():
    return SeededRandom(1234)


@pytest.fixture
def recording_context():
    return RecordingContext()


@pytest.fixture
def cairo_context():
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 64, 64)
    return cairo.Context(surface)


@pytest.fixture
def small_run_config(tmp_path):
    """Low resolution run writing into a temporary directory."""
    return RunConfig(output_base=str(tmp_path), pixels_per_inch=10, animation_stride=1)


@pytest.fixture
def make_flock(rng):
    """Build a flock from BoidConfig overrides, then place its boids by hand."""

    def _make(boids=None, **overrides):
        config = BoidConfig(wobble_amplitude=0.0, speed_jitter=0.0, depth_range=0.0)
        config = config.with_overrides(**overrides)
        if boids is not None:
            config = config.with_overrides(count=len(boids))
        flock = Flock(config, rng, (0.0, 0.0))
        for boid, values in zip(flock.boids, boids or []):
            boid.x, boid.y, boid.speed, boid.angle = values
        flock.sync_positions()
        return flock

    return _make
