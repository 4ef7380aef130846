"""
Boid flocking simulation for plotter sketches.

Boids move along their heading and turn according to the neighbors inside
their field of view: toward far ones, away from close ones, and aligned with
the ones at a comfortable distance.
"""

from .boid import Boid
from .bearing_cache import BearingCache
from .flock import Flock
from .history import HistoryBuffer
from .profiling import profile, profile_block, enable_profiling

__all__ = [
    'Boid',
    'BearingCache',
    'Flock',
    'HistoryBuffer',
    'profile',
    'profile_block',
    'enable_profiling'
]
