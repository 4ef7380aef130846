"""
Configuration for the boid simulation.

The sketches share one simulation; what differs between them is collected
here as presets instead of being copied into each sketch.
"""

from dataclasses import dataclass, replace
from typing import Tuple, Optional

DRAW_MODES = ('trails', 'segments')


@dataclass
class BoidConfig:
    count: int = 40

    # Spawn
    diameter: float = 8.0           # containment radius around the origin
    base_speed: float = 0.3
    speed_jitter: float = 0.05      # speed = base_speed * U(1 - jitter, 1 + jitter)
    angle_range: float = 360.0      # initial angle in U(-range, range)
    depth_range: float = 8.0        # z in U(-range, range), 0 disables depth

    # Perception
    fov: float = 100.0
    angle_of_view: float = 100.0

    # Steering
    inertia: float = 1.0
    right_spot: float = 0.8         # width of the comfortable band, in (0, 1)
    close_inertia_ratio: float = 0.1
    relative_steering: bool = True  # targets are offset from the current heading
    neighbor_mode: str = 'all'      # 'all' or 'nearest'
    cache_bearings: bool = True

    # Boundary
    boundary_outward_only: bool = True
    boundary_kick: Optional[Tuple[float, float]] = (-90.0, 0.0)

    # Playhead driven wobble: angle += sin/cos(playhead * frequency) * amplitude
    wobble_amplitude: float = 4.0
    wobble_frequency: float = 10.0

    # Drawing
    draw_mode: str = 'trails'       # 'trails' or 'segments'
    history_length: int = 150
    boid_size: float = 0.5
    depth_size: float = 0.0         # segment length grows with z by this fraction at z = depth_range
    line_width: float = 0.05

    def __post_init__(self):
        if self.draw_mode not in DRAW_MODES:
            raise ValueError(f"Unknown draw_mode '{self.draw_mode}', expected one of {DRAW_MODES}")

    def with_overrides(self, **kwargs) -> 'BoidConfig':
        return replace(self, **kwargs)


BOID_PRESETS = {
    # Slow drifting trails around the page center
    'lichen': BoidConfig(draw_mode='trails'),

    # Lichen motion drawn as strokes, longer for boids nearer the viewer
    'shoal': BoidConfig(draw_mode='segments', depth_size=0.5, history_length=0),

    # Dense flock of short strokes, each boid only reacts to its nearest neighbor
    'murmuration': BoidConfig(
        count=500,
        diameter=7.0,
        base_speed=0.1,
        speed_jitter=0.0,
        angle_range=180.0,
        depth_range=0.0,
        fov=1.0,
        angle_of_view=60.0,
        inertia=10.0,
        right_spot=0.2,
        close_inertia_ratio=1.0,
        relative_steering=False,
        neighbor_mode='nearest',
        draw_mode='segments',
        cache_bearings=False,
        boundary_outward_only=False,
        boundary_kick=None,
        wobble_amplitude=0.0,
        history_length=0,
        boid_size=0.5,
        line_width=0.04,
    ),

    # Murmuration rules with every neighbor in view
    'swarm': BoidConfig(
        count=200,
        diameter=7.0,
        base_speed=0.1,
        speed_jitter=0.0,
        angle_range=180.0,
        depth_range=0.0,
        fov=1.0,
        angle_of_view=60.0,
        inertia=10.0,
        right_spot=0.2,
        close_inertia_ratio=1.0,
        relative_steering=False,
        neighbor_mode='all',
        draw_mode='segments',
        boundary_outward_only=False,
        boundary_kick=None,
        wobble_amplitude=0.0,
        history_length=0,
        line_width=0.04,
    ),
}


def get_boid_preset(name: str) -> BoidConfig:
    """Return a copy of a named preset. Unknown names raise KeyError."""
    return replace(BOID_PRESETS[name])
