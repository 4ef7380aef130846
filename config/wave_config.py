"""
Configuration for the wave lines sketch.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class WaveConfig:
    width: float = 10.0             # drawing width in page units
    grid_size: int = 50
    wave_length: int = 15           # grid columns covered by one wave
    wave_height: int = 1            # grid rows a wave steps up or down
    iteration_count: Optional[int] = None
    decision_proba: Optional[float] = None
    decision_nudge: float = 2.0     # probability multiplier per neighbor that moved

    close_path: bool = False
    draw_waves: bool = True
    draw_lines: bool = True

    def __post_init__(self):
        if self.iteration_count is None:
            self.iteration_count = self.grid_size * 5
        if self.decision_proba is None:
            self.decision_proba = 0.5 / self.grid_size
