"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple, Optional


@dataclass
class PlotRenderConfig:
    background_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    stroke_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    # SVG output (widths in page units)
    svg_stroke: str = 'black'
    svg_stroke_width: float = 0.03
    coordinate_precision: Optional[int] = None  # None keeps full float precision

    antialiasing: bool = True
