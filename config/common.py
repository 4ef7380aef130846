"""
Common configuration utilities and shared data structures.
"""

from dataclasses import dataclass
from typing import Tuple

# Page sizes in centimeters (portrait)
PAGE_SIZES = {
    'A3': (29.7, 42.0),
    'A4': (21.0, 29.7),
    'A5': (14.8, 21.0),
    'letter': (21.59, 27.94),
}

UNITS_PER_INCH = {
    'in': 1.0,
    'cm': 2.54,
    'mm': 25.4,
}


def convert_units(value: float, from_units: str, to_units: str) -> float:
    if from_units == to_units:
        return value
    return value / UNITS_PER_INCH[from_units] * UNITS_PER_INCH[to_units]


def to_pixels(value: float, units: str, pixels_per_inch: float) -> float:
    return value / UNITS_PER_INCH[units] * pixels_per_inch


@dataclass
class SketchSettings:
    """Page and animation settings a sketch is run with."""
    dimensions: str = 'A4'
    orientation: str = 'portrait'
    units: str = 'cm'
    pixels_per_inch: int = 300

    # Animation
    animate: bool = False
    duration: float = 3.0
    fps: int = 24

    def page_size(self) -> Tuple[float, float]:
        """Page (width, height) in the sketch units."""
        width, height = PAGE_SIZES[self.dimensions]
        width = convert_units(width, 'cm', self.units)
        height = convert_units(height, 'cm', self.units)
        if self.orientation == 'landscape':
            return height, width
        return width, height

    @property
    def total_frames(self) -> int:
        if not self.animate:
            return 1
        return max(1, int(round(self.duration * self.fps)))
