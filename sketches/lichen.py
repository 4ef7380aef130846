"""
Lichen: a small flock drawn as the trails of its last positions.
"""

from config.common import SketchSettings
from .flocking import flock_sketch

SETTINGS = SketchSettings(
    dimensions='A4',
    orientation='portrait',
    units='cm',
    pixels_per_inch=300,
    animate=True,
    duration=3,
    fps=30
)

DEFAULT_PRESET = 'lichen'


def sketch(context):
    return flock_sketch(context, DEFAULT_PRESET)
