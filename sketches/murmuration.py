"""
Murmuration: a dense flock drawn as one short stroke per bird.
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
    fps=24
)

DEFAULT_PRESET = 'murmuration'


def sketch(context):
    return flock_sketch(context, DEFAULT_PRESET, include_canvas=True)
