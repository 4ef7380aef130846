"""
Plotter sketches.

Each module exposes SETTINGS and `sketch(context) -> render(params)`.
"""

from . import lichen, murmuration, waves

SKETCHES = {
    'lichen': lichen,
    'murmuration': murmuration,
    'waves': waves,
}

__all__ = ['SKETCHES', 'lichen', 'murmuration', 'waves']
