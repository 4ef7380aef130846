"""
Wave lines: stacked horizontal lines stepping through cubic Bezier waves.
"""

from .generator import (
    WaveLine,
    new_line,
    generate_lines,
    wave_bezier,
    to_page,
    line_to_points
)

__all__ = [
    'WaveLine',
    'new_line',
    'generate_lines',
    'wave_bezier',
    'to_page',
    'line_to_points'
]
