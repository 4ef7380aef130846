"""
Conversion of emitted lines to SVG documents for pen plotting.

A line is a list of points; the first one is a move-to, the following ones
are either plain points (straight segments) or Bezier 4-tuples.
"""

from typing import List, Optional, Sequence

import svgwrite

from .geometry import Bezier, Point

Line = List[Point]


def format_number(value: float, precision: Optional[int] = None) -> str:
    if precision is None:
        return repr(float(value))
    text = f'{float(value):.{precision}f}'.rstrip('0').rstrip('.')
    return '0' if text in ('', '-0') else text


def path_data(line: Sequence, precision: Optional[int] = None) -> str:
    """SVG `d` attribute for one line. Lines with fewer than 2 points give ''."""
    if len(line) < 2:
        return ''

    def xy(point) -> str:
        return f'{format_number(point[0], precision)} {format_number(point[1], precision)}'

    commands = [f'M {xy(line[0])}']
    for point in line[1:]:
        if len(point) == 4:
            start, cp1, cp2, end = point
            commands.append(f'L {xy(start)}')
            commands.append(f'C {xy(cp1)} {xy(cp2)} {xy(end)}')
        else:
            commands.append(f'L {xy(point)}')
    return ' '.join(commands)


def paths_to_svg(lines: Sequence[Sequence], width: float, height: float, units: str = 'cm',
                 stroke: str = 'black', stroke_width: float = 0.03,
                 precision: Optional[int] = None) -> str:
    """
    Serialize lines to an SVG document.

    The document is `width` x `height` `units` large and its viewBox uses the
    same units, so coordinates are written as given. One <path> per line.
    """
    dwg = svgwrite.Drawing(
        size=(f'{format_number(width)}{units}', f'{format_number(height)}{units}'),
        profile='full'
    )
    dwg.viewbox(0, 0, width, height)

    group = dwg.g(
        fill='none',
        stroke=stroke,
        stroke_width=stroke_width,
        stroke_linecap='round',
        stroke_linejoin='round'
    )
    for line in lines:
        d = path_data(line, precision)
        if d:
            group.add(dwg.path(d=d))
    dwg.add(group)

    return dwg.tostring()


def parse_path_data(d: str) -> Line:
    """
    Read back a `d` attribute written by `path_data`.

    Only the M, L and C commands are understood. An `L` immediately followed
    by a `C` is folded back into a Bezier point.
    """
    tokens = d.split()
    line: list = []
    i = 0
    while i < len(tokens):
        command = tokens[i]
        if command in ('M', 'L'):
            point = Point(float(tokens[i + 1]), float(tokens[i + 2]))
            i += 3
            if command == 'L' and i < len(tokens) and tokens[i] == 'C':
                values = [float(v) for v in tokens[i + 1:i + 7]]
                line.append(Bezier(
                    point,
                    Point(values[0], values[1]),
                    Point(values[2], values[3]),
                    Point(values[4], values[5])
                ))
                i += 7
            else:
                line.append(point)
        else:
            raise ValueError(f"Unsupported path command: {command}")
    return line
