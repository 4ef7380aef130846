"""
Wave lines on a grid.

Lines are added one at a time. Each line walks the grid columns left to
right and at every column either stays level or steps one wave up or down.
Stepping is rare, but every neighbor that stepped at the previous column
makes the line more likely to step the same way, so waves propagate through
the stack of lines.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from config.random_source import SeededRandom
from config.wave_config import WaveConfig
from rendering.geometry import Bezier, Point


@dataclass
class WaveLine:
    start_y: int
    behavior: List[int] = field(default_factory=list)    # act per column: -h, 0 or +h
    computed_y: List[int] = field(default_factory=list)  # y occupied at each column


def new_line(lines: List[WaveLine], rng: SeededRandom, config: WaveConfig) -> WaveLine:
    # Half-up rounding
    y = math.floor(rng.uniform(0, config.grid_size) + 0.5)
    line = WaveLine(start_y=y)

    move_up_proba = config.decision_proba
    move_down_proba = config.decision_proba
    old_neighbors: List[WaveLine] = []

    for index in range(config.grid_size + 1):
        current_neighbors = [other for other in lines if other.computed_y[index] == y]
        for old in old_neighbors:
            act = old.behavior[index - 1]
            if act > 0:
                move_down_proba *= config.decision_nudge
            if act < 0:
                move_up_proba *= config.decision_nudge
        old_neighbors = current_neighbors

        line.computed_y.append(y)
        if rng.random() <= move_up_proba:
            act = -config.wave_height
        elif rng.random() <= move_down_proba:
            act = config.wave_height
        else:
            act = 0
        y += act
        line.behavior.append(act)

    return line


def generate_lines(rng: SeededRandom, config: WaveConfig) -> List[WaveLine]:
    lines: List[WaveLine] = []
    for _ in range(config.iteration_count + 1):
        lines.append(new_line(lines, rng, config))
    return lines


def wave_bezier(start: Point, direction: int, config: WaveConfig) -> Bezier:
    """One wave from `start`, ending `direction` rows lower (negative = higher)."""
    x, y = start
    half = config.wave_length / 2
    return Bezier(
        Point(x, y),
        Point(x + half, y),
        Point(x + half, y + direction),
        Point(x + config.wave_length, y + direction)
    )


def to_page(point: Point, config: WaveConfig, center: Tuple[float, float]) -> Point:
    """Grid coordinates to page units, the grid centered on `center`."""
    grid, width = config.grid_size, config.width
    return Point(
        (min(point[0], grid) / grid) * width - width / 2 + center[0],
        (point[1] / grid) * width - width / 2 + center[1]
    )


def line_to_points(line: WaveLine, config: WaveConfig, center: Tuple[float, float]) -> list:
    """Drawing points for a line: plain points for level runs, Beziers for waves."""
    points = []
    x, y = 0, line.start_y

    for act in line.behavior:
        if x > config.grid_size:
            break

        if act == 0:
            point = to_page(Point(x, y), config, center)
            x += 1
            if config.draw_lines:
                points.append(point)
            continue

        wave = Bezier(*(to_page(p, config, center) for p in wave_bezier(Point(x, y), act, config)))
        y += act
        x += config.wave_length
        if config.draw_waves:
            if not points:
                points.append(wave.start)
            points.append(wave)

    if config.close_path and len(points) > 1:
        points.append(points[0])
    return points
