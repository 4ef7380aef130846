"""
2D geometry helpers shared by the simulations and the drawing code.

Angles are in degrees. The y-axis points down, so a positive angle turns
clockwise on the page.
"""

import math
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


class Bezier(NamedTuple):
    """Cubic segment: line to `start`, then curve through cp1, cp2 to `end`."""
    start: Point
    cp1: Point
    cp2: Point
    end: Point


def rotate(cx: float, cy: float, x: float, y: float, angle: float) -> Point:
    """Rotate (x, y) around (cx, cy) by `angle` degrees."""
    if angle == 0:
        return Point(x, y)

    radians = math.radians(angle)
    cos = math.cos(radians)
    sin = math.sin(radians)
    nx = cos * (x - cx) - sin * (y - cy) + cx
    ny = cos * (y - cy) + sin * (x - cx) + cy
    return Point(nx, ny)


def square_distance(a, b) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def distance(a, b) -> float:
    return math.sqrt(square_distance(a, b))


def bearing_between(a, b) -> float:
    """Angle from a to b in degrees, range (-180, 180]."""
    return math.degrees(math.atan2(b.y - a.y, b.x - a.x))


def nudge_angle(inertia: float, current: float, target: float) -> float:
    """Weighted average pulling `current` toward `target`; higher inertia turns slower."""
    return (current * inertia + target) / (inertia + 1)


def as_point(value) -> Point:
    return Point(float(value[0]), float(value[1]))


def as_path_point(value):
    """Normalize a drawing point: 2 items -> Point, 4 items -> Bezier."""
    if len(value) == 4:
        return Bezier(*(as_point(p) for p in value))
    return as_point(value)
