"""
Line emission for sketches.

Drawing code receives a DrawSink for the duration of one frame. Every line
drawn through `draw_line` is traced on the live cairo context and recorded
by the sink, so the plotted SVG and the preview describe the same geometry.
"""

from abc import ABC, abstractmethod
from typing import Callable, List

import cairo

from .geometry import as_path_point, rotate
from .paths import Line, paths_to_svg


class DrawSink(ABC):
    @abstractmethod
    def surface(self) -> cairo.Context:
        """The live 2D context for immediate-mode drawing."""

    @abstractmethod
    def emit(self, line: Line):
        """Record a finished line for SVG output."""


class PlotSink(DrawSink):
    """Sink over a cairo context collecting every emitted line."""

    def __init__(self, context: cairo.Context):
        self._context = context
        self.lines: List[Line] = []

    def surface(self) -> cairo.Context:
        return self._context

    def emit(self, line: Line):
        self.lines.append(line)


def draw_line(sink: DrawSink, *points):
    """
    Trace a line on the sink's surface and emit it.

    The first point is a move-to. Each following point is either an (x, y)
    pair, traced as a straight segment, or a (start, cp1, cp2, end) tuple,
    traced as a line to `start` then a cubic curve to `end`. The path is left
    open; stroking is up to the caller. Fewer than 2 points draw nothing.
    """
    if len(points) < 2:
        return

    line = [as_path_point(p) for p in points]
    if len(line[0]) == 4:
        line[0] = line[0].start
    context = sink.surface()

    context.move_to(*line[0])
    for point in line[1:]:
        if len(point) == 4:
            context.line_to(*point.start)
            context.curve_to(*point.cp1, *point.cp2, *point.end)
        else:
            context.line_to(*point)

    sink.emit(line)


def draw_segment(sink: DrawSink, cx: float, cy: float, width: float, angle: float):
    """A stroke of length `width` centered on (cx, cy), turned by `angle` degrees."""
    start = rotate(cx, cy, cx - width / 2, cy, angle)
    end = rotate(cx, cy, cx + width / 2, cy, angle)
    context = sink.surface()
    context.set_line_cap(cairo.LINE_CAP_ROUND)
    draw_line(sink, start, end)
    context.stroke()


def draw(params, render_function: Callable[[DrawSink], None], include_canvas: bool = False) -> list:
    """
    Run one frame's drawing callback and build its render descriptors.

    Returns [canvas, svg] when `include_canvas` is set, [svg] otherwise, where
    svg is {"data": str, "extension": ".svg"}.
    """
    sink = PlotSink(params.context)
    render_function(sink)

    style = params.style
    svg = paths_to_svg(
        sink.lines,
        params.width,
        params.height,
        params.units,
        stroke=style.svg_stroke,
        stroke_width=style.svg_stroke_width,
        precision=style.coordinate_precision
    )

    descriptors = []
    if include_canvas:
        descriptors.append(params.canvas)
    descriptors.append({'data': svg, 'extension': '.svg'})
    return descriptors
