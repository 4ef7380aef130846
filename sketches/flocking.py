"""
Frame logic shared by the flock sketches.

The preset's `draw_mode` picks the drawing: 'trails' draws one line per boid
through its recent positions, 'segments' one short stroke per boid.
"""

import cairo

from boids import Boid, Flock, HistoryBuffer
from config.boid_config import BoidConfig, get_boid_preset
from rendering.draw import DrawSink, draw, draw_line, draw_segment


def glyph_size(boid: Boid, config: BoidConfig) -> float:
    """Stroke length of a boid, scaled by its depth when `depth_size` is set."""
    if not config.depth_size or config.depth_range <= 0:
        return config.boid_size
    scale = 1 + config.depth_size * boid.z / config.depth_range
    return max(0.0, config.boid_size * scale)


def paint_trails(sink: DrawSink, history: HistoryBuffer, config: BoidConfig):
    ctx = sink.surface()
    ctx.new_path()
    ctx.set_line_width(config.line_width)
    ctx.set_line_cap(cairo.LINE_CAP_ROUND)
    for trail in history.trails():
        draw_line(sink, *trail)
    ctx.stroke()


def paint_segments(sink: DrawSink, flock: Flock, config: BoidConfig):
    sink.surface().set_line_width(config.line_width)
    for boid in flock.boids:
        draw_segment(sink, boid.x, boid.y, glyph_size(boid, config), boid.angle)


def flock_sketch(context, default_preset: str, include_canvas: bool = False):
    config = get_boid_preset(context.preset or default_preset)
    flock = Flock(config, context.rng, (context.width / 2, context.height / 2))
    history = HistoryBuffer(config.history_length)

    def render(params):
        flock.tick(params.playhead)

        if config.draw_mode == 'trails':
            history.push(flock.snapshot())

            def paint(sink):
                paint_trails(sink, history, config)
        else:
            def paint(sink):
                paint_segments(sink, flock, config)

        return draw(params, paint, include_canvas=include_canvas)

    return render
