"""
Waves: stacked lines stepping up and down through Bezier waves.
"""

import cairo

from config.common import SketchSettings
from config.wave_config import WaveConfig
from rendering.draw import draw, draw_line
from waves import generate_lines, line_to_points

SETTINGS = SketchSettings(
    dimensions='A4',
    orientation='portrait',
    units='cm',
    pixels_per_inch=300,
    animate=False,
    fps=10
)

LINE_WIDTH = 0.03


def sketch(context, config: WaveConfig = None):
    config = config or WaveConfig()
    lines = generate_lines(context.rng, config)
    print(f"Generated {len(lines)} wave lines")

    def render(params):
        center = (params.width / 2, params.height / 2)

        def paint(sink):
            ctx = sink.surface()
            ctx.set_line_width(LINE_WIDTH)
            ctx.set_line_cap(cairo.LINE_CAP_ROUND)
            ctx.set_line_join(cairo.LINE_JOIN_ROUND)
            for line in lines:
                draw_line(sink, *line_to_points(line, config, center))
            ctx.stroke()

        return draw(params, paint, include_canvas=True)

    return render
