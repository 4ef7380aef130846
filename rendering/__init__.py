"""
Rendering module for plotter sketches.
Uses Cairo for the raster preview and svgwrite for the plotter SVG.
"""

from config.render_config import PlotRenderConfig
from .base import Renderer, surface_to_numpy
from .geometry import Point, Bezier, rotate, distance, square_distance, bearing_between, nudge_angle
from .draw import DrawSink, PlotSink, draw, draw_line, draw_segment
from .paths import path_data, paths_to_svg, parse_path_data
from .exporters import save_descriptors, save_animation, load_svg_lines
from .driver import SketchDriver, SketchContext, FrameParams
