"""
Base renderer class: cairo surfaces sized in pixels, drawn in page units.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.render_config import PlotRenderConfig


class Renderer(ABC):
    def __init__(self, config: PlotRenderConfig, pixel_width: int, pixel_height: int,
                 pixel_ratio: float = 1.0):
        self.config = config
        self.pixel_width = pixel_width
        self.pixel_height = pixel_height
        self.pixel_ratio = pixel_ratio

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.pixel_width,
            self.pixel_height
        )
        ctx = cairo.Context(surface)

        if self.config.antialiasing:
            ctx.set_antialias(cairo.ANTIALIAS_BEST)

        r, g, b, a = self.config.background_color
        ctx.set_source_rgba(r, g, b, a)
        ctx.paint()

        # Drawing code works in page units
        ctx.scale(self.pixel_ratio, self.pixel_ratio)

        r, g, b, a = self.config.stroke_color
        ctx.set_source_rgba(r, g, b, a)

        return surface, ctx

    @abstractmethod
    def render_frame(self, *args, **kwargs):
        pass

    @abstractmethod
    def run(self, *args, **kwargs):
        pass


def surface_to_numpy(surface: cairo.ImageSurface) -> np.ndarray:
    """Copy a cairo ARGB32 surface into an (H, W, 4) RGBA uint8 array."""
    surface.flush()
    height, width, stride = surface.get_height(), surface.get_width(), surface.get_stride()
    buf = surface.get_data()
    arr = np.ndarray(
        shape=(height, stride // 4, 4),
        dtype=np.uint8,
        buffer=buf
    )[:, :width]
    arr_copy = arr.copy()
    arr_rgba = np.zeros_like(arr_copy)
    arr_rgba[:, :, 0] = arr_copy[:, :, 2]  # R
    arr_rgba[:, :, 1] = arr_copy[:, :, 1]  # G
    arr_rgba[:, :, 2] = arr_copy[:, :, 0]  # B
    arr_rgba[:, :, 3] = arr_copy[:, :, 3]  # A
    return arr_rgba
