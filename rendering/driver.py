"""
Sketch driver: configures a sketch once, then renders it frame by frame.

A sketch module provides `SETTINGS` and `sketch(context)`; `sketch` returns
the per-frame render function, which takes FrameParams and returns a list
of descriptors (the live canvas and/or {"data", "extension"} files).
"""

from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import List, Optional

import cairo
import numpy as np
from tqdm import tqdm

from boids.profiling import profile_block
from config.common import SketchSettings, to_pixels
from config.random_source import SeededRandom
from config.render_config import PlotRenderConfig
from config.run_config import RunConfig
from .base import Renderer, surface_to_numpy
from .exporters import save_animation, save_descriptors


@dataclass
class SketchContext:
    """Handed to `sketch()` once, before the first frame."""
    width: float
    height: float
    units: str
    rng: SeededRandom
    seed: int
    settings: SketchSettings
    preset: Optional[str] = None


@dataclass
class FrameParams:
    """Handed to the render function every frame."""
    context: cairo.Context
    canvas: cairo.ImageSurface
    width: float
    height: float
    units: str
    playhead: float
    frame: int
    time: float
    style: PlotRenderConfig


class SketchDriver(Renderer):
    def __init__(self, module: ModuleType, seed: Optional[int] = None,
                 run_config: RunConfig = None, render_config: PlotRenderConfig = None,
                 preset: Optional[str] = None):
        self.module = module
        self.name = module.__name__.rsplit('.', 1)[-1]
        self.settings: SketchSettings = module.SETTINGS
        self.run_config = run_config or RunConfig()

        self.width, self.height = self.settings.page_size()
        ppi = self.run_config.pixels_per_inch or self.settings.pixels_per_inch
        pixel_ratio = to_pixels(1.0, self.settings.units, ppi)
        super().__init__(
            render_config or PlotRenderConfig(),
            max(1, int(round(self.width * pixel_ratio))),
            max(1, int(round(self.height * pixel_ratio))),
            pixel_ratio
        )

        self.rng = SeededRandom(seed)
        self.seed = self.rng.seed
        print(f"Seed is {self.seed}")

        self.context = SketchContext(
            width=self.width,
            height=self.height,
            units=self.settings.units,
            rng=self.rng,
            seed=self.seed,
            settings=self.settings,
            preset=preset if preset is not None else self.run_config.preset
        )
        self.render = module.sketch(self.context)

        self.frame_count = 0
        self.descriptors: List = []
        self._canvas: Optional[cairo.ImageSurface] = None
        self.frames: List[np.ndarray] = []

    def playhead(self, frame: int) -> float:
        if not self.settings.animate:
            return 0.0
        total = self.settings.total_frames
        return (frame % total) / total

    def render_frame(self, frame: int) -> list:
        surface, ctx = self._create_surface()
        playhead = self.playhead(frame)
        params = FrameParams(
            context=ctx,
            canvas=surface,
            width=self.width,
            height=self.height,
            units=self.settings.units,
            playhead=playhead,
            frame=frame,
            time=playhead * self.settings.duration,
            style=self.config
        )

        with profile_block('SketchDriver.render'):
            descriptors = self.render(params)
        if not isinstance(descriptors, list):
            descriptors = [descriptors]

        self.frame_count += 1
        self.descriptors = descriptors
        self._canvas = surface
        return descriptors

    def run(self, frames: Optional[int] = None, keep_frames: bool = False) -> list:
        """
        Render `frames` frames (default: one loop of the animation).

        Returns the last frame's descriptors. With `keep_frames` the surface of
        every frame is kept (downsampled by `animation_stride`) for export,
        replacing the frames of any earlier run.
        """
        total = frames or self.run_config.frames or self.settings.total_frames
        stride = max(1, self.run_config.animation_stride)
        self.frames = []

        print(f"Rendering {self.name}: {total} frame(s) at {self.pixel_width}x{self.pixel_height}px")
        for frame in tqdm(range(total), desc=f"Rendering {self.name}", disable=total == 1):
            self.render_frame(frame)
            if keep_frames:
                self.frames.append(surface_to_numpy(self._canvas)[::stride, ::stride])

        return self.descriptors

    def export(self, output_dir: Optional[str] = None) -> List[Path]:
        """Write the last frame's descriptors and, if kept, the animation."""
        output_dir = Path(output_dir) if output_dir else self.run_config.output_dir(self.name)
        name = self.run_config.artifact_name(self.name, self.seed)

        descriptors = list(self.descriptors)
        has_canvas = any(isinstance(d, cairo.ImageSurface) for d in descriptors)
        if self._canvas is not None and self.run_config.save_png and not has_canvas:
            descriptors.insert(0, self._canvas)

        saved = save_descriptors(descriptors, output_dir, name)

        if self.frames and len(self.frames) > 1:
            animation_path = output_dir / f'{name}.{self.run_config.animation_format}'
            saved.append(save_animation(self.frames, animation_path, self.settings.fps))

        return saved
