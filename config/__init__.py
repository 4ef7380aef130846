"""
Configuration module.
"""

from .run_config import RunConfig, load_config, save_config
from .common import SketchSettings, PAGE_SIZES, convert_units, to_pixels
from .boid_config import BoidConfig, BOID_PRESETS, get_boid_preset
from .wave_config import WaveConfig
from .render_config import PlotRenderConfig
from .random_source import SeededRandom, random_seed

__all__ = [
    'RunConfig',
    'load_config',
    'save_config',
    'SketchSettings',
    'PAGE_SIZES',
    'convert_units',
    'to_pixels',
    'BoidConfig',
    'BOID_PRESETS',
    'get_boid_preset',
    'WaveConfig',
    'PlotRenderConfig',
    'SeededRandom',
    'random_seed'
]
