"""
Run configuration for the sketch driver.

Settings that belong to a run rather than to a sketch: where outputs go,
which seed and preset to use, and what gets exported.
"""

from dataclasses import dataclass, asdict, fields
from typing import Optional
from pathlib import Path
import json

DEFAULT_CONFIG_PATH = 'config/sketch.json'


@dataclass
class RunConfig:
    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'

    # ==================== SKETCH SETTINGS ====================
    seed: Optional[int] = None           # None = draw a fresh seed
    preset: Optional[str] = None         # None = the sketch's own preset
    frames: Optional[int] = None         # None = duration * fps

    # ==================== RENDERING SETTINGS ====================
    pixels_per_inch: Optional[int] = None  # None = the sketch's own setting
    save_png: bool = True
    save_animation: bool = True
    animation_format: str = 'gif'        # 'gif' or 'mp4'
    animation_stride: int = 4            # keep every Nth pixel in animation frames

    # ==================== MISC ====================
    profile: bool = False

    # ==================== DERIVED PATHS ====================
    def output_dir(self, sketch_name: str) -> Path:
        return Path(self.output_base) / sketch_name

    def artifact_name(self, sketch_name: str, seed: int) -> str:
        return f'{sketch_name}_{seed}'


def load_config(path: str = DEFAULT_CONFIG_PATH) -> RunConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return RunConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        print(f"Warning: ignoring unknown config keys: {', '.join(unknown)}")

    return RunConfig(**{k: v for k, v in data.items() if k in known})


def save_config(config: RunConfig, path: str = DEFAULT_CONFIG_PATH):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)

    print(f"Saved config to {config_path}")
