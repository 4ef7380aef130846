"""
Exporters for render descriptors and animations.

Sketches return descriptors; only this module writes them to disk.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Sequence

import cairo
import imageio
import numpy as np

from .base import surface_to_numpy
from .paths import Line, parse_path_data

SVG_NS = '{http://www.w3.org/2000/svg}'


def save_descriptors(descriptors: Sequence, output_dir: str, name: str) -> List[Path]:
    """
    Write one frame's descriptors.

    Canvas descriptors (cairo surfaces) become `<name>.png`, file descriptors
    become `<name><extension>`. Repeated extensions get a numeric suffix.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    saved = []
    used = {}
    for descriptor in descriptors:
        if isinstance(descriptor, cairo.ImageSurface):
            extension = '.png'
        else:
            extension = descriptor['extension']

        count = used.get(extension, 0)
        used[extension] = count + 1
        suffix = f'_{count}' if count else ''
        path = output_dir / f'{name}{suffix}{extension}'

        if isinstance(descriptor, cairo.ImageSurface):
            imageio.imwrite(path, surface_to_numpy(descriptor))
        else:
            with open(path, 'w') as f:
                f.write(descriptor['data'])

        print(f"  Saved {path}")
        saved.append(path)

    return saved


def save_animation(frames: Sequence[np.ndarray], output_path: str, fps: int) -> Path:
    """Save RGBA frames as a GIF or MP4 depending on the extension."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if output_path.suffix == '.gif':
        imageio.mimsave(output_path, list(frames), duration=1000 / fps, loop=0)
    else:
        rgb_frames = [np.ascontiguousarray(frame[:, :, :3]) for frame in frames]
        imageio.mimsave(output_path, rgb_frames, fps=fps)

    print(f"  Saved animation: {output_path}")
    print(f"  Duration: {len(frames) / fps:.2f}s at {fps} fps")
    return output_path


def load_svg_lines(path: str) -> List[Line]:
    """Read the lines back from an SVG written by `paths_to_svg`."""
    tree = ET.parse(path)
    return [
        parse_path_data(element.get('d'))
        for element in tree.getroot().iter(f'{SVG_NS}path')
    ]
