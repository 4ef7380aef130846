"""
Rendering Script

Runs a plotter sketch and exports its last frame as SVG (for the plotter)
and PNG, plus a GIF/MP4 preview for animated sketches.

Run settings are loaded from config/sketch.json when it exists; command
line flags override them.

Sketches:
    lichen      - trails of a small wandering flock
    murmuration - one stroke per bird of a dense flock
    waves       - stacked lines stepping through Bezier waves
"""

import argparse

from boids import enable_profiling
from config import load_config, save_config, BOID_PRESETS
from config.run_config import DEFAULT_CONFIG_PATH
from rendering.driver import SketchDriver
from sketches import SKETCHES


def render_sketch(name: str, run_config):
    module = SKETCHES[name]
    driver = SketchDriver(module, seed=run_config.seed, run_config=run_config)

    keep_frames = module.SETTINGS.animate and run_config.save_animation
    driver.run(keep_frames=keep_frames)

    output_dir = run_config.output_dir(name)
    print(f"Exporting to {output_dir}...")
    saved = driver.export(output_dir)
    print(f"Done: {len(saved)} file(s), seed {driver.seed}")
    return saved


def main():
    parser = argparse.ArgumentParser(description="Render a plotter sketch to SVG.")
    parser.add_argument('sketch', choices=sorted(SKETCHES), help='Sketch to render')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (default: random)')
    parser.add_argument('--preset', choices=sorted(BOID_PRESETS), default=None,
                        help='Boid preset for flock sketches')
    parser.add_argument('--frames', type=int, default=None,
                        help='Number of frames to render (default: one animation loop)')
    parser.add_argument('--ppi', type=int, default=None, help='Pixels per inch of the raster output')
    parser.add_argument('--output', type=str, default=None, help='Output base directory')
    parser.add_argument('--no-animation', action='store_true', help='Skip the GIF/MP4 preview')
    parser.add_argument('--config', type=str, default=DEFAULT_CONFIG_PATH, help='Run config JSON')
    parser.add_argument('--save-config', action='store_true', help='Write the effective run config back')
    parser.add_argument('--profile', action='store_true', help='Print simulation timings at exit')
    args = parser.parse_args()

    run_config = load_config(args.config)
    if args.seed is not None:
        run_config.seed = args.seed
    if args.preset is not None:
        run_config.preset = args.preset
    if args.frames is not None:
        run_config.frames = args.frames
    if args.ppi is not None:
        run_config.pixels_per_inch = args.ppi
    if args.output is not None:
        run_config.output_base = args.output
    if args.no_animation:
        run_config.save_animation = False
    if args.profile:
        run_config.profile = True

    if run_config.profile:
        enable_profiling()

    print(f"Sketch: {args.sketch}")
    print(f"Output: {run_config.output_dir(args.sketch)}")
    print()

    render_sketch(args.sketch, run_config)

    if args.save_config:
        save_config(run_config, args.config)


if __name__ == '__main__':
    main()
