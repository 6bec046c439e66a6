# main.py
import argparse
import random
import sys
from typing import List, Optional
from pathtracer import __version__
from pathtracer.geometry.bvh import build_bvh
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import (IMAGE_HEIGHT, IMAGE_WIDTH, MAX_DEPTH,
                                           SAMPLES_PER_PIXEL, Renderer, RenderSettings)
from pathtracer.scenes import SCENES


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Offline Monte Carlo path tracer for sphere scenes")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--width', '-w', type=positive_int, default=IMAGE_WIDTH,
                        help='The width in pixels of the generated image')
    parser.add_argument('--height', type=positive_int, default=IMAGE_HEIGHT,
                        help='The height in pixels of the generated image')
    parser.add_argument('--samples', '-s', type=positive_int, default=SAMPLES_PER_PIXEL,
                        help='Samples per pixel')
    parser.add_argument('--depth', '-d', type=positive_int, default=MAX_DEPTH,
                        help='Maximum number of bounces per path')
    parser.add_argument('--processes', '-j', type=positive_int, default=None,
                        help='Worker processes (default: one per CPU)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for scene generation and sampling')
    parser.add_argument('--scene', choices=sorted(SCENES), default='random',
                        help='Scene to render')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not print progress')
    parser.add_argument('out', metavar='FILE',
                        help='The path to write output to (.ppm for PPM, otherwise PNG)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    settings = RenderSettings(width=args.width, height=args.height,
                              samples_per_pixel=args.samples, max_depth=args.depth,
                              processes=args.processes, seed=args.seed, verbose=verbose)

    entry = SCENES[args.scene]
    rng = random.Random(args.seed)
    camera = entry.camera(settings.aspect_ratio)
    objects = entry.build(rng)
    world = build_bvh(objects.objects, rng, camera.time0, camera.time1)
    if verbose:
        print(f"Scene '{args.scene}': {len(objects)} objects")

    canvas = Renderer(settings).render(world, camera)

    try:
        save_image(canvas, args.out)
    except OSError as e:
        print(f"error: failed to write {args.out}: {e}", file=sys.stderr)
        return 1
    if verbose:
        print(f"Image saved: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
