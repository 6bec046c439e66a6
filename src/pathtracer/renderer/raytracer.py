# renderer/raytracer.py
import math
import os
import random
import time
from dataclasses import dataclass
from multiprocessing import Pool
from typing import List, Optional, Tuple
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, WHITE
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.canvas import Canvas
from pathtracer.renderer.tone_mapping import to_rgba8

IMAGE_WIDTH = 1600
IMAGE_HEIGHT = 800
SAMPLES_PER_PIXEL = 100
MAX_DEPTH = 50
# Ignore hits this close to the ray origin (shadow acne)
T_MIN = 0.001
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


@dataclass
class RenderSettings:
    width: int = IMAGE_WIDTH
    height: int = IMAGE_HEIGHT
    samples_per_pixel: int = SAMPLES_PER_PIXEL
    max_depth: int = MAX_DEPTH
    processes: Optional[int] = None
    seed: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        for name in ("width", "height", "samples_per_pixel", "max_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.processes is not None and (isinstance(self.processes, bool)
                                           or not isinstance(self.processes, int)
                                           or self.processes <= 0):
            raise ValueError(f"processes must be a positive integer, got {self.processes!r}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def background(ray: Ray) -> Vector3:
    """Vertical white to sky-blue gradient seen by rays that escape the scene."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Vector3:
    """
    Radiance carried back along ray, following at most `depth` bounces.

    Running out of depth returns black, as does absorption by a material.
    """
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background(ray)

    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return Vector3(0.0, 0.0, 0.0)
    return scatter.attenuation * ray_color(scatter.scattered, world, depth - 1, rng)


def render_row(j: int, world: Hittable, camera: Camera, settings: RenderSettings, rng) -> np.ndarray:
    """
    Summed (not averaged) linear color of every pixel on scanline j, where
    j = 0 is the bottom of the image. Returns a (width, 3) array.
    """
    width = settings.width
    samples = settings.samples_per_pixel
    # max() keeps one pixel wide or high images defined
    du = max(width - 1, 1)
    dv = max(settings.height - 1, 1)
    row = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        r = g = b = 0.0
        for _ in range(samples):
            s = (i + rng.random()) / du
            t = (j + rng.random()) / dv
            color = ray_color(camera.get_ray(s, t, rng), world, settings.max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        row[i] = (r, g, b)
    return row


def row_seeds(seed: Optional[int], count: int) -> List[int]:
    """One independent seed per scanline, derived from a single root seed."""
    children = np.random.SeedSequence(seed).spawn(count)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


# Scene shared with pool workers (set by the initializer)
_worker_data = {}


def _init_worker(world: Hittable, camera: Camera, settings: RenderSettings):
    _worker_data["world"] = world
    _worker_data["camera"] = camera
    _worker_data["settings"] = settings


def _render_row_task(task: Tuple[int, int]) -> Tuple[int, np.ndarray]:
    j, seed = task
    row = render_row(j, _worker_data["world"], _worker_data["camera"],
                     _worker_data["settings"], random.Random(seed))
    return j, row


class Renderer:
    """
    Monte Carlo integrator over a frozen scene.

    Scanlines are independent: each gets its own random.Random and rows are
    farmed out to a process pool, then placed back by index.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings

    @property
    def processes(self) -> int:
        requested = self.settings.processes or os.cpu_count() or 1
        return max(1, min(requested, self.settings.height))

    def render_linear(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        (height, width, 3) per-pixel color sums, top row first.
        """
        settings = self.settings
        height = settings.height
        seeds = row_seeds(settings.seed, height)
        image = np.zeros((height, settings.width, 3), dtype=np.float64)
        # Scanline j = height - 1 is the top row of the output
        tasks = [(j, seeds[j]) for j in range(height - 1, -1, -1)]

        processes = self.processes
        if settings.verbose:
            print(f"Rendering {settings.width}x{height}, {settings.samples_per_pixel} samples, "
                  f"depth {settings.max_depth} with {processes} process(es)...")
        start_time = time.time()

        if processes == 1:
            for completed, (j, seed) in enumerate(tasks, start=1):
                image[height - 1 - j] = render_row(j, world, camera, settings, random.Random(seed))
                self._report(completed, height, start_time)
        else:
            with Pool(processes=processes, initializer=_init_worker,
                      initargs=(world, camera, settings)) as pool:
                for completed, (j, row) in enumerate(pool.imap_unordered(_render_row_task, tasks), start=1):
                    image[height - 1 - j] = row
                    self._report(completed, height, start_time)

        if settings.verbose:
            print()  # newline after progress
            print(f"Render finished in {time.time() - start_time:.2f}s")
        return image

    def render(self, world: Hittable, camera: Camera) -> Canvas:
        linear = self.render_linear(world, camera)
        return Canvas.from_array(to_rgba8(linear, self.settings.samples_per_pixel))

    def _report(self, completed: int, total: int, start_time: float):
        if not self.settings.verbose:
            return
        elapsed = time.time() - start_time
        eta = elapsed / completed * (total - completed)
        print(f"Row {completed}/{total} | Elapsed: {elapsed:.1f}s | ETA: {eta:.1f}s    ", end='\r')
