"""Pytest configuration for path tracer tests.

Shared fixtures: seeded generators, scripted generators that make the
stochastic parts of the tracer deterministic, and small scenes.
"""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


class FixedRandom:
    """Stands in for random.Random and returns the same draw every time.

    With the default 0.5, pixel jitter lands on the pixel center and every
    ball/disk sample is the origin (uniform(-1, 1) == 0).
    """

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value

    def randrange(self, stop):
        return 0


class SequenceRandom:
    """Replays a fixed list of values for both random() and uniform()."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0

    def _next(self):
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value

    def random(self):
        return self._next()

    def uniform(self, a, b):
        return self._next()

    def randrange(self, stop):
        return int(self._next()) % stop


@pytest.fixture
def rng():
    """Seeded generator so property-style tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture
def two_sphere_world():
    """Unit-radius-0.5 sphere at (0, 0, -1) resting on a huge ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.8, 0.8, 0.0))))
    return world


def assert_vec_close(actual, expected, tol=1e-9):
    assert abs(actual.x - expected.x) < tol, f"{actual} != {expected}"
    assert abs(actual.y - expected.y) < tol, f"{actual} != {expected}"
    assert abs(actual.z - expected.z) < tol, f"{actual} != {expected}"
