"""Unit tests for Vector3, Ray and the sampling helpers."""

import math

import pytest

from conftest import assert_vec_close
from pathtracer.core.ray import Ray
from pathtracer.core.utils import (random_in_unit_disk, random_in_unit_sphere,
                                   random_unit_vector, reflect, refract, schlick)
from pathtracer.core.vector import Vector3


class TestVectorArithmetic:
    """Tests for the operators and named operations."""

    def test_add_sub(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)

    def test_scale_and_hadamard(self):
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * Vector3(2, 0, -1) == Vector3(2, 0, -3)

    def test_divide_and_negate(self):
        assert Vector3(2, 4, 6) / 2 == Vector3(1, 2, 3)
        assert -Vector3(1, -2, 3) == Vector3(-1, 2, -3)

    def test_dot_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_length(self):
        v = Vector3(3, 4, 0)
        assert v.length() == 5
        assert v.length_squared() == 25

    def test_normalize(self):
        v = Vector3(0, 3, 4).normalize()
        assert math.isclose(v.length(), 1.0)
        assert_vec_close(v, Vector3(0, 0.6, 0.8))

    def test_normalize_zero_raises(self):
        """A zero vector has no direction; it must not silently become NaN."""
        with pytest.raises(ZeroDivisionError):
            Vector3(0, 0, 0).normalize()

    def test_indexing_and_near_zero(self):
        v = Vector3(1, 2, 3)
        assert (v[0], v[1], v[2]) == (1, 2, 3)
        assert Vector3(1e-10, 0, -1e-10).near_zero()
        assert not v.near_zero()


class TestRay:
    def test_at(self):
        ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, -2))
        assert ray.at(0) == Vector3(1, 1, 1)
        assert ray.at(1.5) == Vector3(1, 1, -2)

    def test_time_defaults_to_zero(self):
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)).time == 0.0
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0), 0.25).time == 0.25


class TestSampling:
    def test_unit_sphere_samples_inside(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vector_samples_on_sphere(self, rng):
        for _ in range(200):
            assert math.isclose(random_unit_vector(rng).length(), 1.0)

    def test_unit_disk_samples_flat(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0


class TestOptics:
    def test_reflect(self):
        v = Vector3(1, -1, 0)
        n = Vector3(0, 1, 0)
        assert reflect(v, n) == Vector3(1, 1, 0)

    def test_refract_normal_incidence_goes_straight(self):
        out = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1.0 / 1.5)
        assert_vec_close(out, Vector3(0, -1, 0))

    def test_refract_follows_snell(self):
        inv_sqrt2 = 1.0 / math.sqrt(2.0)
        out = refract(Vector3(inv_sqrt2, -inv_sqrt2, 0), Vector3(0, 1, 0), 1.0 / 1.5)
        assert math.isclose(out.length(), 1.0, rel_tol=1e-9)
        assert math.isclose(out.x, inv_sqrt2 / 1.5, rel_tol=1e-9)
        assert out.y < 0

    def test_schlick_limits(self):
        assert math.isclose(schlick(1.0, 1.5), 0.04)
        assert math.isclose(schlick(0.0, 1.5), 1.0)
