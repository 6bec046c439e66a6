# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import check_finite, check_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center0 = check_vector("center", center)
        self.radius = check_finite("radius", radius, positive=True)
        if material is None:
            raise ValueError("sphere needs a material")
        self.material = material

    @property
    def center(self) -> Vector3:
        return self.center0

    def center_at(self, time: float) -> Vector3:
        return self.center0

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearest root strictly inside (t_min, t_max), smaller root first.
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def _box_at(self, time: float) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        center = self.center_at(time)
        return AABB(center - offset, center + offset)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self._box_at(time0)

    def __repr__(self) -> str:
        return f"Sphere({self.center0!r}, {self.radius})"

class MovingSphere(Sphere):
    """
    Sphere whose center moves linearly from center0 at time0 to center1 at
    time1. Rays are tested against the center at their own cast time, which
    is what produces motion blur.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float,
                 time1: float, radius: float, material):
        super().__init__(center0, radius, material)
        self.center1 = check_vector("center1", center1)
        if time0 == time1:
            raise ValueError("moving sphere keyframes need distinct times")
        self.time0 = check_finite("time0", time0)
        self.time1 = check_finite("time1", time1)

    def center_at(self, time: float) -> Vector3:
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return AABB.surrounding_box(self._box_at(time0), self._box_at(time1))

    def __repr__(self) -> str:
        return (f"MovingSphere({self.center0!r}@{self.time0}, "
                f"{self.center1!r}@{self.time1}, {self.radius})")
