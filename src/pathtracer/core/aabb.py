# core/aabb.py
from pathtracer.core.utils import safe_inverse
from pathtracer.core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box. Never mutated after creation; boxes are only
    recombined through surrounding_box().
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, narrow the [t_min, t_max] interval.
        for a in ['x', 'y', 'z']:
            invD = safe_inverse(getattr(ray.direction, a))
            t0 = (getattr(self.minimum, a) - getattr(ray.origin, a)) * invD
            t1 = (getattr(self.maximum, a) - getattr(ray.origin, a)) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            getattr(self.minimum, a) <= getattr(other.minimum, a)
            and getattr(other.maximum, a) <= getattr(self.maximum, a)
            for a in 'xyz'
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)
