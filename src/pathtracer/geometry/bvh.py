# geometry/bvh.py
from typing import Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import EmptyHittable, Hittable, HitRecord, merge_boxes

AXES = "xyz"

class BVHNode(Hittable):
    """
    Interior node of a bounding volume hierarchy. Owns exactly two children and
    caches their union box over the [time0, time1] window it was built for.
    """
    def __init__(self, left: Hittable, right: Hittable, time0: float = 0.0, time1: float = 1.0):
        self.left = left
        self.right = right
        self.time0 = time0
        self.time1 = time1
        self.box = merge_boxes(left.bounding_box(time0, time1),
                               right.bounding_box(time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # A node without a box holds no geometry.
        if self.box is None or not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Only look for something closer on the right
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box

def _min_on_axis(obj: Hittable, axis: int, time0: float, time1: float) -> float:
    box = obj.bounding_box(time0, time1)
    if box is None:
        return 0.0
    return getattr(box.minimum, AXES[axis])

def build_bvh(objects: Sequence[Hittable], rng, time0: float = 0.0, time1: float = 1.0) -> Hittable:
    """
    Recursively partition objects into a binary tree of BVHNodes.

    Each call picks a random axis, sorts by the minimum corner of each
    object's bounding box on that axis and splits at the median. An empty
    list yields an EmptyHittable and a single object is returned unwrapped.
    The input sequence is left untouched.
    """
    if len(objects) == 0:
        return EmptyHittable()
    if len(objects) == 1:
        return objects[0]

    axis = rng.randrange(3)
    ordered = sorted(objects, key=lambda obj: _min_on_axis(obj, axis, time0, time1))
    mid = len(ordered) // 2
    return BVHNode(build_bvh(ordered[:mid], rng, time0, time1),
                   build_bvh(ordered[mid:], rng, time0, time1),
                   time0, time1)

