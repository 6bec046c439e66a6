# geometry/hittable.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.

    Only lives for one intersection query; it references the material of the
    surface that was hit, it does not own it.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, always facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray hit the outside
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Hittables are immutable once the scene is built, so one instance can be
    shared by every render worker.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

class EmptyHittable(Hittable):
    """
    Placeholder with no geometry: never hit and without a bounding box.
    The BVH builder returns it for an empty primitive list.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return None

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return None

def merge_boxes(box0: Optional[AABB], box1: Optional[AABB]) -> Optional[AABB]:
    """Union of two optional boxes; a missing box is ignored, not infinite."""
    if box0 is None:
        return box1
    if box1 is None:
        return box0
    return AABB.surrounding_box(box0, box1)
