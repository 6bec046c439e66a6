# camera/camera.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.utils import check_finite, check_vector, degrees_to_radians, random_in_unit_disk
from pathtracer.core.vector import Vector3

class Camera:
    """
    Thin-lens camera with defocus blur and a shutter window.

    Everything is derived once in the constructor; get_ray() only reads it and
    draws its lens and time samples from the rng supplied by the caller.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time0: float = 0.0, time1: float = 1.0):
        check_vector("lookfrom", lookfrom)
        check_vector("lookat", lookat)
        check_vector("vup", vup)
        check_finite("vfov", vfov)
        if not 0.0 < vfov < 180.0:
            raise ValueError(f"vfov must be between 0 and 180 degrees, got {vfov}")
        check_finite("aspect_ratio", aspect_ratio, positive=True)
        check_finite("aperture", aperture)
        if aperture < 0:
            raise ValueError(f"aperture must be non-negative, got {aperture}")
        check_finite("focus_dist", focus_dist, positive=True)
        if time1 < time0:
            raise ValueError(f"shutter closes ({time1}) before it opens ({time0})")

        view = lookfrom - lookat
        if view.near_zero():
            raise ValueError("lookfrom and lookat must be different points")
        side = vup.cross(view)
        if side.near_zero():
            raise ValueError("vup must not be parallel to the view direction")

        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        # Orthonormal basis: w points backwards, u right, v up.
        self.w = view.normalize()
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(degrees_to_radians(vfov) / 2)
        viewport_width = aspect_ratio * viewport_height

        # Scale by focus distance
        self.origin = lookfrom
        self.horizontal = self.u * viewport_width * focus_dist
        self.vertical = self.v * viewport_height * focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Ray through image-plane coordinates (s, t) in [0, 1], s to the right
        and t upwards, with defocus blur and a random shutter time.
        """
        if self.lens_radius <= 0:
            offset = Vector3(0.0, 0.0, 0.0)
        else:
            # Generate random point on lens
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y

        time = rng.uniform(self.time0, self.time1)
        ray_origin = self.origin + offset
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     ray_origin)
        return Ray(ray_origin, direction, time)
