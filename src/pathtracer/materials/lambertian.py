# materials/lambertian.py

from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scatter, as_texture
from pathtracer.materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material. Always scatters.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Scatter:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Normal plus a random point in the unit ball approximates a cosine
        # weighted direction.
        scatter_direction = rec.normal + random_in_unit_sphere(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        return Scatter(scattered, self.albedo_at(rec.p))

    def __repr__(self) -> str:
        return f"Lambertian({self.texture!r})"
