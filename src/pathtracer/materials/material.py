# materials/material.py
from typing import NamedTuple, Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import check_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture, SolidTexture

class Scatter(NamedTuple):
    """The ray leaving a surface and the color it is attenuated by."""
    scattered: Ray
    attenuation: Vector3

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials hold only their own parameters and are never mutated while
    rendering, so many primitives (and workers) can share one instance.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Scatter]:
        """
        Computes the scattered ray and attenuation.
        Returns a Scatter, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def albedo_at(self, point: Vector3) -> Vector3:
        return self.texture.sample(point)

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    # Store either a solid color or a texture.
    if isinstance(albedo, Texture):
        return albedo
    return SolidTexture(check_vector("albedo", albedo))
