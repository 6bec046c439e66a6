# materials/dielectric.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.utils import check_finite, reflect, refract, schlick
from pathtracer.core.vector import WHITE
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scatter

class Dielectric(Material):
    """
    Clear dielectric (glass, water). Reflects or refracts; never absorbs.
    """
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = check_finite("ref_idx", ref_idx, positive=True)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Scatter:
        attenuation = WHITE  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or rng.random() < schlick(cos_theta, ni_over_nt):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return Scatter(Ray(rec.p, direction, ray_in.time), attenuation)

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
