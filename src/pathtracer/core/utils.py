# core/utils.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3

# All samplers take an explicit rng (random.Random or anything with the same
# uniform() method) so each render worker owns its own generator.

def random_vector(rng, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside the unit ball (rejection sampled).
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        if not p.near_zero():
            return p.normalize()

def random_in_unit_disk(rng) -> Vector3:
    """Random point in the unit disk on the z = 0 plane, used for defocus blur."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Snell's law for a unit incident direction uv against unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's polynomial approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def safe_inverse(d: float) -> float:
    # IEEE style 1/0 so that axis-parallel rays still pass the slab test.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d

def check_finite(name: str, value: float, positive: bool = False) -> float:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    if positive and value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value

def check_vector(name: str, v: Optional[Vector3]) -> Vector3:
    if v is None or not all(math.isfinite(c) for c in (v.x, v.y, v.z)):
        raise ValueError(f"{name} must be a finite Vector3, got {v!r}")
    return v
