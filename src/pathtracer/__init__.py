"""Offline Monte Carlo path tracer.

Spheres (static and moving) with Lambertian, metal and dielectric materials,
a BVH for intersection culling, a thin-lens camera with motion blur, and a
process-parallel renderer writing PNG or PPM images.
"""

__version__ = "0.1.0"
