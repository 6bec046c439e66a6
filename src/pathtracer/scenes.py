# scenes.py
from typing import Callable, Dict, NamedTuple
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal


def three_spheres_scene(rng=None) -> HittableList:
    """Diffuse, fuzzy metal and glass spheres side by side on a ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.8, 0.8, 0.0))))
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.3)))
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, Dielectric(1.5)))
    return world


def three_spheres_camera(aspect_ratio: float) -> Camera:
    lookfrom = Vector3(3, 3, 2)
    lookat = Vector3(0, 0, -1)
    return Camera(lookfrom, lookat, Vector3(0, 1, 0), 20.0, aspect_ratio,
                  aperture=0.1, focus_dist=(lookfrom - lookat).length())


def random_spheres_scene(rng, moving: bool = False) -> HittableList:
    """
    Ground sphere, a 22x22 grid of small random spheres and three large
    feature spheres. With moving=True the small diffuse spheres bounce upward
    during the [0, 1] shutter window.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            # Keep clear of the large metal sphere
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
                if moving:
                    center1 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                    world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, material))
                    continue
            elif choose_mat < 0.95:
                material = Metal(random_vector(rng, 0.5, 1.0), rng.uniform(0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.0, 0.5), 0.0)))
    return world


def moving_spheres_scene(rng) -> HittableList:
    return random_spheres_scene(rng, moving=True)


def random_spheres_camera(aspect_ratio: float) -> Camera:
    return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 20.0,
                  aspect_ratio, aperture=0.1, focus_dist=10.0, time0=0.0, time1=1.0)


class SceneEntry(NamedTuple):
    build: Callable[..., HittableList]
    camera: Callable[[float], Camera]


SCENES: Dict[str, SceneEntry] = {
    "random": SceneEntry(random_spheres_scene, random_spheres_camera),
    "moving": SceneEntry(moving_spheres_scene, random_spheres_camera),
    "three": SceneEntry(three_spheres_scene, three_spheres_camera),
}
