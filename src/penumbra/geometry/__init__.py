# geometry/__init__.py
from penumbra.geometry.hittable import HitRecord, Hittable, InvariantViolation
from penumbra.geometry.light import Light
from penumbra.geometry.mesh import Triangle, load_obj
from penumbra.geometry.plane import Plane
from penumbra.geometry.scene import Scene
from penumbra.geometry.sphere import Sphere

__all__ = [
    "HitRecord", "Hittable", "InvariantViolation", "Light", "Plane",
    "Scene", "Sphere", "Triangle", "load_obj",
]
