# geometry/sphere.py
import math
from typing import Optional
from penumbra.core.vector import Vector3
from penumbra.core.ray import Ray
from penumbra.core.utils import DISCRIMINANT_EPSILON, SURFACE_TOLERANCE
from penumbra.geometry.hittable import Hittable, InvariantViolation

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        super().__init__(material)
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> Optional[Vector3]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        # Near-tangent rays fall below the threshold and count as misses.
        if discriminant < DISCRIMINANT_EPSILON:
            return None
        if not discriminant >= DISCRIMINANT_EPSILON:
            raise InvariantViolation(
                f"Unexpected discriminant {discriminant} for {ray!r} against {self!r}")

        sqrt_disc = math.sqrt(discriminant)
        roots = [t for t in ((-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)) if t >= 0]
        if not roots:
            return None
        return ray.at(min(roots))

    def normal_at(self, point: Vector3) -> Vector3:
        offset = point - self.center
        if abs(offset.length() - self.radius) > SURFACE_TOLERANCE:
            raise InvariantViolation(
                f"{point!r} is {offset.length()} from the center of {self!r}, not on its surface")
        return offset.normalize()

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
