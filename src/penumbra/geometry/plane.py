# geometry/plane.py
from typing import Optional
from penumbra.core.vector import Vector3
from penumbra.core.ray import Ray
from penumbra.core.utils import PARALLEL_EPSILON, SURFACE_TOLERANCE
from penumbra.geometry.hittable import Hittable, InvariantViolation

class Plane(Hittable):
    """
    Infinite plane stored in implicit form: coefficients . P = offset.

    The coefficients come from the cross product of two edges of the three
    construction points, so they are not unit length in general. Their
    orientation (and therefore the normal) follows the winding of the points.
    """
    def __init__(self, a: Vector3, b: Vector3, c: Vector3, material):
        super().__init__(material)
        self.coefficients = (b - a).cross(c - a)
        if self.coefficients.length() == 0:
            raise ValueError(f"Plane points are collinear: {a!r}, {b!r}, {c!r}")
        self.offset = self.coefficients.dot(a)
        self.point_on = a

    @classmethod
    def from_normal(cls, normal: Vector3, point: Vector3, material) -> "Plane":
        """
        Build a plane through `point` whose normal points along `normal`.
        """
        normal = normal.normalize()
        if normal.length() == 0:
            raise ValueError("Plane normal must be non-zero")
        u = Vector3(1.0, 0.0, 0.0).cross(normal)
        if u.length() < 1e-6:
            u = Vector3(0.0, 1.0, 0.0).cross(normal)
        u = u.normalize()
        v = normal.cross(u)
        # (u x v) == normal, so the winding a, a+u, a+v keeps the orientation.
        return cls(point, point + u, point + v, material)

    def distance_to(self, point: Vector3) -> float:
        """Unsigned distance from `point` to the plane."""
        return abs(self.coefficients.dot(point) - self.offset) / self.coefficients.length()

    def intersect(self, ray: Ray) -> Optional[Vector3]:
        denom = ray.direction.dot(self.coefficients)
        if abs(denom) < PARALLEL_EPSILON:
            # Parallel: either the ray runs inside the plane or never meets it
            if self.distance_to(ray.origin) <= SURFACE_TOLERANCE:
                return ray.origin
            return None

        n = (self.point_on - ray.origin).dot(self.coefficients) / denom
        if n < 0:
            return None
        return ray.at(n)

    def normal_at(self, point: Vector3) -> Vector3:
        if self.distance_to(point) > SURFACE_TOLERANCE:
            raise InvariantViolation(f"{point!r} does not lie on {self!r}")
        return self.coefficients.normalize()

    def __repr__(self) -> str:
        return f"Plane({self.coefficients!r}, {self.offset})"
