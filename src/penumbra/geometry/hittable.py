# geometry/hittable.py
from typing import Optional
from penumbra.core.vector import Vector3
from penumbra.core.ray import Ray

class InvariantViolation(RuntimeError):
    """
    Raised when the geometry math reaches a state that indicates a logic
    defect, e.g. a normal requested for a point that is not on the surface.
    """

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("point", "primitive", "distance")

    def __init__(self, point: Vector3, primitive: "Hittable", distance: float = 0.0):
        self.point = point          # Intersection point
        self.primitive = primitive  # Primitive the point lies on (owned by the scene)
        self.distance = distance    # Distance from the ray origin

    def __repr__(self) -> str:
        return f"HitRecord({self.point!r}, {type(self.primitive).__name__}, {self.distance})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def __init__(self, material):
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Vector3]:
        """
        Returns the nearest intersection point in front of the ray origin,
        or None when the ray misses.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("normal_at() must be implemented by subclasses.")

    def get_material(self):
        return self.material
