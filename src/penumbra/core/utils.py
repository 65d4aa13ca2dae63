# core/utils.py
from typing import Tuple
from penumbra.core.vector import Vector3

# Numeric tolerances shared by the geometry and shading code
DISCRIMINANT_EPSILON = 1e-9
PARALLEL_EPSILON = 1e-9
SURFACE_TOLERANCE = 1e-6
MIN_HIT_DISTANCE = 0.001

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def perpendicular_basis(direction: Vector3) -> Tuple[Vector3, Vector3]:
    """
    Returns two unit vectors perpendicular to `direction` and to each other.

    The first is built by crossing the x axis with the direction; the y axis
    is used instead when the direction is (nearly) parallel to x.
    """
    reference = Vector3(1.0, 0.0, 0.0)
    first = reference.cross(direction)
    if first.length() < PARALLEL_EPSILON * max(1.0, direction.length()):
        first = Vector3(0.0, 1.0, 0.0).cross(direction)
    first = first.normalize()
    second = first.cross(direction).normalize()
    return first, second
