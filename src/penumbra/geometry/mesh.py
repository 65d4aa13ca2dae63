# geometry/mesh.py
import os
from typing import List, Optional
from penumbra.core.vector import Vector3
from penumbra.core.ray import Ray
from penumbra.core.utils import SURFACE_TOLERANCE
from penumbra.geometry.hittable import Hittable, InvariantViolation

class Triangle(Hittable):
    """Represents a single flat-shaded triangle in 3D space."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material):
        super().__init__(material)
        # Vertices
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2

        self.edge1 = v1 - v0
        self.edge2 = v2 - v0
        face_normal = self.edge1.cross(self.edge2)
        if face_normal.length() == 0:
            raise ValueError(f"Degenerate triangle: {v0!r}, {v1!r}, {v2!r}")
        self.normal = face_normal.normalize()

    def intersect(self, ray: Ray) -> Optional[Vector3]:
        # Möller–Trumbore intersection algorithm
        h = ray.direction.cross(self.edge2)
        a = self.edge1.dot(h)

        # If ray is parallel to triangle
        if abs(a) < 1e-8:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)

        # Ray misses the triangle
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.edge1)
        v = f * ray.direction.dot(q)

        # Ray misses the triangle
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.edge2.dot(q)

        # Intersection is behind ray origin
        if t < 0.0:
            return None
        return ray.at(t)

    def normal_at(self, point: Vector3) -> Vector3:
        if abs((point - self.v0).dot(self.normal)) > SURFACE_TOLERANCE:
            raise InvariantViolation(f"{point!r} does not lie on the plane of {self!r}")
        return self.normal

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"

def load_obj(filename: str, material, offset: Optional[Vector3] = None,
             scale: float = 1.0) -> List[Triangle]:
    """
    Load the faces of an OBJ file as a list of triangles sharing one material.

    Only `v` and `f` records are read; polygons are fan-triangulated
    (assuming they are convex). Vertices are scaled, then translated by
    `offset`.
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(f"OBJ file not found: {filename}")
    offset = offset if offset is not None else Vector3(0.0, 0.0, 0.0)

    vertices: List[Vector3] = []
    triangles: List[Triangle] = []

    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            if line.startswith('#'):  # Skip comments
                continue

            values = line.split()
            if not values:
                continue

            try:
                if values[0] == 'v':  # Vertex
                    v = Vector3(float(values[1]), float(values[2]), float(values[3]))
                    vertices.append(v * scale + offset)
                elif values[0] == 'f':  # Face
                    # "7", "7/1" and "7/1/3" all name vertex 7 (OBJ indices are 1-based)
                    indices = [int(token.split('/')[0]) - 1 for token in values[1:]]
                    for i in range(1, len(indices) - 1):
                        triangles.append(Triangle(
                            vertices[indices[0]], vertices[indices[i]], vertices[indices[i + 1]],
                            material))
            except (ValueError, IndexError) as e:
                raise ValueError(f"{filename}:{line_num}: cannot parse {line.strip()!r} ({e})") from e

    return triangles
