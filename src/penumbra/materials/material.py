# materials/material.py
from penumbra.core.vector import Vector3

class Material:
    """
    Surface description used by the shading engine.

    `color` is the diffuse base color; `reflectivity` blends between a fully
    diffuse surface (0.0) and a perfect mirror (1.0).
    """
    def __init__(self, color: Vector3, reflectivity: float = 0.0):
        if not 0.0 <= reflectivity <= 1.0:
            raise ValueError(f"Reflectivity must be in [0, 1], got {reflectivity}")
        self.color = color
        self.reflectivity = reflectivity

    def get_color(self) -> Vector3:
        return self.color

    def get_reflectivity(self) -> float:
        return self.reflectivity

    def __repr__(self) -> str:
        return f"Material({self.color!r}, {self.reflectivity})"
