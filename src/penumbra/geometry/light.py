# geometry/light.py
from penumbra.core.vector import Vector3

class Light:
    """
    Disc-shaped area light.

    The radius is the extent sampled for soft shadows; intensity is an RGB
    color where 1.0 per channel is full brightness.
    """
    def __init__(self, position: Vector3, intensity: Vector3, radius: float):
        if radius < 0:
            raise ValueError(f"Light radius must be non-negative, got {radius}")
        self.position = position
        self.intensity = intensity
        self.radius = radius

    def __repr__(self) -> str:
        return f"Light({self.position!r}, {self.intensity!r}, {self.radius})"
