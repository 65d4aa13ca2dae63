# camera/camera.py
from penumbra.core.vector import Vector3
from penumbra.core.ray import Ray

class Camera:
    """
    Fixed pinhole camera looking down +z.

    The image plane sits one unit in front of the camera and spans [-1, 1]
    on both axes regardless of the output aspect ratio.
    """
    def __init__(self, position: Vector3):
        self.position = position

    def direction_for_pixel(self, x: int, y: int, width: int, height: int) -> Vector3:
        """
        Maps pixel (x, y) linearly onto the image plane; row 0 is the top.
        """
        u = -1.0 + 2.0 * x / width
        v = 1.0 - 2.0 * y / height
        return Vector3(u, v, 1.0)

    def get_ray(self, direction: Vector3) -> Ray:
        return Ray(self.position, direction)

    def __repr__(self) -> str:
        return f"Camera({self.position!r})"
