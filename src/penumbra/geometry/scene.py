# geometry/scene.py
from typing import Sequence
from penumbra.core.vector import Vector3
from penumbra.camera.camera import Camera
from penumbra.geometry.hittable import Hittable
from penumbra.geometry.light import Light

class Scene:
    """
    Ordered list of primitives and lights plus the camera.

    A scene is populated with add() / add_light() and then frozen; a frozen
    scene is shared read-only by every render worker.
    """
    def __init__(self, camera_position: Vector3):
        self.camera = Camera(camera_position)
        self._objects = []
        self._lights = []
        self._frozen = False

    def add(self, obj: Hittable):
        self._check_mutable()
        self._objects.append(obj)

    def extend(self, objects: Sequence[Hittable]):
        for obj in objects:
            self.add(obj)

    def add_light(self, light: Light):
        self._check_mutable()
        self._lights.append(light)

    def freeze(self) -> "Scene":
        if not self._frozen:
            self._objects = tuple(self._objects)
            self._lights = tuple(self._lights)
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def objects(self) -> Sequence[Hittable]:
        return self._objects

    @property
    def lights(self) -> Sequence[Light]:
        return self._lights

    def _check_mutable(self):
        if self._frozen:
            raise RuntimeError("Scene is frozen; primitives and lights can no longer be added")

    def __repr__(self) -> str:
        return f"Scene({len(self._objects)} objects, {len(self._lights)} lights, {self.camera!r})"
