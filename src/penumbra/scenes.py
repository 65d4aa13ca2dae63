# scenes.py
"""
Scene construction: the built-in demo scene and the JSON scene-file loader.

Scene file layout::

    {
      "camera": {"position": [0, 0, 0]},
      "objects": [
        {"type": "sphere", "center": [0, -8, 13], "radius": 2,
         "material": {"color": [0.9, 0.2, 0.2], "reflectivity": 0.3}},
        {"type": "plane", "normal": [0, 1, 0], "point": [0, -10, 0], "material": "chalk"},
        {"type": "plane", "points": [[0, -10, 0], [0, -10, 1], [1, -10, 0]], "material": "chalk"},
        {"type": "triangle", "vertices": [[...], [...], [...]], "material": "mirror"},
        {"type": "mesh", "file": "cube.obj", "offset": [0, -6, 15], "scale": 1.5, "material": "plastic"}
      ],
      "lights": [{"position": [0, 4.5, 7], "intensity": [1, 1, 1], "radius": 1.0}]
    }

Materials are either an object with color/reflectivity or the name of a
MaterialPresets method. Mesh paths are relative to the scene file.
"""
import json
import os
from penumbra.core.vector import Vector3
from penumbra.geometry.light import Light
from penumbra.geometry.mesh import Triangle, load_obj
from penumbra.geometry.plane import Plane
from penumbra.geometry.scene import Scene
from penumbra.geometry.sphere import Sphere
from penumbra.materials.material import Material
from penumbra.materials.presets import ColorPresets, MaterialPresets

def demo_scene() -> Scene:
    scene = Scene(Vector3(0.0, 0.0, 0.0))

    # Floor, far wall and a row of spheres below the camera
    scene.add(Plane.from_normal(Vector3(0, 1, 0), Vector3(0, -10, 0), ColorPresets.matte(ColorPresets.WHITE)))
    scene.add(Plane.from_normal(Vector3(0, 0, -1), Vector3(0, 0, 30), Material(ColorPresets.GRAY, 0.05)))
    scene.add(Sphere(Vector3(0, -8, 13), 2.0, MaterialPresets.plastic()))
    scene.add(Sphere(Vector3(-4.5, -7.5, 16), 2.5, MaterialPresets.chrome()))
    scene.add(Sphere(Vector3(4.5, -8.5, 12), 1.5, MaterialPresets.polished(ColorPresets.GREEN)))
    scene.add(Triangle(Vector3(2, -10, 20), Vector3(5, -3, 22), Vector3(8, -10, 20), MaterialPresets.mirror()))

    scene.add_light(Light(Vector3(0, 4.5, 7), Vector3(1.0, 1.0, 1.0), 1.0))
    scene.add_light(Light(Vector3(-10, 2, 5), Vector3(0.3, 0.3, 0.4), 0.5))
    return scene

def _vector(value, field: str) -> Vector3:
    try:
        return Vector3.from_iterable(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{field}' must be a list of three numbers, got {value!r}") from e

def _require(value, kind: type, what: str):
    if not isinstance(value, kind):
        raise ValueError(f"{what} must be a JSON {'object' if kind is dict else 'array'}, got {value!r}")

def _material(spec) -> Material:
    if spec is None:
        return MaterialPresets.chalk()
    if isinstance(spec, str):
        return MaterialPresets.by_name(spec)
    if not isinstance(spec, dict):
        raise ValueError(f"'material' must be a preset name or an object, got {spec!r}")
    return Material(_vector(spec.get("color", [0.5, 0.5, 0.5]), "color"),
                    float(spec.get("reflectivity", 0.0)))

def _add_object(scene: Scene, spec: dict, base_dir: str):
    kind = spec.get("type")
    material = _material(spec.get("material"))
    if kind == "sphere":
        scene.add(Sphere(_vector(spec["center"], "center"), float(spec["radius"]), material))
    elif kind == "plane":
        if "points" in spec:
            a, b, c = (_vector(p, "points") for p in spec["points"])
            scene.add(Plane(a, b, c, material))
        else:
            scene.add(Plane.from_normal(_vector(spec["normal"], "normal"),
                                        _vector(spec["point"], "point"), material))
    elif kind == "triangle":
        v0, v1, v2 = (_vector(v, "vertices") for v in spec["vertices"])
        scene.add(Triangle(v0, v1, v2, material))
    elif kind == "mesh":
        offset = _vector(spec.get("offset", [0, 0, 0]), "offset")
        path = os.path.join(base_dir, spec["file"])
        scene.extend(load_obj(path, material, offset, float(spec.get("scale", 1.0))))
    else:
        raise ValueError(f"Unknown object type: {kind}")

def load_scene(path: str) -> Scene:
    """Builds a Scene from a JSON scene file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene file not found: {path}")
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid scene file {path}: {e}") from e

    _require(data, dict, f"Scene file {path}")
    camera = data.get("camera", {})
    _require(camera, dict, f"'camera' in {path}")
    scene = Scene(_vector(camera.get("position", [0, 0, 0]), "camera.position"))
    base_dir = os.path.dirname(os.path.abspath(path))

    objects = data.get("objects", [])
    _require(objects, list, f"'objects' in {path}")
    for index, spec in enumerate(objects):
        _require(spec, dict, f"Object {index} in {path}")
        try:
            _add_object(scene, spec, base_dir)
        except KeyError as e:
            raise ValueError(f"Object {index} in {path} is missing field {e}") from e

    lights = data.get("lights", [])
    _require(lights, list, f"'lights' in {path}")
    for index, spec in enumerate(lights):
        _require(spec, dict, f"Light {index} in {path}")
        try:
            scene.add_light(Light(_vector(spec["position"], "position"),
                                  _vector(spec.get("intensity", [1, 1, 1]), "intensity"),
                                  float(spec.get("radius", 1.0))))
        except KeyError as e:
            raise ValueError(f"Light {index} in {path} is missing field {e}") from e

    return scene
