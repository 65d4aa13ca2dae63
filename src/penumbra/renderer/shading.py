# renderer/shading.py
"""
Recursive Whitted-style shading with soft shadows from disc lights.

A surface color is the ambient term plus the averaged direct light of every
light source, blended with the mirror reflection according to the material's
reflectivity. Reflection recursion is bounded by an explicit depth counter.
"""
from penumbra.core.vector import Vector3
from penumbra.core.ray import Ray
from penumbra.core.utils import reflect, perpendicular_basis
from penumbra.renderer.visibility import cast

BACKGROUND = Vector3(0.0, 0.0, 0.0)
AMBIENT_LIGHT = Vector3(0.2, 0.2, 0.2)

# The light disc is approximated by SHADOW_GRID x SHADOW_GRID sample offsets
# spaced 1 / SHADOW_GRID apart, starting at -SHADOW_GRID_EXTENT / 2.
SHADOW_GRID = 10
SHADOW_GRID_EXTENT = 1.0
SHADOW_BIAS = 1e-9

def _grid_offsets():
    step = SHADOW_GRID_EXTENT / SHADOW_GRID
    start = -SHADOW_GRID_EXTENT / 2.0
    return [start + i * step for i in range(SHADOW_GRID)]

def direct_light(scene, point: Vector3, normal: Vector3, light) -> Vector3:
    """
    Averaged, shadowed contribution of one disc light at a surface point.

    Every one of the SHADOW_GRID**2 grid cells counts towards the average,
    so cells outside the disc or blocked by an occluder darken the result
    proportionally.
    """
    to_light = light.position - point
    light_distance = to_light.length()
    cosine = max(0.0, to_light.normalize().dot(normal))

    total = Vector3(0.0, 0.0, 0.0)
    if cosine == 0.0:
        return total

    first, second = perpendicular_basis(to_light)
    origin = point + normal * SHADOW_BIAS
    offsets = _grid_offsets()
    for x_off in offsets:
        for y_off in offsets:
            offset = first * x_off + second * y_off
            if offset.length() > light.radius:
                continue
            shadow_hit = cast(Ray(origin, to_light + offset), scene)
            if shadow_hit is None or shadow_hit.point.distance(point) > light_distance:
                total = total + light.intensity * cosine

    return total / (SHADOW_GRID * SHADOW_GRID)

def illumination_at(scene, point: Vector3, normal: Vector3) -> Vector3:
    """Ambient plus direct light from every light, clamped to [0, 1]."""
    illumination = AMBIENT_LIGHT
    for light in scene.lights:
        illumination = (illumination + direct_light(scene, point, normal, light)).clamp()
    return illumination

def shade(scene, ray: Ray, depth: int) -> Vector3:
    """
    Returns the color seen along `ray`.

    `depth` is the number of reflection bounces still allowed; at depth 0 the
    hit surface is still lit but no reflected ray is traced.
    """
    hit = cast(ray, scene)
    if hit is None:
        return BACKGROUND

    point = hit.point
    normal = hit.primitive.normal_at(point)
    material = hit.primitive.get_material()
    reflectivity = material.get_reflectivity()

    illumination = illumination_at(scene, point, normal)

    incoming = BACKGROUND
    if depth > 0 and reflectivity > 0.0:
        reflected = Ray(point, reflect(ray.direction, normal))
        incoming = shade(scene, reflected, depth - 1)

    diffuse = (material.get_color() * illumination * (1.0 - reflectivity)).clamp()
    return (diffuse + incoming * reflectivity).clamp()
