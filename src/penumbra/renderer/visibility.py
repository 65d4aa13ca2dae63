# renderer/visibility.py
from typing import Optional
from penumbra.core.ray import Ray
from penumbra.core.utils import MIN_HIT_DISTANCE
from penumbra.geometry.hittable import HitRecord

def cast(ray: Ray, scene) -> Optional[HitRecord]:
    """
    Returns the nearest hit of `ray` among all primitives of `scene`.

    Hits closer than MIN_HIT_DISTANCE to the ray origin are ignored so that a
    ray leaving a surface does not re-hit that surface. This is a linear scan
    over scene.objects.
    """
    closest = None
    for obj in scene.objects:
        point = obj.intersect(ray)
        if point is None:
            continue
        distance = ray.origin.distance(point)
        if distance > MIN_HIT_DISTANCE and (closest is None or distance < closest.distance):
            closest = HitRecord(point, obj, distance)
    return closest
