import math

import pytest

from conftest import assert_close
from penumbra.core.ray import Ray
from penumbra.core.utils import SURFACE_TOLERANCE
from penumbra.core.vector import Vector3
from penumbra.geometry.hittable import InvariantViolation
from penumbra.geometry.mesh import Triangle, load_obj
from penumbra.geometry.plane import Plane
from penumbra.geometry.sphere import Sphere


# --- Sphere ---

def test_sphere_ray_through_center_returns_near_point(matte_red):
    sphere = Sphere(Vector3(0, 0, 10), 2.0, matte_red)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
    point = sphere.intersect(ray)
    assert_close(point, Vector3(0, 0, 8))
    assert math.isclose(ray.origin.distance(point), 10 - 2.0)


def test_sphere_ray_pointing_away_misses(matte_red):
    sphere = Sphere(Vector3(0, 0, 10), 2.0, matte_red)
    assert sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))) is None


@pytest.mark.parametrize("center, radius, origin, direction, hits", [
    ((4, 0, 0), 1.0, (0, 0, 0), (1, 0, 0), True),
    ((0, 10, 0), 2.0, (0, 0, 0), (1, 0, 0), False),
    ((4, 5, 0), 2.0, (0, 0, 0), (1, 0, 0), False),
    ((20, 20, 0), 2.0, (0, 0, 0), (0, 0, 1), False),
])
def test_sphere_hits_and_misses(matte_red, center, radius, origin, direction, hits):
    sphere = Sphere(Vector3(*center), radius, matte_red)
    point = sphere.intersect(Ray(Vector3(*origin), Vector3(*direction)))
    assert (point is not None) == hits


def test_sphere_origin_inside_returns_far_side(matte_red):
    sphere = Sphere(Vector3(0, 0, 10), 2.0, matte_red)
    point = sphere.intersect(Ray(Vector3(0, 0, 10), Vector3(0, 1, 0)))
    assert_close(point, Vector3(0, 2, 10))


def test_sphere_tangent_ray_is_a_miss(matte_red):
    sphere = Sphere(Vector3(0, 0, 10), 2.0, matte_red)
    assert sphere.intersect(Ray(Vector3(2, 0, 0), Vector3(0, 0, 1))) is None


def test_sphere_normal_at_intersection(matte_red):
    sphere = Sphere(Vector3(1, -2, 9), 1.5, matte_red)
    for direction in (Vector3(0.1, -0.2, 1), Vector3(0.2, -0.3, 1), Vector3(0.05, -0.1, 1)):
        point = sphere.intersect(Ray(Vector3(0, 0, 0), direction))
        assert point is not None
        assert abs(point.distance(sphere.center) - sphere.radius) <= SURFACE_TOLERANCE
        normal = sphere.normal_at(point)
        assert math.isclose(normal.length(), 1.0)
        # The visible side faces the camera
        assert normal.dot(direction) < 0


def test_sphere_normal_off_surface_is_fatal(matte_red):
    sphere = Sphere(Vector3(0, 0, 10), 2.0, matte_red)
    with pytest.raises(InvariantViolation):
        sphere.normal_at(Vector3(0, 0, 0))


def test_sphere_nan_discriminant_is_fatal(matte_red):
    sphere = Sphere(Vector3(0, 0, 10), 2.0, matte_red)
    with pytest.raises(InvariantViolation):
        sphere.intersect(Ray(Vector3(float("nan"), 0, 0), Vector3(0, 0, 1)))


def test_sphere_rejects_non_positive_radius(matte_red):
    with pytest.raises(ValueError):
        Sphere(Vector3(0, 0, 0), 0.0, matte_red)


def test_sphere_material_lookup(matte_red):
    assert Sphere(Vector3(0, 0, 0), 1.0, matte_red).get_material() is matte_red


# --- Plane ---

@pytest.fixture
def floor(matte_red):
    return Plane(Vector3(0, -1, 0), Vector3(0, -1, 1), Vector3(1, -1, 0), matte_red)


def test_plane_from_three_points(floor):
    assert_close(floor.normal_at(Vector3(3, -1, 7)), Vector3(0, 1, 0))


def test_plane_hit(floor):
    assert_close(floor.intersect(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0))), Vector3(0, -1, 0))
    point = floor.intersect(Ray(Vector3(0, 0, 0), Vector3(1, -1, 0)))
    assert_close(point, Vector3(1, -1, 0))
    assert floor.distance_to(point) <= SURFACE_TOLERANCE


def test_plane_behind_ray_misses(floor):
    assert floor.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))) is None


def test_plane_parallel_ray(floor):
    assert floor.intersect(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))) is None
    origin = Vector3(0, -1, 0)
    assert floor.intersect(Ray(origin, Vector3(1, 0, 0))) is origin


def test_plane_normal_off_surface_is_fatal(floor):
    with pytest.raises(InvariantViolation):
        floor.normal_at(Vector3(0, 0, 0))


def test_plane_from_normal_keeps_orientation(matte_red):
    wall = Plane.from_normal(Vector3(0, 0, -2), Vector3(0, 0, 30), matte_red)
    point = wall.intersect(Ray(Vector3(0, 0, 0), Vector3(0.3, 0.1, 1)))
    assert math.isclose(point.z, 30.0)
    assert_close(wall.normal_at(point), Vector3(0, 0, -1))


def test_plane_collinear_points_rejected(matte_red):
    with pytest.raises(ValueError):
        Plane(Vector3(0, 0, 0), Vector3(1, 1, 1), Vector3(2, 2, 2), matte_red)


# --- Triangle ---

@pytest.fixture
def triangle(matte_red):
    return Triangle(Vector3(-1, -1, 5), Vector3(1, -1, 5), Vector3(0, 1, 5), matte_red)


def test_triangle_hit_and_constant_normal(triangle):
    point = triangle.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)))
    assert_close(point, Vector3(0, 0, 5))
    assert_close(triangle.normal_at(point), Vector3(0, 0, 1))
    assert_close(triangle.normal_at(Vector3(0.5, -0.5, 5)), Vector3(0, 0, 1))


@pytest.mark.parametrize("origin, direction", [
    ((5, 0, 0), (0, 0, 1)),   # outside the edges
    ((0, 0, 0), (0, 0, -1)),  # behind the origin
    ((0, 0, 0), (1, 0, 0)),   # parallel
])
def test_triangle_misses(triangle, origin, direction):
    assert triangle.intersect(Ray(Vector3(*origin), Vector3(*direction))) is None


def test_triangle_normal_off_plane_is_fatal(triangle):
    with pytest.raises(InvariantViolation):
        triangle.normal_at(Vector3(0, 0, 4))


def test_degenerate_triangle_rejected(matte_red):
    with pytest.raises(ValueError):
        Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0), matte_red)


# --- OBJ loading ---

def test_load_obj_triangulates_faces(tmp_path, matte_red):
    path = tmp_path / "quad.obj"
    path.write_text(
        "# unit quad\n"
        "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\n"
        "vt 0 0\nvn 0 0 1\n"
        "f 1/1/1 2/1/1 3/1/1 4/1/1\n"
    )
    triangles = load_obj(str(path), matte_red, offset=Vector3(0, 0, 5), scale=2.0)
    assert len(triangles) == 2
    assert_close(triangles[0].v1, Vector3(2, 0, 5))
    assert all(t.get_material() is matte_red for t in triangles)
    hit = triangles[0].intersect(Ray(Vector3(1.5, 0.5, 0), Vector3(0, 0, 1)))
    assert_close(hit, Vector3(1.5, 0.5, 5))


def test_load_obj_missing_file(tmp_path, matte_red):
    with pytest.raises(FileNotFoundError):
        load_obj(str(tmp_path / "missing.obj"), matte_red)


def test_load_obj_bad_face(tmp_path, matte_red):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nf 1 2 9\n")
    with pytest.raises(ValueError):
        load_obj(str(path), matte_red)
