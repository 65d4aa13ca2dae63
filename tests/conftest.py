"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src/ to the path so the tests run without an editable install
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from penumbra.core.vector import Vector3
from penumbra.geometry.light import Light
from penumbra.geometry.scene import Scene
from penumbra.geometry.sphere import Sphere
from penumbra.materials.material import Material


@pytest.fixture
def matte_red():
    return Material(Vector3(0.9, 0.2, 0.2), 0.0)


@pytest.fixture
def single_sphere_scene(matte_red):
    """One radius-2 sphere below and in front of a camera at the origin."""
    scene = Scene(Vector3(0.0, 0.0, 0.0))
    scene.add(Sphere(Vector3(0.0, -8.0, 13.0), 2.0, matte_red))
    scene.add_light(Light(Vector3(0.0, 4.5, 7.0), Vector3(1.0, 1.0, 1.0), 1.0))
    return scene


def assert_close(a: Vector3, b: Vector3, tol: float = 1e-6):
    assert abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol and abs(a.z - b.z) <= tol, f"{a!r} != {b!r}"
