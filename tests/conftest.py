"""Shared fixtures for the ray tracer tests.

Scenes here keep a camera-facing sphere at (0, 0, -5) with radius 1 so that
the primary ray through the image center hits it at (0, 0, -4).
"""

import math

import numpy as np
import pytest

from whitted.scene import Scene
from whitted.surfaces import Sphere
from whitted.typings.material import Diffuse, Material, SolidColoration
from whitted.utils.color import rgb
from whitted.utils.vector_operations import point

TEST_BIAS = 1e-6


def solid_material(red, green, blue, albedo=math.pi, surface=None):
    """Material whose albedo defaults to pi, so albedo / pi == 1."""
    return Material(SolidColoration(rgb(red, green, blue)), albedo, surface if surface is not None else Diffuse())


def make_scene(elements, lights=(), width=3, height=1, fov=90.0, max_recursion_depth=3):
    return Scene(
        width=width,
        height=height,
        fov=fov,
        elements=elements,
        lights=list(lights),
        shadow_bias=TEST_BIAS,
        max_recursion_depth=max_recursion_depth,
    )


@pytest.fixture
def white_material():
    return solid_material(1.0, 1.0, 1.0)


@pytest.fixture
def green_sphere():
    return Sphere(point(0.0, 0.0, -5.0), 1.0, solid_material(0.0, 1.0, 0.0))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
