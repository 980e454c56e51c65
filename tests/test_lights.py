"""Unit tests for directional and spherical lights."""

import math

import numpy as np
import pytest

from whitted.typings.light import DirectionalLight, SphericalLight
from whitted.utils.color import rgb
from whitted.utils.vector_operations import point, vec3


class TestDirectionalLight:
    def test_direction_points_back_toward_light(self):
        light = DirectionalLight(vec3(0.0, -2.0, 0.0), rgb(1.0, 1.0, 1.0), 0.8)
        np.testing.assert_allclose(light.direction_from(point(5.0, 1.0, -3.0)), [0.0, 1.0, 0.0])

    def test_constant_intensity_everywhere(self):
        light = DirectionalLight(vec3(-0.8, -1.0, -0.4), rgb(1.0, 1.0, 1.0), 0.8)
        assert light.intensity_at(point(0.0, 0.0, 0.0)) == 0.8
        assert light.intensity_at(point(100.0, -50.0, 7.0)) == 0.8

    def test_infinitely_far(self):
        light = DirectionalLight(vec3(0.0, -1.0, 0.0), rgb(1.0, 1.0, 1.0), 1.0)
        assert light.distance_from(point(0.0, 0.0, 0.0)) == math.inf

    def test_zero_direction_rejected(self):
        with pytest.raises(ValueError):
            DirectionalLight(vec3(0.0, 0.0, 0.0), rgb(1.0, 1.0, 1.0), 1.0).validate()


class TestSphericalLight:
    def test_direction_toward_position(self):
        light = SphericalLight(point(0.0, 4.0, 0.0), rgb(1.0, 1.0, 1.0), 1.0)
        np.testing.assert_allclose(light.direction_from(point(0.0, 1.0, 0.0)), [0.0, 1.0, 0.0])

    def test_inverse_square_falloff(self):
        light = SphericalLight(point(0.0, 0.0, 0.0), rgb(1.0, 1.0, 1.0), 16.0 * math.pi)
        assert light.intensity_at(point(0.0, 0.0, -2.0)) == pytest.approx(1.0)
        assert light.intensity_at(point(0.0, 0.0, -4.0)) == pytest.approx(0.25)

    def test_distance(self):
        light = SphericalLight(point(1.0, 2.0, 2.0), rgb(1.0, 1.0, 1.0), 1.0)
        assert light.distance_from(point(0.0, 0.0, 0.0)) == pytest.approx(3.0)
