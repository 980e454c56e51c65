from __future__ import annotations

import numpy as np

from whitted.typings.hit import TextureCoords
from whitted.typings.material import Material
from whitted.typings.ray import Ray
from whitted.utils.vector_operations import EPSILON, FORWARD, UP, vector_cross, vector_dot, vector_length

PARALLEL_THRESHOLD: float = 1e-6
UNIT_TOLERANCE: float = 1e-6


class InfinitePlane:
    """One-sided plane through ``origin``.

    ``normal`` points in the direction rays travel when they hit the visible
    face, so the shading normal is its negation.
    """

    def __init__(self, origin: np.ndarray, normal: np.ndarray, material: Material) -> None:
        self.origin: np.ndarray = np.asarray(origin, dtype=float)
        self.normal: np.ndarray = np.asarray(normal, dtype=float)
        self.material: Material = material

    def intersect(self, ray: Ray) -> float | None:
        direction_dot_normal = vector_dot(self.normal, ray.direction)
        if direction_dot_normal <= PARALLEL_THRESHOLD:
            return None

        hit_distance = vector_dot(self.origin - ray.origin, self.normal) / direction_dot_normal
        if hit_distance < 0.0:
            return None
        return hit_distance

    def surface_normal(self, hit_point: np.ndarray) -> np.ndarray:
        return -self.normal

    def texture_coords(self, hit_point: np.ndarray) -> TextureCoords:
        x_axis = vector_cross(self.normal, FORWARD)
        if vector_length(x_axis) < EPSILON:
            x_axis = vector_cross(self.normal, UP)
        y_axis = vector_cross(self.normal, x_axis)

        hit_vector = hit_point - self.origin
        return TextureCoords(x=vector_dot(hit_vector, x_axis), y=vector_dot(hit_vector, y_axis))

    def validate(self) -> None:
        if not np.isfinite(self.origin).all():
            raise ValueError(f"Plane origin must be finite, got {self.origin.tolist()}")
        if not np.isfinite(self.normal).all():
            raise ValueError(f"Plane normal must be finite, got {self.normal.tolist()}")
        if abs(vector_length(self.normal) - 1.0) > UNIT_TOLERANCE:
            raise ValueError(f"Plane normal must have unit length, got {self.normal.tolist()}")
        self.material.validate()
