from __future__ import annotations

import math

import numpy as np

from whitted.typings.hit import TextureCoords
from whitted.typings.material import Material
from whitted.typings.ray import Ray
from whitted.utils.vector_operations import normalize_vector, vector_dot


class Sphere:
    def __init__(self, center: np.ndarray, radius: float, material: Material) -> None:
        self.center: np.ndarray = np.asarray(center, dtype=float)
        self.radius: float = float(radius)
        self.material: Material = material

    def intersect(self, ray: Ray) -> float | None:
        """Distance along ``ray`` to the nearest point of the sphere in front of its origin."""
        center_offset = self.center - ray.origin
        # closest approach of the ray line to the center, and its squared distance from the center
        adjacent = vector_dot(center_offset, ray.direction)
        opposite_squared = vector_dot(center_offset, center_offset) - adjacent * adjacent
        radius_squared = self.radius * self.radius
        if opposite_squared > radius_squared:
            return None

        thickness = math.sqrt(radius_squared - opposite_squared)
        t_near = adjacent - thickness
        t_far = adjacent + thickness
        if t_near < 0.0 and t_far < 0.0:
            return None
        # origin inside the sphere: only the far intersection lies ahead
        return t_near if t_near >= 0.0 else t_far

    def surface_normal(self, hit_point: np.ndarray) -> np.ndarray:
        return normalize_vector(hit_point - self.center)

    def texture_coords(self, hit_point: np.ndarray) -> TextureCoords:
        hit_vector = hit_point - self.center
        latitude = min(1.0, max(-1.0, float(hit_vector[1]) / self.radius))
        return TextureCoords(
            x=(1.0 + math.atan2(hit_vector[2], hit_vector[0]) / math.pi) * 0.5,
            y=math.acos(latitude) / math.pi,
        )

    def validate(self) -> None:
        if not np.isfinite(self.center).all():
            raise ValueError(f"Sphere center must be finite, got {self.center.tolist()}")
        if not math.isfinite(self.radius) or not self.radius > 0.0:
            raise ValueError(f"Sphere radius must be positive and finite, got {self.radius}")
        self.material.validate()
