from __future__ import annotations

import math
from typing import Union

import numpy as np

from whitted.utils.vector_operations import EPSILON, normalize_vector, vector_length


class DirectionalLight:
    """Light arriving from infinitely far away along ``direction`` (e.g. the sun)."""

    def __init__(self, direction: np.ndarray, color: np.ndarray, intensity: float) -> None:
        self.direction: np.ndarray = np.asarray(direction, dtype=float)
        self.color: np.ndarray = np.asarray(color, dtype=float)
        self.intensity: float = float(intensity)

    def direction_from(self, hit_point: np.ndarray) -> np.ndarray:
        return -normalize_vector(self.direction)

    def intensity_at(self, hit_point: np.ndarray) -> float:
        return self.intensity

    def distance_from(self, hit_point: np.ndarray) -> float:
        return math.inf

    def validate(self) -> None:
        if vector_length(self.direction) < EPSILON:
            raise ValueError("Directional light needs a non-zero direction")


class SphericalLight:
    """Point light radiating equally in all directions, with inverse-square falloff."""

    def __init__(self, position: np.ndarray, color: np.ndarray, intensity: float) -> None:
        self.position: np.ndarray = np.asarray(position, dtype=float)
        self.color: np.ndarray = np.asarray(color, dtype=float)
        self.intensity: float = float(intensity)

    def direction_from(self, hit_point: np.ndarray) -> np.ndarray:
        return normalize_vector(self.position - hit_point)

    def intensity_at(self, hit_point: np.ndarray) -> float:
        to_light = self.position - hit_point
        squared_distance = float(np.dot(to_light, to_light))
        return self.intensity / (4.0 * math.pi * squared_distance)

    def distance_from(self, hit_point: np.ndarray) -> float:
        return vector_length(self.position - hit_point)

    def validate(self) -> None:
        if self.intensity < 0.0:
            raise ValueError(f"Light intensity must be non-negative, got {self.intensity}")


Light = Union[DirectionalLight, SphericalLight]
