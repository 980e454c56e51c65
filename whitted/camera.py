import math

import numpy as np

from whitted.typings.ray import Ray
from whitted.utils.vector_operations import normalize_vector


class Camera:
    """Pinhole camera fixed at the origin, looking down -Z with +Y up and +X right.

    Rays pass through a 2x2 sensor one unit in front of the camera. The sensor
    is scaled by tan(fov / 2) and stretched horizontally by the aspect ratio.
    """

    def __init__(self, width: int, height: int, fov: float) -> None:
        if width <= height:
            raise ValueError(f"Camera requires width > height, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.fov = float(fov)
        self.position: np.ndarray = np.zeros(3, dtype=float)

        self.fov_adjustment: float = math.tan(math.radians(self.fov) / 2.0)
        self.aspect_ratio: float = float(self.width) / float(self.height)

    @classmethod
    def from_scene(cls, scene) -> "Camera":
        return cls(scene.width, scene.height, scene.fov)

    def generate_ray(self, x: int, y: int) -> Ray:
        # pixel centers; screen rows grow downward while sensor y grows upward
        sensor_x = (((float(x) + 0.5) / self.width) * 2.0 - 1.0) * self.aspect_ratio * self.fov_adjustment
        sensor_y = (1.0 - ((float(y) + 0.5) / self.height) * 2.0) * self.fov_adjustment

        direction = normalize_vector(np.array([sensor_x, sensor_y, -1.0]))
        return Ray(origin=self.position, direction=direction)


def create_prime_ray(x: int, y: int, scene) -> Ray:
    return Camera.from_scene(scene).generate_ray(x, y)
