from typing import Union

from whitted.surfaces.infinite_plane import InfinitePlane
from whitted.surfaces.sphere import Sphere

Element = Union[Sphere, InfinitePlane]

__all__ = ["Element", "InfinitePlane", "Sphere"]
