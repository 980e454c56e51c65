from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Intersection:
    """Nearest hit along a ray.

    ``element_index`` points into ``Scene.elements`` so the result carries no
    reference back into the scene.
    """

    distance: float
    element_index: int

    def __post_init__(self) -> None:
        if not math.isfinite(self.distance):
            raise FloatingPointError(f"Intersection distance must be finite, got {self.distance!r}")
        if self.distance < 0.0:
            raise ValueError(f"Intersection distance must not lie behind the ray origin, got {self.distance!r}")


@dataclass(frozen=True, slots=True)
class TextureCoords:
    x: float
    y: float
