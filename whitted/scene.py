from __future__ import annotations

from typing import List, Sequence

from whitted.surfaces import Element
from whitted.typings.light import Light


class Scene:
    def __init__(
        self,
        width: int,
        height: int,
        fov: float,
        elements: Sequence[Element],
        lights: Sequence[Light],
        shadow_bias: float = 1e-13,
        max_recursion_depth: int = 3,
    ) -> None:
        self.width: int = int(width)
        self.height: int = int(height)
        self.fov: float = float(fov)
        self.elements: List[Element] = list(elements)
        self.lights: List[Light] = list(lights)
        self.shadow_bias: float = float(shadow_bias)
        self.max_recursion_depth: int = int(max_recursion_depth)

    def validate(self) -> None:
        """Reject configurations the tracer cannot render correctly, before any pixel is traced."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.width <= self.height:
            raise ValueError(f"Image width must exceed height, got {self.width}x{self.height}")
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"Field of view must lie in (0, 180) degrees, got {self.fov}")
        if not self.shadow_bias > 0.0:
            raise ValueError(f"Shadow bias must be positive, got {self.shadow_bias}")
        if self.max_recursion_depth < 0:
            raise ValueError(f"Max recursion depth must be non-negative, got {self.max_recursion_depth}")
        for element in self.elements:
            element.validate()
        for light in self.lights:
            light.validate()
