from __future__ import annotations

from typing import Union

import numpy as np

from whitted.typings.hit import TextureCoords
from whitted.typings.texture import Texture
from whitted.utils.color import color_from_rgba


def wrap(value: float, bound: int) -> int:
    """Maps an unbounded texture coordinate onto a pixel index in [0, bound)."""
    return int(value * bound) % bound


class SolidColoration:
    def __init__(self, color: np.ndarray) -> None:
        self.color: np.ndarray = np.asarray(color, dtype=float)

    def color_at(self, tex_coords: TextureCoords) -> np.ndarray:
        return self.color


class TextureColoration:
    def __init__(self, texture: Texture) -> None:
        self.texture: Texture = texture

    def color_at(self, tex_coords: TextureCoords) -> np.ndarray:
        tex_x = wrap(tex_coords.x, self.texture.width)
        tex_y = wrap(tex_coords.y, self.texture.height)
        return color_from_rgba(self.texture.pixel(tex_x, tex_y))


Coloration = Union[SolidColoration, TextureColoration]


class Diffuse:
    def __repr__(self) -> str:
        return "Diffuse()"


class Reflective:
    def __init__(self, reflectivity: float) -> None:
        self.reflectivity: float = float(reflectivity)

    def __repr__(self) -> str:
        return f"Reflective(reflectivity={self.reflectivity})"


SurfaceType = Union[Diffuse, Reflective]


class Material:
    def __init__(self, coloration: Coloration, albedo: float, surface: SurfaceType | None = None) -> None:
        self.coloration: Coloration = coloration
        self.albedo: float = float(albedo)
        self.surface: SurfaceType = surface if surface is not None else Diffuse()

    def validate(self) -> None:
        if self.albedo < 0.0:
            raise ValueError(f"Material albedo must be non-negative, got {self.albedo}")
        if isinstance(self.surface, Reflective) and not 0.0 <= self.surface.reflectivity <= 1.0:
            raise ValueError(f"Reflectivity must lie in [0, 1], got {self.surface.reflectivity}")
