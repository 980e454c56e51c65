from __future__ import annotations

import numpy as np
from PIL import Image


class Texture:
    """Bitmap used as a surface coloration. Pixels are stored gamma-encoded, as read from disk."""

    def __init__(self, pixels: np.ndarray) -> None:
        pixel_array = np.asarray(pixels, dtype=np.uint8)
        if pixel_array.ndim != 3 or pixel_array.shape[2] != 4:
            raise ValueError(f"Texture pixels must have shape (height, width, 4), got {pixel_array.shape}")
        if pixel_array.shape[0] == 0 or pixel_array.shape[1] == 0:
            raise ValueError("Texture must contain at least one pixel")
        self.pixels: np.ndarray = pixel_array

    @classmethod
    def from_image(cls, image: Image.Image) -> "Texture":
        return cls(np.asarray(image.convert("RGBA"), dtype=np.uint8))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> np.ndarray:
        return self.pixels[y, x]


def load_texture(path: str) -> Texture:
    with Image.open(path) as image:
        return Texture.from_image(image)


def checkerboard_texture(size: int = 256, squares: int = 8) -> Texture:
    """Black and white checkerboard, used by the demo scene when no texture file is given."""
    cell = max(1, size // squares)
    rows, cols = np.indices((size, size))
    white = ((rows // cell + cols // cell) % 2) == 0
    pixels = np.zeros((size, size, 4), dtype=np.uint8)
    pixels[white, :3] = 255
    pixels[..., 3] = 255
    return Texture(pixels)
