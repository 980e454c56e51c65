from __future__ import annotations

from typing import Sequence

import numpy as np

GAMMA: float = 2.2

BLACK: np.ndarray = np.zeros(3, dtype=float)
SKY_COLOR: tuple[int, int, int, int] = (178, 212, 255, 255)


def rgb(red: float, green: float, blue: float) -> np.ndarray:
    """Linear-light color. Components may exceed 1.0 while light is being accumulated."""
    return np.array([red, green, blue], dtype=float)


def gamma_encode(linear: np.ndarray | float) -> np.ndarray:
    return np.power(np.asarray(linear, dtype=float), 1.0 / GAMMA)


def gamma_decode(encoded: np.ndarray | float) -> np.ndarray:
    return np.power(np.asarray(encoded, dtype=float), GAMMA)


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0]."""
    color_array = np.asarray(color_rgb, dtype=float)
    return np.clip(color_array, 0.0, 1.0)


def color_to_rgba(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a linear color to an opaque, gamma-encoded 8-bit RGBA pixel."""
    encoded = gamma_encode(clamp_color01(color_rgb))
    channels = (encoded * 255.0 + 0.5).astype(np.uint8) # 0.5 before conversion ensures correct rounding
    return np.append(channels, np.uint8(255))


def color_from_rgba(pixel: Sequence[int] | np.ndarray) -> np.ndarray:
    """Decodes the RGB bytes of a gamma-encoded pixel back to linear color. Alpha is ignored."""
    channels = np.asarray(pixel[:3], dtype=float) / 255.0
    return gamma_decode(channels)
