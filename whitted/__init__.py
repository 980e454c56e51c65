"""Recursive ray tracer: spheres and planes, directional and point lights,
hard shadows and mirror reflections, rendered to an RGBA array."""

from whitted.renderer import render
from whitted.scene import Scene

__version__ = "0.1.0"

__all__ = ["Scene", "render"]
