from __future__ import annotations

from whitted.scene import Scene
from whitted.surfaces import InfinitePlane, Sphere
from whitted.typings.light import DirectionalLight, SphericalLight
from whitted.typings.material import Diffuse, Material, Reflective, SolidColoration, TextureColoration
from whitted.typings.texture import Texture, checkerboard_texture
from whitted.utils.color import rgb
from whitted.utils.vector_operations import point, vec3


def example_scene(texture: Texture | None = None, width: int = 1600, height: int = 900) -> Scene:
    """Three spheres over a reflective checkerboard floor, lit by two suns and a blue point light."""
    if texture is None:
        texture = checkerboard_texture()

    elements = [
        Sphere(
            point(0.3, 0.5, -3.0),
            0.85,
            Material(SolidColoration(rgb(0.0, 1.0, 0.0)), albedo=5.0, surface=Reflective(0.3)),
        ),
        Sphere(
            point(3.5, -0.2, -6.0),
            0.5,
            Material(SolidColoration(rgb(1.0, 0.0, 0.0)), albedo=3.0, surface=Reflective(0.001)),
        ),
        Sphere(
            point(-2.5, 2.0, -6.0),
            2.0,
            Material(TextureColoration(texture), albedo=6.0, surface=Diffuse()),
        ),
        InfinitePlane(
            point(0.0, -2.0, 0.0),
            vec3(0.0, -1.0, 0.0),
            Material(TextureColoration(texture), albedo=1.0, surface=Reflective(0.5)),
        ),
    ]
    lights = [
        DirectionalLight(vec3(-0.8, -1.0, -0.4), rgb(1.0, 1.0, 1.0), 0.8),
        DirectionalLight(vec3(0.8, -1.0, -0.4), rgb(1.0, 0.2, 0.2), 0.6),
        SphericalLight(point(-1.0, 1.5, -1.0), rgb(0.1, 0.1, 0.8), 100.0),
    ]
    return Scene(
        width=width,
        height=height,
        fov=90.0,
        elements=elements,
        lights=lights,
        shadow_bias=1e-13,
        max_recursion_depth=3,
    )
