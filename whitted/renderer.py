import math
from typing import Sequence

import numpy as np

from whitted.camera import Camera
from whitted.scene import Scene
from whitted.surfaces import Element
from whitted.typings.hit import Intersection
from whitted.typings.material import Reflective
from whitted.typings.ray import Ray
from whitted.utils.color import BLACK, SKY_COLOR, clamp_color01, color_to_rgba
from whitted.utils.shadow_utils import find_closest_hit, is_occluded
from whitted.utils.vector_operations import EPSILON, reflect_vector, vector_dot


def create_reflection_ray(normal: np.ndarray, incident: np.ndarray, hit_point: np.ndarray, bias: float) -> Ray:
    return Ray(origin=hit_point + normal * bias, direction=reflect_vector(incident, normal))


def shade_diffuse(scene: Scene, element: Element, hit_point: np.ndarray, surface_normal: np.ndarray) -> np.ndarray:
    """Lambertian lighting from every unoccluded light, clamped to [0, 1]."""
    material = element.material
    texture_coords = element.texture_coords(hit_point)
    surface_color = material.coloration.color_at(texture_coords)
    light_reflected = material.albedo / math.pi
    shadow_origin = hit_point + surface_normal * scene.shadow_bias # to avoid shadow acne

    color = BLACK.copy()
    for light in scene.lights:
        light_distance = light.distance_from(hit_point)
        if light_distance < EPSILON: # light sits on the surface, no direction to shade with
            continue
        direction_to_light = light.direction_from(hit_point)

        shadow_ray = Ray(origin=shadow_origin, direction=direction_to_light)
        if is_occluded(shadow_ray, scene.elements):
            continue

        # Diffuse component: max(dot(N, L), 0) * intensity * albedo / pi
        light_power = max(vector_dot(surface_normal, direction_to_light), 0.0) * light.intensity_at(hit_point)
        color += surface_color * light.color * light_power * light_reflected

    return clamp_color01(color)


def get_color(scene: Scene, ray: Ray, intersection: Intersection, depth: int) -> np.ndarray:
    element = scene.elements[intersection.element_index]
    hit_point = ray.at(intersection.distance)
    surface_normal = element.surface_normal(hit_point)

    color = shade_diffuse(scene, element, hit_point, surface_normal)
    surface = element.material.surface
    if isinstance(surface, Reflective):
        reflection_ray = create_reflection_ray(surface_normal, ray.direction, hit_point, scene.shadow_bias)
        reflected_color = cast_ray(scene, reflection_ray, depth + 1)
        color = color * (1.0 - surface.reflectivity) + reflected_color * surface.reflectivity
    return color


def cast_ray(scene: Scene, ray: Ray, depth: int) -> np.ndarray:
    """Recursive tracing entry point. Rays past the depth limit, or hitting nothing, are black."""
    if depth >= scene.max_recursion_depth:
        return BLACK.copy()

    intersection = find_closest_hit(ray, scene.elements)
    if intersection is None:
        return BLACK.copy()
    return get_color(scene, ray, intersection, depth)


def render(scene: Scene, background: Sequence[int] = SKY_COLOR) -> np.ndarray:
    """Render the scene into a (height, width, 4) RGBA uint8 array, top-left origin.

    Primary rays are shaded at depth 0 regardless of ``max_recursion_depth``;
    the limit only bounds reflection rays. Pixels whose primary ray misses
    every element get ``background``.
    """
    scene.validate()
    camera = Camera.from_scene(scene)
    background_pixel = np.asarray(background, dtype=np.uint8)
    if background_pixel.shape != (4,):
        raise ValueError(f"Background must be an RGBA pixel, got {list(background)}")

    image = np.empty((scene.height, scene.width, 4), dtype=np.uint8)
    for y in range(scene.height):
        for x in range(scene.width):
            ray = camera.generate_ray(x, y)
            intersection = find_closest_hit(ray, scene.elements)
            if intersection is None:
                image[y, x, :] = background_pixel
                continue
            image[y, x, :] = color_to_rgba(get_color(scene, ray, intersection, depth=0))

    return image
