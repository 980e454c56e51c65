from __future__ import annotations

import math
from typing import Sequence

from whitted.surfaces import Element
from whitted.typings.hit import Intersection
from whitted.typings.ray import Ray


def find_closest_hit(ray: Ray, elements: Sequence[Element]) -> Intersection | None:
    """Find the closest intersection of ray with any element by testing every one of them."""
    best_distance = math.inf
    best_index = -1
    for index, element in enumerate(elements):
        distance = element.intersect(ray)
        if distance is None:
            continue
        if distance < best_distance:
            best_distance = distance
            best_index = index

    if best_index < 0:
        return None
    return Intersection(distance=best_distance, element_index=best_index)


def is_occluded(shadow_ray: Ray, elements: Sequence[Element]) -> bool:
    """Check if a shadow ray hits any element, including ones lying beyond a point light."""
    return any(element.intersect(shadow_ray) is not None for element in elements)
