from __future__ import annotations

import os
from typing import Dict, List, Tuple

import numpy as np

from whitted.scene import Scene
from whitted.surfaces import Element, InfinitePlane, Sphere
from whitted.typings.light import DirectionalLight, Light, SphericalLight
from whitted.typings.material import Diffuse, Material, Reflective, SolidColoration, SurfaceType, TextureColoration
from whitted.typings.texture import Texture, load_texture
from whitted.utils.vector_operations import normalize_vector

# keyword -> number of parameters
PARAMETER_COUNTS: Dict[str, int] = {
    "cam": 1,
    "set": 2,
    "mtl": 5,
    "tex": 3,
    "sph": 5,
    "pln": 7,
    "dlt": 7,
    "plt": 7,
}


def _surface_type(reflectivity: float) -> SurfaceType:
    if reflectivity > 0.0:
        return Reflective(reflectivity)
    return Diffuse()


def _material_index(value: float, materials: List[Material], line_number: int) -> Material:
    index = int(value)
    if not (1 <= index <= len(materials)):
        raise ValueError(
            "line {}: material index {} out of range (1..{})".format(line_number, index, len(materials))
        )
    return materials[index - 1]


def parse_scene_file(file_path: str, width: int, height: int) -> Scene:
    """Read a scene description file.

    Each non-blank line starts with a keyword followed by its parameters::

        cam fov
        set shadow_bias max_recursion_depth
        mtl r g b albedo reflectivity
        tex texture_path albedo reflectivity
        sph cx cy cz radius material_index
        pln ox oy oz nx ny nz material_index
        dlt dx dy dz r g b intensity
        plt px py pz r g b intensity

    Material indices are 1-based and count ``mtl`` and ``tex`` lines in file
    order. Texture paths are resolved relative to the scene file.
    """
    base_directory = os.path.dirname(os.path.abspath(file_path))
    fov = 90.0
    shadow_bias = 1e-13
    max_recursion_depth = 3
    materials: List[Material] = []
    textures: Dict[str, Texture] = {}
    pending_elements: List[Tuple[str, List[float], int]] = []
    lights: List[Light] = []

    with open(file_path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            obj_type = parts[0]
            if obj_type not in PARAMETER_COUNTS:
                raise ValueError("line {}: unknown object type: {}".format(line_number, obj_type))
            if len(parts) - 1 != PARAMETER_COUNTS[obj_type]:
                raise ValueError(
                    "line {}: '{}' expects {} parameters, got {}".format(
                        line_number, obj_type, PARAMETER_COUNTS[obj_type], len(parts) - 1
                    )
                )

            numeric_parts = parts[2:] if obj_type == "tex" else parts[1:]
            try:
                params = [float(p) for p in numeric_parts]
            except ValueError as exc:
                raise ValueError("line {}: {}".format(line_number, exc)) from exc

            if obj_type == "tex":
                texture_path = os.path.join(base_directory, parts[1])
                if texture_path not in textures:
                    textures[texture_path] = load_texture(texture_path)
                coloration = TextureColoration(textures[texture_path])
                materials.append(Material(coloration, params[0], _surface_type(params[1])))
            elif obj_type == "cam":
                fov = params[0]
            elif obj_type == "set":
                shadow_bias = params[0]
                max_recursion_depth = int(params[1])
            elif obj_type == "mtl":
                coloration = SolidColoration(np.asarray(params[:3], dtype=float))
                materials.append(Material(coloration, params[3], _surface_type(params[4])))
            elif obj_type in ("sph", "pln"):
                pending_elements.append((obj_type, params, line_number))
            elif obj_type == "dlt":
                lights.append(
                    DirectionalLight(np.asarray(params[:3], dtype=float), np.asarray(params[3:6], dtype=float), params[6])
                )
            elif obj_type == "plt":
                lights.append(
                    SphericalLight(np.asarray(params[:3], dtype=float), np.asarray(params[3:6], dtype=float), params[6])
                )

    elements: List[Element] = []
    for obj_type, params, line_number in pending_elements:
        material = _material_index(params[-1], materials, line_number)
        if obj_type == "sph":
            elements.append(Sphere(np.asarray(params[:3], dtype=float), params[3], material))
        else:
            try:
                normal = normalize_vector(np.asarray(params[3:6], dtype=float))
            except ValueError as exc:
                raise ValueError("line {}: plane normal: {}".format(line_number, exc)) from exc
            elements.append(InfinitePlane(np.asarray(params[:3], dtype=float), normal, material))

    return Scene(
        width=width,
        height=height,
        fov=fov,
        elements=elements,
        lights=lights,
        shadow_bias=shadow_bias,
        max_recursion_depth=max_recursion_depth,
    )
