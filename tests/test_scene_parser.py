"""Unit tests for the scene description file parser."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from whitted.scene_parser import parse_scene_file
from whitted.surfaces import InfinitePlane, Sphere
from whitted.typings.light import DirectionalLight, SphericalLight
from whitted.typings.material import Diffuse, Reflective, TextureColoration

SCENE_TEXT = """
# test scene
cam 60
set 1e-6 4

mtl 0.0 1.0 0.0 0.18 0.0
mtl 1.0 1.0 1.0 1.0 0.5

sph 0 0 -5 1 1
pln 0 -2 0 0 -3 0 2
dlt 0 -1 -1 1 1 1 0.8
plt -1 1.5 -1 0.1 0.1 0.8 100
"""


def _write(tmp_path, text, name="scene.txt"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


class TestParseSceneFile:
    def test_full_scene(self, tmp_path):
        scene = parse_scene_file(_write(tmp_path, SCENE_TEXT), 8, 4)
        assert (scene.width, scene.height, scene.fov) == (8, 4, 60.0)
        assert scene.shadow_bias == pytest.approx(1e-6)
        assert scene.max_recursion_depth == 4

        sphere, plane = scene.elements
        assert isinstance(sphere, Sphere)
        np.testing.assert_allclose(sphere.center, [0.0, 0.0, -5.0])
        assert isinstance(sphere.material.surface, Diffuse)
        assert isinstance(plane, InfinitePlane)
        np.testing.assert_allclose(plane.normal, [0.0, -1.0, 0.0])
        assert isinstance(plane.material.surface, Reflective)

        directional, spherical = scene.lights
        assert isinstance(directional, DirectionalLight)
        assert isinstance(spherical, SphericalLight)
        assert spherical.intensity == pytest.approx(100.0)
        scene.validate()

    def test_defaults_without_cam_and_set(self, tmp_path):
        scene = parse_scene_file(_write(tmp_path, "mtl 1 1 1 1 0\nsph 0 0 -5 1 1\n"), 4, 2)
        assert scene.fov == 90.0
        assert scene.max_recursion_depth == 3
        assert scene.lights == []

    def test_materials_may_follow_surfaces(self, tmp_path):
        scene = parse_scene_file(_write(tmp_path, "sph 0 0 -5 1 1\nmtl 1 0 0 1 0\n"), 4, 2)
        np.testing.assert_allclose(scene.elements[0].material.coloration.color, [1.0, 0.0, 0.0])

    def test_texture_material(self, tmp_path):
        Image.new("RGB", (4, 4), (255, 0, 0)).save(tmp_path / "red.png")
        text = "tex red.png 2.0 0.25\nsph 0 0 -5 1 1\npln 0 -2 0 0 -1 0 1\n"
        scene = parse_scene_file(_write(tmp_path, text), 4, 2)
        sphere, plane = scene.elements
        assert isinstance(sphere.material.coloration, TextureColoration)
        assert sphere.material is plane.material
        assert sphere.material.coloration.texture.pixel(0, 0).tolist() == [255, 0, 0, 255]
        assert sphere.material.surface.reflectivity == pytest.approx(0.25)

    def test_unknown_keyword(self, tmp_path):
        with pytest.raises(ValueError, match="line 2: unknown object type: box"):
            parse_scene_file(_write(tmp_path, "cam 90\nbox 0 0 0 1 1\n"), 4, 2)

    def test_wrong_parameter_count(self, tmp_path):
        with pytest.raises(ValueError, match="line 1"):
            parse_scene_file(_write(tmp_path, "sph 0 0 -5 1\n"), 4, 2)

    def test_non_numeric_parameter(self, tmp_path):
        with pytest.raises(ValueError, match="line 1"):
            parse_scene_file(_write(tmp_path, "cam wide\n"), 4, 2)

    def test_material_index_out_of_range(self, tmp_path):
        with pytest.raises(ValueError, match="line 2: material index 2"):
            parse_scene_file(_write(tmp_path, "mtl 1 1 1 1 0\nsph 0 0 -5 1 2\n"), 4, 2)

    def test_zero_plane_normal(self, tmp_path):
        with pytest.raises(ValueError, match="line 2: plane normal"):
            parse_scene_file(_write(tmp_path, "mtl 1 1 1 1 0\npln 0 0 0 0 0 0 1\n"), 4, 2)


class TestBundledScene:
    def test_example_scene_file_parses(self):
        path = Path(__file__).resolve().parent.parent / "scenes" / "example.txt"
        scene = parse_scene_file(str(path), 16, 9)
        assert len(scene.elements) == 3
        assert len(scene.lights) == 2
        scene.validate()
