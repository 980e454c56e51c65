from __future__ import annotations

import argparse
import time
from typing import List, Sequence

import numpy as np
from PIL import Image

from whitted.renderer import render
from whitted.scene import Scene
from whitted.scene_parser import parse_scene_file
from whitted.scenes import example_scene
from whitted.typings.texture import load_texture
from whitted.utils.color import SKY_COLOR


def save_image(image_array: np.ndarray, output_path: str) -> None:
    image = Image.fromarray(np.asarray(image_array, dtype=np.uint8)) # (h, w, 4) uint8 -> RGBA
    image.save(output_path)


def log_phase(label: str, seconds: float) -> None:
    print(f"[phase] {label}: {seconds:.2f}s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Python Ray Tracer')
    parser.add_argument('output_image', type=str, help='Name of the output image file')
    parser.add_argument(
        '--scene',
        dest='scene_file',
        type=str,
        default=None,
        help='Path to a scene file (renders the built-in example scene when omitted)',
    )
    parser.add_argument('--width', type=int, default=1600, help='Image width')
    parser.add_argument('--height', type=int, default=900, help='Image height')
    parser.add_argument(
        '--texture',
        type=str,
        default=None,
        help='Texture image for the example scene (defaults to a generated checkerboard)',
    )
    parser.add_argument(
        '--background',
        type=int,
        nargs=3,
        default=list(SKY_COLOR[:3]),
        metavar=('R', 'G', 'B'),
        help='8-bit color used where primary rays miss every object',
    )
    return parser


def load_scene(scene_file: str | None, texture_file: str | None, width: int, height: int) -> Scene:
    if scene_file is not None:
        return parse_scene_file(scene_file, width, height)
    texture = load_texture(texture_file) if texture_file is not None else None
    return example_scene(texture, width=width, height=height)


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    background: List[int] = [*args.background, 255]
    if any(not 0 <= channel <= 255 for channel in background):
        raise ValueError(f"Background channels must lie in [0, 255], got {args.background}")

    parse_start = time.perf_counter()
    scene = load_scene(args.scene_file, args.texture, args.width, args.height)
    log_phase("parse_scene", time.perf_counter() - parse_start)

    render_start = time.perf_counter()
    image_array = render(scene, background=background)
    log_phase("render", time.perf_counter() - render_start)

    save_start = time.perf_counter()
    save_image(image_array, args.output_image)
    log_phase("save_image", time.perf_counter() - save_start)

    print(
        "[stats] size={}x{}, elements={}, lights={}, max_depth={}".format(
            scene.width, scene.height, len(scene.elements), len(scene.lights), scene.max_recursion_depth
        )
    )


def run() -> None:
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")


if __name__ == '__main__':
    run()
