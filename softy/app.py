"""Render the spinning wireframe cube and save the frame as a PPM image."""

from __future__ import annotations

import argparse
import os
import time
from pathlib import Path
from typing import Optional, Sequence, Union

from softy.buffer import ColorBuffer, ConstantBuffer
from softy.camera import Camera
from softy.color import Color
from softy.material import Material
from softy.matrix import Mat
from softy.mesh import Mesh
from softy.pipeline import ForwardRenderPipeline
from softy.shader import COLOR_PROPERTY, unlit_color_shader
from softy.transform import Transform
from softy.vector import Vec
from softy.vertex import Vertex

WINDOW_NAME = "softy"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_DT = 1.0 / 60.0

_CUBE_CORNERS = (
    (-0.5, -0.5, -0.5),
    (-0.5, -0.5, +0.5),
    (+0.5, -0.5, +0.5),
    (+0.5, -0.5, -0.5),
    (-0.5, +0.5, -0.5),
    (-0.5, +0.5, +0.5),
    (+0.5, +0.5, +0.5),
    (+0.5, +0.5, -0.5),
)

_CUBE_INDICES = (
    0, 1, 2, 0, 2, 3, 0, 4, 7, 0, 7, 3, 1, 5, 4, 1, 4, 0,
    2, 6, 5, 2, 5, 1, 3, 7, 6, 3, 6, 2, 4, 5, 6, 4, 6, 7,
)


def cube_mesh() -> Mesh:
    """A unit cube centred on the origin, as twelve triangles."""
    return Mesh((Vertex(Vec(*corner, 1.0)) for corner in _CUBE_CORNERS), _CUBE_INDICES)


def render_scene(frames: int = 1, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, dt: float = DEFAULT_DT) -> ColorBuffer:
    """Render ``frames`` frames of the cube spinning 60 degrees per second.

    Each frame is cleared to black before drawing; the last frame is returned.
    """
    if frames < 1:
        raise ValueError(f"at least one frame is needed, got {frames}")
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive: {width}x{height}")

    cb = ConstantBuffer()
    target = ColorBuffer(width, height)
    pipeline = ForwardRenderPipeline(cb)

    cube = cube_mesh()
    cube_transform = Transform()
    material = Material(unlit_color_shader())
    material.set_property(COLOR_PROPERTY, Color(0xFFFF0000))
    camera = Camera(target)

    for _ in range(frames):
        target.clear(Color.black())

        camera.transform.position = Vec(0.0, 0.0, -0.5)
        camera.transform.look_at(Vec(0.0, 0.0, 0.0), True)
        cube_transform.scale = Vec.one(3) * 2.0
        cube_transform.rotation = cube_transform.rotation + Vec(0.0, 60.0 * dt, 0.0)

        cb.set_data(
            ConstantBuffer(
                world_matrix=Mat.identity(4),
                view_matrix=camera.view_matrix(),
                projection_matrix=camera.projection_matrix(),
            )
        )
        pipeline.add_object(cube.vertex_buffer, cube.index_buffer, cube_transform.trs, material)
        pipeline.render(camera)

    return target


def write_ppm(buffer: ColorBuffer, path: Union[str, os.PathLike]) -> None:
    """Write the buffer as a binary PPM; buffer row 0 is the bottom of the image."""
    pixels = buffer.pixels
    width, height = buffer.width, buffer.height
    data = bytearray(b"P6\n%d %d\n255\n" % (width, height))
    for y in reversed(range(height)):
        for color in pixels[y * width:(y + 1) * width]:
            data += bytes((color.r, color.g, color.b))
    Path(path).write_bytes(bytes(data))


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog=WINDOW_NAME, description="Render a spinning wireframe cube to a PPM image.")
    parser.add_argument("--frames", type=_positive_int, default=1, help="number of frames to render")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT)
    parser.add_argument("--dt", type=float, default=DEFAULT_DT, help="seconds per frame")
    parser.add_argument("--output", default=f"{WINDOW_NAME}.ppm", help="image file to write")
    args = parser.parse_args(argv)

    start = time.perf_counter()
    buffer = render_scene(args.frames, args.width, args.height, args.dt)
    elapsed = time.perf_counter() - start
    write_ppm(buffer, args.output)

    fps = args.frames / elapsed if elapsed > 0 else float("inf")
    print(f"{WINDOW_NAME} {fps:.2f}")
    return 0