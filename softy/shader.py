"""Vertex and fragment shader stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from softy.buffer import ConstantBuffer
from softy.color import Color
from softy.vertex import Vertex, VertexOutput

VertexShader = Callable[[ConstantBuffer, Sequence[Vertex]], list]
FragmentShader = Callable[[ConstantBuffer, VertexOutput], Color]

COLOR_PROPERTY = "Color_"


def default_vertex_shader(cb: ConstantBuffer, vertices: Sequence[Vertex]) -> list[VertexOutput]:
    """Transform positions by the world, view and projection matrices."""
    return [
        VertexOutput(
            position=vertex.position * cb.world_matrix * cb.view_matrix * cb.projection_matrix
        )
        for vertex in vertices
    ]


def unlit_color_fragment_shader(cb: ConstantBuffer, vertex: VertexOutput) -> Color:
    """Return the material's ``Color_`` property."""
    properties = cb.properties if cb.properties is not None else {}
    color = properties[COLOR_PROPERTY]
    if not isinstance(color, Color):
        raise TypeError(f"property {COLOR_PROPERTY!r} is not a Color: {color!r}")
    return color


@dataclass(frozen=True)
class Shader:
    """A fragment shader paired with a vertex shader."""

    fs: FragmentShader
    vs: VertexShader = default_vertex_shader


def unlit_color_shader() -> Shader:
    return Shader(unlit_color_fragment_shader)