"""Vertex records passed between the shader stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar, Union

from softy.mathutil import lerp
from softy.vector import Vec


@dataclass(frozen=True)
class Vertex:
    """An input vertex: homogeneous position, normal and texture coordinate."""

    position: Vec = field(default_factory=lambda: Vec.zero(4))
    normal: Vec = field(default_factory=lambda: Vec.zero(3))
    uv: Vec = field(default_factory=lambda: Vec.zero(2))


@dataclass(frozen=True)
class VertexOutput:
    """A vertex after the vertex shader, in clip space."""

    position: Vec = field(default_factory=lambda: Vec.zero(4))
    normal: Vec = field(default_factory=lambda: Vec.zero(3))
    uv: Vec = field(default_factory=lambda: Vec.zero(2))


V = TypeVar("V", Vertex, VertexOutput)


def lerp_vertex(v0: V, v1: V, t: float) -> V:
    """Interpolate every attribute of two vertices of the same kind."""
    if type(v0) is not type(v1):
        raise TypeError("cannot interpolate between different vertex kinds")
    return type(v0)(
        position=lerp(v0.position, v1.position, t),
        normal=lerp(v0.normal, v1.normal, t),
        uv=lerp(v0.uv, v1.uv, t),
    )


AnyVertex = Union[Vertex, VertexOutput]