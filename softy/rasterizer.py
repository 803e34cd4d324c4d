"""Clip-space culling, homogeneous clipping and wireframe rasterization."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

from softy.buffer import ColorBuffer
from softy.color import Color
from softy.mathutil import FLOAT_EPSILON
from softy.vector import Vec
from softy.vertex import VertexOutput, lerp_vertex

T = TypeVar("T")


class HomogeneousPlane(Enum):
    """The clipping planes of the canonical view volume, in clipping order."""

    POSITIVE_W = 0
    POSITIVE_X = 1
    NEGATIVE_X = 2
    POSITIVE_Y = 3
    NEGATIVE_Y = 4
    POSITIVE_Z = 5
    NEGATIVE_Z = 6


# Signed distance to each plane: non-negative means inside.
_DISTANCE: dict[HomogeneousPlane, Callable[[Vec], float]] = {
    HomogeneousPlane.POSITIVE_W: lambda v: v[3] - FLOAT_EPSILON,
    HomogeneousPlane.POSITIVE_X: lambda v: v[3] - v[0],
    HomogeneousPlane.NEGATIVE_X: lambda v: v[3] + v[0],
    HomogeneousPlane.POSITIVE_Y: lambda v: v[3] - v[1],
    HomogeneousPlane.NEGATIVE_Y: lambda v: v[3] + v[1],
    HomogeneousPlane.POSITIVE_Z: lambda v: v[3] - v[2],
    HomogeneousPlane.NEGATIVE_Z: lambda v: v[3] + v[2],
}


def _triples(items: Sequence[T]) -> Iterator[tuple[T, T, T]]:
    if len(items) % 3:
        raise ValueError(f"expected a multiple of three items, got {len(items)}")
    it = iter(items)
    return zip(it, it, it)


def frustum_culling(v0: VertexOutput, v1: VertexOutput, v2: VertexOutput) -> bool:
    """True when the whole triangle lies outside one side of the view volume."""
    triangle = (v0.position, v1.position, v2.position)
    if all(abs(p[0]) > p[3] for p in triangle):
        return True
    if all(abs(p[1]) > p[3] for p in triangle):
        return True
    return all(p[2] > p[3] for p in triangle)


def is_visible(v: Vec) -> bool:
    """True when the clip-space position lies inside the view volume."""
    return abs(v[0]) <= v[3] and abs(v[1]) <= v[3] and abs(v[2]) <= v[3]


def is_inside_plane(v: Vec, plane: HomogeneousPlane) -> bool:
    return _DISTANCE[plane](v) >= 0


def plane_fraction(prev: Vec, cur: Vec, plane: HomogeneousPlane) -> float:
    """Parameter along ``prev``-``cur`` where the edge crosses ``plane``."""
    distance = _DISTANCE[plane]
    d_prev = distance(prev)
    return d_prev / (d_prev - distance(cur))


def plane_clipping(plane: HomogeneousPlane, inputs: Iterable[VertexOutput]) -> list[VertexOutput]:
    """Clip a polygon against one plane; fewer than three corners gives []."""
    polygon = list(inputs)
    if len(polygon) < 3:
        return []
    outputs: list[VertexOutput] = []
    for prev, cur in zip([polygon[-1], *polygon[:-1]], polygon):
        prev_inside = is_inside_plane(prev.position, plane)
        cur_inside = is_inside_plane(cur.position, plane)
        if prev_inside != cur_inside:
            t = plane_fraction(prev.position, cur.position, plane)
            outputs.append(lerp_vertex(prev, cur, t))
        if cur_inside:
            outputs.append(cur)
    return outputs if len(outputs) >= 3 else []


def homogeneous_clipping(inputs: Sequence[VertexOutput]) -> list[VertexOutput]:
    """Clip a triangle list against the view volume and re-triangulate."""
    outputs: list[VertexOutput] = []
    for triangle in _triples(list(inputs)):
        if all(is_visible(v.position) for v in triangle):
            outputs.extend(triangle)
            continue
        polygon = list(triangle)
        for plane in HomogeneousPlane:
            polygon = plane_clipping(plane, polygon)
        if not polygon:
            continue
        anchor = polygon[0]
        for a, b in zip(polygon[1:], polygon[2:]):
            outputs.extend((anchor, a, b))
    return outputs


def _vertex_at(inputs: Sequence[VertexOutput], index) -> VertexOutput:
    index = operator.index(index)
    if index < 0:
        raise IndexError(f"negative vertex index: {index}")
    return inputs[index]


def rasterize(render_target: ColorBuffer, inputs: Sequence[VertexOutput], indices: Sequence[int], fs) -> None:
    """Cull, clip and draw indexed triangles as a red wireframe.

    ``fs`` is the material's fragment shader; the wireframe pass does not
    invoke it.
    """
    inputs = list(inputs)
    culled: list[VertexOutput] = []
    for triple in _triples(list(indices)):
        triangle = tuple(_vertex_at(inputs, i) for i in triple)
        if frustum_culling(*triangle):
            continue
        culled.extend(triangle)

    clipped = homogeneous_clipping(culled)

    half_width = float(render_target.width // 2)
    half_height = float(render_target.height // 2)

    def to_screen(position: Vec) -> Vec:
        w = position[3]
        return Vec(position[0] / w * half_width + half_width, position[1] / w * half_height + half_height)

    red = Color.red()
    for v0, v1, v2 in _triples(clipped):
        p0, p1, p2 = to_screen(v0.position), to_screen(v1.position), to_screen(v2.position)
        render_target.draw_line(p0, p1, red)
        render_target.draw_line(p1, p2, red)
        render_target.draw_line(p0, p2, red)