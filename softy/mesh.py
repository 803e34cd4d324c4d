"""Indexed triangle meshes."""

from __future__ import annotations

import operator
from typing import Iterable

from softy.vertex import Vertex


class Mesh:
    """A vertex buffer and an index buffer of triangle corners."""

    def __init__(self, vertices: Iterable[Vertex] = (), indices: Iterable[int] = ()) -> None:
        self._vertices = tuple(vertices)
        self._indices = tuple(operator.index(i) for i in indices)

    @property
    def vertex_buffer(self) -> tuple[Vertex, ...]:
        return self._vertices

    @property
    def index_buffer(self) -> tuple[int, ...]:
        return self._indices