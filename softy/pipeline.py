"""Render pipelines that queue objects and draw them for a camera."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from softy.buffer import ConstantBuffer
from softy.camera import Camera
from softy.material import Material
from softy.matrix import Mat
from softy.rasterizer import rasterize
from softy.vertex import Vertex


@dataclass(frozen=True)
class _DrawCall:
    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...]
    transform: Mat
    material: Material


class RenderPipeline(ABC):
    """Collects draw calls until :meth:`render` consumes them."""

    def __init__(self, constant_buffer: Optional[ConstantBuffer] = None) -> None:
        self.constant_buffer = constant_buffer if constant_buffer is not None else ConstantBuffer()
        self._queue: list[_DrawCall] = []

    def add_object(self, vertices: Iterable[Vertex], indices: Iterable[int], transform: Mat, material: Material) -> None:
        """Queue a copy of the geometry with its world transform and material."""
        self._queue.append(_DrawCall(tuple(vertices), tuple(indices), transform, material))

    @abstractmethod
    def render(self, camera: Camera) -> None:
        """Draw every queued object into the camera's render target."""


class ForwardRenderPipeline(RenderPipeline):
    """Runs each object's shaders and rasterizes it, one object at a time."""

    def render(self, camera: Camera) -> None:
        cb = self.constant_buffer
        target = camera.render_target
        queue, self._queue = self._queue, []
        for call in queue:
            cb.world_matrix = call.transform
            shader = call.material.shader
            outputs = shader.vs(cb, call.vertices)
            rasterize(target, outputs, call.indices, shader.fs)