"""Render targets and the per-draw constant buffer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from softy.color import Color
from softy.matrix import Mat
from softy.vector import Vec

_LEFT = 0b0001
_RIGHT = 0b0010
_BOTTOM = 0b0100
_TOP = 0b1000


def _to_v2i(v) -> Vec:
    return Vec(int(v[0]), int(v[1]))


def _region(v: Vec, lo: Vec, hi: Vec) -> int:
    region = 0
    if v[0] < lo[0]:
        region |= _LEFT
    if v[0] > hi[0]:
        region |= _RIGHT
    if v[1] < lo[1]:
        region |= _BOTTOM
    if v[1] > hi[1]:
        region |= _TOP
    return region


def _slope(dx: int, dy: int) -> float:
    if dx == 0:
        return math.nan if dy == 0 else math.copysign(math.inf, dy)
    return dy / dx


def _clip_point(v: Vec, region: int, slope: float, lo: Vec, hi: Vec) -> Vec:
    x, y = v[0], v[1]
    if region & _LEFT:
        return Vec(lo[0], int(slope * (lo[0] - x) + y))
    if region & _RIGHT:
        return Vec(hi[0], int(slope * (hi[0] - x) + y))
    if region & _BOTTOM:
        return Vec(int((lo[1] - y) / slope + x), lo[1])
    if region & _TOP:
        return Vec(int((hi[1] - y) / slope + x), hi[1])
    return v


def cohen_sutherland_clip(v0, v1, lo, hi) -> Optional[tuple[Vec, Vec]]:
    """Clip the segment ``v0``-``v1`` to the rectangle ``lo``..``hi``.

    Returns the clipped integer end points, or None when the segment lies
    entirely outside.
    """
    v0, v1, lo, hi = _to_v2i(v0), _to_v2i(v1), _to_v2i(lo), _to_v2i(hi)
    while True:
        r0 = _region(v0, lo, hi)
        r1 = _region(v1, lo, hi)
        if r0 & r1:
            return None
        if not (r0 | r1):
            return v0, v1
        slope = _slope(v1[0] - v0[0], v1[1] - v0[1])
        v0 = _clip_point(v0, r0, slope, lo, hi)
        v1 = _clip_point(v1, r1, slope, lo, hi)


class _Grid:
    def __init__(self, width: int, height: int, fill) -> None:
        self._fill = fill
        self._resize(width, height)

    def _resize(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"buffer size must not be negative: {width}x{height}")
        self._width = width
        self._height = height
        self._cells = [self._fill] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} buffer")
        return y * self._width + x


class ColorBuffer(_Grid):
    """A width x height grid of colours, stored row by row."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        super().__init__(width, height, Color())

    def set_size(self, width: int, height: int) -> None:
        """Resize the buffer; every pixel is reset."""
        self._resize(width, height)

    @property
    def pixels(self) -> tuple[Color, ...]:
        return tuple(self._cells)

    def pixel(self, x: int, y: int) -> Color:
        return self._cells[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not isinstance(color, Color):
            raise TypeError(f"expected a Color, got {color!r}")
        self._cells[self._index(x, y)] = color

    def draw_line(self, v0, v1, color: Color) -> None:
        """Draw a clipped line with Bresenham's algorithm.

        End points may have more than two components; only x and y are
        used, truncated to integers.
        """
        clipped = cohen_sutherland_clip(
            v0, v1, Vec(0, 0), Vec(self._width - 1, self._height - 1)
        )
        if clipped is None:
            return
        (x, y), (x_end, y_end) = clipped
        xi = 1 if x < x_end else -1
        yi = 1 if y < y_end else -1
        dx = abs(x_end - x)
        dy = -abs(y_end - y)
        error = dx + dy
        while True:
            self.set_pixel(x, y, color)
            e2 = 2 * error
            if e2 >= dy:
                if x == x_end:
                    break
                error += dy
                x += xi
            if e2 <= dx:
                if y == y_end:
                    break
                error += dx
                y += yi

    def clear(self, color: Color) -> None:
        if not isinstance(color, Color):
            raise TypeError(f"expected a Color, got {color!r}")
        self._cells = [color] * self.size


class DepthBuffer(_Grid):
    """A width x height grid of depth values."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        super().__init__(width, height, 0.0)

    def set_size(self, width: int, height: int) -> None:
        """Resize the buffer; every depth is reset."""
        self._resize(width, height)

    def depth(self, x: int, y: int) -> float:
        return self._cells[self._index(x, y)]

    def set_depth(self, x: int, y: int, depth: float) -> None:
        self._cells[self._index(x, y)] = float(depth)


@dataclass
class ConstantBuffer:
    """Matrices and material properties visible to the shaders of one draw."""

    world_matrix: Mat = field(default_factory=lambda: Mat.identity(4))
    view_matrix: Mat = field(default_factory=lambda: Mat.identity(4))
    projection_matrix: Mat = field(default_factory=lambda: Mat.identity(4))
    properties: Optional[Mapping[str, Any]] = None

    def set_data(self, other: ConstantBuffer) -> None:
        """Copy every field from ``other``."""
        self.world_matrix = other.world_matrix
        self.view_matrix = other.view_matrix
        self.projection_matrix = other.projection_matrix
        self.properties = other.properties