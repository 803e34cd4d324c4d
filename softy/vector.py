"""Small fixed-size vectors with component-wise arithmetic."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator

from softy.mathutil import FLOAT_EPSILON, equals, is_nearly_zero


def _check_divisor(value) -> None:
    limit = FLOAT_EPSILON if isinstance(value, float) else 0
    if abs(value) <= limit:
        raise ZeroDivisionError("division of a vector by a value near zero")


class Vec:
    """An immutable vector of numbers.

    ``Vec(1.0, 2.0, 3.0)`` or ``Vec([1.0, 2.0, 3.0])``. Integer components
    compare exactly with ``==``; use :meth:`equals` for float tolerance.
    """

    __slots__ = ("_v",)

    def __init__(self, *args) -> None:
        if len(args) == 1 and not isinstance(args[0], Real):
            args = tuple(args[0])
        for component in args:
            if not isinstance(component, Real):
                raise TypeError(f"vector components must be numbers, got {component!r}")
        self._v = tuple(args)

    @classmethod
    def zero(cls, n: int) -> Vec:
        return cls(*([0.0] * n))

    @classmethod
    def one(cls, n: int) -> Vec:
        return cls(*([1.0] * n))

    @classmethod
    def basis(cls, n: int, i: int) -> Vec:
        """Unit vector along axis ``i``; all zeros when ``i`` is not an axis."""
        return cls(*(1.0 if j == i else 0.0 for j in range(n)))

    def extend(self, *args) -> Vec:
        """Return this vector with extra components appended."""
        return Vec(*self._v, *args)

    def resized(self, n: int) -> Vec:
        """Truncate to ``n`` components or pad with zeros up to ``n``."""
        if n <= len(self._v):
            return Vec(*self._v[:n])
        pad = 0.0 if any(isinstance(c, float) for c in self._v) else 0
        return Vec(*self._v, *([pad] * (n - len(self._v))))

    def replace(self, index: int, value) -> Vec:
        """Return a copy with the component at ``index`` set to ``value``."""
        components = list(self._v)
        components[index] = value
        return Vec(*components)

    def equals(self, other: Vec, epsilon: float = FLOAT_EPSILON, max_ulp_diff: int = 4) -> bool:
        """Component-wise float comparison with epsilon and ULP tolerance."""
        self._require_same_size(other)
        return all(equals(a, b, epsilon, max_ulp_diff) for a, b in zip(self._v, other._v))

    def _require_same_size(self, other: Vec) -> None:
        if len(self._v) != len(other._v):
            raise ValueError(f"vector sizes differ: {len(self._v)} and {len(other._v)}")

    def __getitem__(self, i):
        if isinstance(i, slice):
            return Vec(*self._v[i])
        return self._v[i]

    def __len__(self) -> int:
        return len(self._v)

    def __iter__(self) -> Iterator:
        return iter(self._v)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._v == other._v

    def __hash__(self) -> int:
        return hash(self._v)

    def __add__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        self._require_same_size(other)
        return Vec(*(a + b for a, b in zip(self._v, other._v)))

    def __sub__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        self._require_same_size(other)
        return Vec(*(a - b for a, b in zip(self._v, other._v)))

    def __neg__(self) -> Vec:
        return Vec(*(-a for a in self._v))

    def __mul__(self, other):
        if isinstance(other, Vec):
            self._require_same_size(other)
            return Vec(*(a * b for a, b in zip(self._v, other._v)))
        if isinstance(other, Real):
            return Vec(*(a * other for a in self._v))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vec(*(other * a for a in self._v))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec):
            self._require_same_size(other)
            for divisor in other._v:
                _check_divisor(divisor)
            return Vec(*(a / b for a, b in zip(self._v, other._v)))
        if isinstance(other, Real):
            _check_divisor(other)
            return Vec(*(a / other for a in self._v))
        return NotImplemented

    def __rtruediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        for divisor in self._v:
            _check_divisor(divisor)
        return Vec(*(other / a for a in self._v))

    def __repr__(self) -> str:
        return f"Vec({', '.join(repr(c) for c in self._v)})"


def dot(lhs: Vec, rhs: Vec):
    """Dot product of two vectors of equal size."""
    if len(lhs) != len(rhs):
        raise ValueError(f"vector sizes differ: {len(lhs)} and {len(rhs)}")
    return sum(a * b for a, b in zip(lhs, rhs))


def cross(lhs: Vec, rhs: Vec):
    """Cross product: a scalar for 2D vectors, a vector for 3D vectors."""
    if len(lhs) == 2 and len(rhs) == 2:
        return lhs[0] * rhs[1] - lhs[1] * rhs[0]
    if len(lhs) == 3 and len(rhs) == 3:
        return Vec(
            lhs[1] * rhs[2] - lhs[2] * rhs[1],
            -(lhs[0] * rhs[2] - lhs[2] * rhs[0]),
            lhs[0] * rhs[1] - lhs[1] * rhs[0],
        )
    raise ValueError("cross product needs two 2D or two 3D vectors")


def length(v: Vec) -> float:
    return math.sqrt(dot(v, v))


def sqr_length(v: Vec):
    return dot(v, v)


def normalize(v: Vec) -> Vec:
    """Unit vector in the direction of ``v``; the zero vector stays zero."""
    size = length(v)
    if is_nearly_zero(size):
        return Vec.zero(len(v))
    return Vec(*(float(c) for c in v)) / size


def fraction(v0: Vec, v1: Vec, p: Vec) -> float:
    """Squared distance of ``p`` from ``v0`` relative to that of ``v1``."""
    u = v1 - v0
    w = p - v0
    return dot(w, w) / dot(u, u)


def barycentric_coordinate(v0: Vec, v1: Vec, *args) -> Vec:
    """Barycentric weights of a point on a segment ``(v0, v1, p)`` or a
    triangle ``(v0, v1, v2, p)``."""
    if len(args) == 1:
        (p,) = args
        u = v1 - v0
        w = p - v0
        second = dot(w, w) / dot(u, u)
        return Vec(1.0 - second, second, 0.0)
    if len(args) == 2:
        v2, p = args
        u = v1 - v0
        v = v2 - v0
        w = p - v0
        uu, vv, uv = dot(u, u), dot(v, v), dot(u, v)
        wu, wv = dot(w, u), dot(w, v)
        denom = uu * vv - uv * uv
        second = (wu * vv - wv * uv) / denom
        third = (wv * uu - wu * uv) / denom
        return Vec(1.0 - second - third, second, third)
    raise TypeError("barycentric_coordinate takes (v0, v1, p) or (v0, v1, v2, p)")


def _as_vec(values: Iterable) -> Vec:
    return values if isinstance(values, Vec) else Vec(values)