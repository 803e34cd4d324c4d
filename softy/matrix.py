"""Square matrices built from row vectors, for row-vector transforms."""

from __future__ import annotations

from numbers import Real
from typing import Iterator

from softy.mathutil import FLOAT_EPSILON
from softy.vector import Vec, dot


def _format_component(value) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


class Mat:
    """An immutable square matrix stored as a tuple of row vectors.

    ``Mat(row0, row1, ...)`` or ``Mat([row0, row1, ...])``; rows may be
    :class:`Vec` instances or any iterable of numbers.
    """

    __slots__ = ("_rows",)

    def __init__(self, *args) -> None:
        if len(args) == 1 and not isinstance(args[0], Vec):
            args = tuple(args[0])
        rows = tuple(row if isinstance(row, Vec) else Vec(row) for row in args)
        if not rows:
            raise ValueError("a matrix needs at least one row")
        size = len(rows)
        for row in rows:
            if len(row) != size:
                raise ValueError(f"matrix must be square: {size} rows but a row of {len(row)}")
        self._rows = rows

    @classmethod
    def from_values(cls, n: int, *args) -> Mat:
        """Fill an ``n`` x ``n`` matrix row by row; missing values are zero."""
        if len(args) > n * n:
            raise ValueError(f"too many values for a {n}x{n} matrix: {len(args)}")
        values = [float(a) for a in args] + [0.0] * (n * n - len(args))
        return cls(*(Vec(*values[start:start + n]) for start in range(0, n * n, n)))

    @classmethod
    def identity(cls, n: int) -> Mat:
        return cls(*(Vec.basis(n, i) for i in range(n)))

    @classmethod
    def embed(cls, n: int, *args) -> Mat:
        """Place a smaller square block in the top-left corner of an identity."""
        rows = [row if isinstance(row, Vec) else Vec(row) for row in args]
        block = len(rows)
        if block > n:
            raise ValueError(f"a {block}x{block} block does not fit in a {n}x{n} matrix")
        if any(len(row) != block for row in rows):
            raise ValueError("the embedded block must be square")
        values = [[1.0 if r == c else 0.0 for c in range(n)] for r in range(n)]
        for target, row in zip(values, rows):
            target[:block] = [float(x) for x in row]
        return cls(*(Vec(*row) for row in values))

    def transpose(self) -> Mat:
        return Mat(*(Vec(*column) for column in zip(*self._rows)))

    def equals(self, other: Mat, epsilon: float = FLOAT_EPSILON, max_ulp_diff: int = 4) -> bool:
        """Element-wise float comparison with epsilon and ULP tolerance."""
        self._require_same_size(other)
        return all(a.equals(b, epsilon, max_ulp_diff) for a, b in zip(self._rows, other._rows))

    def _require_same_size(self, other: Mat) -> None:
        if len(self._rows) != len(other._rows):
            raise ValueError(f"matrix sizes differ: {len(self._rows)} and {len(other._rows)}")

    def __getitem__(self, row):
        return self._rows[row]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Vec]:
        return iter(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __add__(self, other):
        if not isinstance(other, Mat):
            return NotImplemented
        self._require_same_size(other)
        return Mat(*(a + b for a, b in zip(self._rows, other._rows)))

    def __sub__(self, other):
        if not isinstance(other, Mat):
            return NotImplemented
        self._require_same_size(other)
        return Mat(*(a - b for a, b in zip(self._rows, other._rows)))

    def __mul__(self, other):
        if isinstance(other, Mat):
            self._require_same_size(other)
            columns = other.transpose()._rows
            return Mat(*(Vec(*(dot(row, column) for column in columns)) for row in self._rows))
        if isinstance(other, Real):
            return Mat(*(row * other for row in self._rows))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Vec):
            if len(other) != len(self._rows):
                raise ValueError(f"vector of size {len(other)} times a {len(self._rows)}x{len(self._rows)} matrix")
            return Vec(*(dot(other, column) for column in self.transpose()._rows))
        if isinstance(other, Real):
            return Mat(*(other * row for row in self._rows))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Real):
            return Mat(*(row / other for row in self._rows))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            return Mat(*(other / row for row in self._rows))
        return NotImplemented

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(_format_component(c) for c in row) + "]" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"Mat({', '.join(repr(row) for row in self._rows)})"


def transpose(m: Mat) -> Mat:
    """Return the transpose of ``m``."""
    return m.transpose()