"""32-bit ARGB colours."""

from __future__ import annotations

import operator
from dataclasses import dataclass


def _channel(name: str, value) -> int:
    value = operator.index(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} channel must be between 0 and 255, got {value}")
    return value


@dataclass(frozen=True)
class Color:
    """A colour packed as ``0xAARRGGBB``."""

    argb: int = 0

    def __post_init__(self) -> None:
        value = operator.index(self.argb)
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"argb value out of 32-bit range: {value:#x}")
        object.__setattr__(self, "argb", value)

    @classmethod
    def from_rgba(cls, r, g, b, a=0xFF) -> Color:
        """Build a colour from separate channels; alpha defaults to opaque."""
        r, g, b, a = (_channel(n, v) for n, v in (("r", r), ("g", g), ("b", b), ("a", a)))
        return cls((a << 24) | (r << 16) | (g << 8) | b)

    @property
    def a(self) -> int:
        return (self.argb >> 24) & 0xFF

    @property
    def r(self) -> int:
        return (self.argb >> 16) & 0xFF

    @property
    def g(self) -> int:
        return (self.argb >> 8) & 0xFF

    @property
    def b(self) -> int:
        return self.argb & 0xFF

    @classmethod
    def white(cls) -> Color:
        return cls(0xFFFFFFFF)

    @classmethod
    def black(cls) -> Color:
        return cls(0xFF000000)

    @classmethod
    def red(cls) -> Color:
        return cls(0xFFFF0000)

    @classmethod
    def green(cls) -> Color:
        return cls(0xFF00FF00)

    @classmethod
    def blue(cls) -> Color:
        return cls(0xFF0000FF)