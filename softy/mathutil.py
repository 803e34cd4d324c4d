"""Scalar helpers shared by the vector, matrix and transform code."""

from __future__ import annotations

import math
import struct

E = math.e
PI = math.pi
HALF_PI = math.pi * 0.5
INV_PI = 1.0 / math.pi
INV_SQRT_PI = 1.0 / math.sqrt(math.pi)
RAD2DEG = 57.295779513082320876798154814105
DEG2RAD = 0.01745329251994329576923690768489

# Machine epsilon of a single-precision float; comparisons follow float32 rules.
FLOAT_EPSILON = 2.0**-23

_FAST_RSQRT_MAGIC = 0x5F3759DF


def _float32_signed_bits(value: float) -> int:
    return struct.unpack("<i", struct.pack("<f", value))[0]


def _float32_unsigned_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _float32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


def clamp_degree_360(degree):
    """Wrap an angle in degrees into the range [0, 360)."""
    if isinstance(degree, int):
        return degree % 360
    value = math.fmod(degree, 360.0)
    if value < 0.0:
        value += 360.0
    return value


def is_nearly_zero(value: float) -> bool:
    """True when the magnitude of ``value`` is within float epsilon."""
    return abs(value) <= FLOAT_EPSILON


def is_negative(num) -> bool:
    """True when the sign bit of ``num`` is set (so -0.0 counts)."""
    return math.copysign(1.0, num) < 0.0


def signbit(num):
    """Return -1 or 1, in the type of ``num``, according to its sign bit."""
    return type(num)(-1) if is_negative(num) else type(num)(1)


def equals(lhs: float, rhs: float, epsilon: float = FLOAT_EPSILON, max_ulp_diff: int = 4) -> bool:
    """Compare two floats with an absolute epsilon, then by float32 ULP distance."""
    if not 0 < max_ulp_diff <= 4:
        raise ValueError("max_ulp_diff must be between 1 and 4")
    if abs(lhs - rhs) <= epsilon:
        return True
    if is_negative(lhs) != is_negative(rhs):
        return False
    return abs(_float32_signed_bits(lhs) - _float32_signed_bits(rhs)) <= max_ulp_diff


def lerp(a, b, t):
    """Linear interpolation ``a + t * (b - a)``; works for vectors too."""
    return a + t * (b - a)


def clamp(v, lo, hi):
    """Limit ``v`` to the closed range [lo, hi]."""
    if v > hi:
        return hi
    if v < lo:
        return lo
    return v


def rsqrt(num: float) -> float:
    """Approximate 1/sqrt(num) with one Newton step on the float32 bit trick."""
    y = _float32_from_bits(_FAST_RSQRT_MAGIC - (_float32_unsigned_bits(num) >> 1))
    return y * (1.5 - (num * 0.5 * y * y))