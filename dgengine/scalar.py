"""Scalar constants and generic numeric helpers."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")

PI = 3.1415926535
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI


def minimum(a, b):
    """Return the smaller of two values, preferring ``b`` on ties."""
    return a if a < b else b


def maximum(a, b):
    """Return the larger of two values, preferring ``b`` on ties."""
    return a if a > b else b


def clamp(value, low, high):
    """Limit ``value`` to the closed range [low, high]."""
    return maximum(low, minimum(high, value))


def lerp(a, b, t):
    """Linearly interpolate from ``a`` to ``b`` by ``t``."""
    return a + ((b - a) * t)


def absolute(value):
    """Return the absolute value of ``value``."""
    return value if value >= 0 else -value


def sqr(value):
    """Return ``value`` multiplied by itself."""
    return value * value