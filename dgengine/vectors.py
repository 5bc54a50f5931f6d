"""Two-, three- and four-component float vectors and Vector3 helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import ClassVar, Iterator

_NUMBER = (int, float)


class _VectorOps:
    """Component-wise arithmetic shared by the vector types."""

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))

    def _map(self, fn):
        return type(self)(*(fn(c) for c in self))

    def _zip(self, other, fn):
        return type(self)(*(fn(a, b) for a, b in zip(self, other)))

    def __neg__(self):
        return self._map(lambda c: -c)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, lambda a, b: a + b)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, lambda a, b: a - b)

    def __mul__(self, scalar):
        if not isinstance(scalar, _NUMBER):
            return NotImplemented
        return self._map(lambda c: c * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, _NUMBER):
            return NotImplemented
        return self._map(lambda c: c / scalar)


@dataclass(frozen=True, slots=True)
class Vector2(_VectorOps):
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]
    ONE: ClassVar["Vector2"]
    X_AXIS: ClassVar["Vector2"]
    Y_AXIS: ClassVar["Vector2"]

    def __neg__(self) -> "Vector2":
        return _VectorOps.__neg__(self)

    def __add__(self, other):
        return _VectorOps.__add__(self, other)

    def __sub__(self, other):
        return _VectorOps.__sub__(self, other)

    def __mul__(self, scalar):
        return _VectorOps.__mul__(self, scalar)

    def __truediv__(self, scalar):
        return _VectorOps.__truediv__(self, scalar)


@dataclass(frozen=True, slots=True)
class Vector3(_VectorOps):
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vector3"]
    ONE: ClassVar["Vector3"]
    X_AXIS: ClassVar["Vector3"]
    Y_AXIS: ClassVar["Vector3"]
    Z_AXIS: ClassVar["Vector3"]

    def __neg__(self) -> "Vector3":
        return _VectorOps.__neg__(self)

    def __add__(self, other):
        return _VectorOps.__add__(self, other)

    def __sub__(self, other):
        return _VectorOps.__sub__(self, other)

    def __mul__(self, scalar):
        return _VectorOps.__mul__(self, scalar)

    def __truediv__(self, scalar):
        return _VectorOps.__truediv__(self, scalar)


@dataclass(frozen=True, slots=True)
class Vector4(_VectorOps):
    """A 4D vector; also used as an RGBA colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __neg__(self) -> "Vector4":
        return _VectorOps.__neg__(self)

    def __add__(self, other):
        return _VectorOps.__add__(self, other)

    def __sub__(self, other):
        return _VectorOps.__sub__(self, other)

    def __mul__(self, scalar):
        return _VectorOps.__mul__(self, scalar)

    def __truediv__(self, scalar):
        return _VectorOps.__truediv__(self, scalar)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.X_AXIS = Vector2(1.0, 0.0)
Vector2.Y_AXIS = Vector2(0.0, 1.0)

Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.X_AXIS = Vector3(1.0, 0.0, 0.0)
Vector3.Y_AXIS = Vector3(0.0, 1.0, 0.0)
Vector3.Z_AXIS = Vector3(0.0, 0.0, 1.0)


def dot(a: Vector3, b: Vector3) -> float:
    """Dot product of two 3D vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def magnitude_sqr(a: Vector3) -> float:
    """Squared length of a 3D vector."""
    return a.x * a.x + a.y * a.y + a.z * a.z


def magnitude(a: Vector3) -> float:
    """Length of a 3D vector."""
    return math.sqrt(magnitude_sqr(a))


def distance_sqr(a: Vector3, b: Vector3) -> float:
    """Squared distance between two points."""
    return abs(magnitude_sqr(a - b))


def distance(a: Vector3, b: Vector3) -> float:
    """Distance between two points."""
    return math.sqrt(distance_sqr(a, b))


def normalize(a: Vector3) -> Vector3:
    """Return ``a`` scaled to unit length; a zero vector raises ZeroDivisionError."""
    return a / magnitude(a)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product of two 3D vectors."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )