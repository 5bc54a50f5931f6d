"""Row-major 4x4 matrix with the row-vector convention, and helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import ClassVar, Iterable, Iterator

from dgengine.vectors import Vector3, normalize

_NUMBER = (int, float)


@dataclass(frozen=True, slots=True)
class Matrix4:
    """A 4x4 matrix; the default value is the identity."""

    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m24: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0
    m34: float = 0.0
    m41: float = 0.0
    m42: float = 0.0
    m43: float = 0.0
    m44: float = 1.0

    ZERO: ClassVar["Matrix4"]
    IDENTITY: ClassVar["Matrix4"]

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Matrix4":
        """Build a matrix from 16 values in row-major order."""
        items = tuple(values)
        if len(items) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(items)}")
        return cls(*items)

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        items = tuple(self)
        return tuple(items[start:start + 4] for start in range(0, 16, 4))

    @classmethod
    def translation(cls, x, y=None, z=None) -> "Matrix4":
        """Translation by (x, y, z), or by a Vector3 given as ``x``."""
        if isinstance(x, Vector3):
            x, y, z = x.x, x.y, x.z
        elif y is None or z is None:
            raise TypeError("translation needs a Vector3 or three components")
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            x, y, z, 1.0,
        )

    @classmethod
    def rotation_axis(cls, axis: Vector3, rad: float) -> "Matrix4":
        """Rotation of ``rad`` radians about ``axis``."""
        u = normalize(axis)
        x, y, z = u.x, u.y, u.z
        s = math.sin(rad)
        c = math.cos(rad)
        t = 1.0 - c
        return cls(
            c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0,
            x * y * t - z * s, c + y * y * t, y * z * t + x * s, 0.0,
            x * z * t + y * s, y * z * t - x * s, c + z * z * t, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_x(cls, rad: float) -> "Matrix4":
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_y(cls, rad: float) -> "Matrix4":
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_z(cls, rad: float) -> "Matrix4":
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_quaternion(cls, q) -> "Matrix4":
        """Rotation described by a quaternion with x, y, z, w attributes."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return cls(
            1.0 - 2.0 * y * y - 2.0 * z * z,
            2.0 * x * y + 2.0 * z * w,
            2.0 * x * z - 2.0 * y * w,
            0.0,
            2.0 * x * y - 2.0 * z * w,
            1.0 - 2.0 * x * x - 2.0 * z * z,
            2.0 * y * z + 2.0 * x * w,
            0.0,
            2.0 * x * z + 2.0 * y * w,
            2.0 * y * z - 2.0 * x * w,
            1.0 - 2.0 * x * x - 2.0 * y * y,
            0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def scaling(cls, sx, sy=None, sz=None) -> "Matrix4":
        """Scaling by a Vector3, a uniform factor, or three factors."""
        if isinstance(sx, Vector3):
            sx, sy, sz = sx.x, sx.y, sx.z
        elif sy is None and sz is None:
            sy = sz = sx
        elif sy is None or sz is None:
            raise TypeError("scaling needs one factor, three factors or a Vector3")
        return cls(
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def __neg__(self) -> "Matrix4":
        return Matrix4(*(-v for v in self))

    def __add__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            columns = tuple(zip(*other.rows))
            return Matrix4(*(
                sum(a * b for a, b in zip(row, col))
                for row in self.rows
                for col in columns
            ))
        if isinstance(other, _NUMBER):
            return Matrix4(*(v * other for v in self))
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, _NUMBER):
            return self * scalar
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, _NUMBER):
            return NotImplemented
        return Matrix4(*(v / scalar for v in self))


Matrix4.ZERO = Matrix4(*([0.0] * 16))
Matrix4.IDENTITY = Matrix4()


def transform_coord(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a point, applying the translation row."""
    return Vector3(
        v.x * m.m11 + v.y * m.m21 + v.z * m.m31 + m.m41,
        v.x * m.m12 + v.y * m.m22 + v.z * m.m32 + m.m42,
        v.x * m.m13 + v.y * m.m23 + v.z * m.m33 + m.m43,
    )


def transform_normal(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a direction, ignoring translation."""
    return Vector3(
        v.x * m.m11 + v.y * m.m21 + v.z * m.m31,
        v.x * m.m12 + v.y * m.m22 + v.z * m.m32,
        v.x * m.m13 + v.y * m.m23 + v.z * m.m33,
    )


def transpose(m: Matrix4) -> Matrix4:
    return Matrix4(*(v for col in zip(*m.rows) for v in col))


def determinant(m: Matrix4) -> float:
    (m11, m12, m13, m14,
     m21, m22, m23, m24,
     m31, m32, m33, m34,
     m41, m42, m43, m44) = m
    det = m11 * (m22 * (m33 * m44 - m43 * m34) - m23 * (m32 * m44 - m42 * m34)
                 + m24 * (m32 * m43 - m42 * m33))
    det -= m12 * (m21 * (m33 * m44 - m43 * m34) - m23 * (m31 * m44 - m41 * m34)
                  + m24 * (m31 * m43 - m41 * m33))
    det += m13 * (m21 * (m32 * m44 - m42 * m34) - m22 * (m31 * m44 - m41 * m34)
                  + m24 * (m31 * m42 - m41 * m32))
    det -= m14 * (m21 * (m32 * m43 - m42 * m33) - m22 * (m31 * m43 - m41 * m33)
                  + m23 * (m31 * m42 - m41 * m32))
    return det


def adjoint(m: Matrix4) -> Matrix4:
    """The adjugate (transposed cofactor matrix) of ``m``."""
    (m11, m12, m13, m14,
     m21, m22, m23, m24,
     m31, m32, m33, m34,
     m41, m42, m43, m44) = m
    return Matrix4(
        +(m22 * (m33 * m44 - m43 * m34) - m23 * (m32 * m44 - m42 * m34) + m24 * (m32 * m43 - m42 * m33)),
        -(m12 * (m33 * m44 - m43 * m34) - m13 * (m32 * m44 - m42 * m34) + m14 * (m32 * m43 - m42 * m33)),
        +(m12 * (m23 * m44 - m43 * m24) - m13 * (m22 * m44 - m42 * m24) + m14 * (m22 * m43 - m42 * m23)),
        -(m12 * (m23 * m34 - m33 * m24) - m13 * (m22 * m34 - m32 * m24) + m14 * (m22 * m33 - m32 * m23)),

        -(m21 * (m33 * m44 - m43 * m34) - m31 * (m23 * m44 - m24 * m43) + m41 * (m23 * m34 - m24 * m33)),
        +(m11 * (m33 * m44 - m43 * m34) - m13 * (m31 * m44 - m41 * m34) + m14 * (m31 * m43 - m41 * m33)),
        -(m11 * (m23 * m44 - m43 * m24) - m13 * (m21 * m44 - m41 * m24) + m14 * (m21 * m43 - m41 * m23)),
        +(m11 * (m23 * m34 - m33 * m24) - m13 * (m21 * m34 - m31 * m24) + m14 * (m21 * m33 - m31 * m23)),

        +(m21 * (m32 * m44 - m42 * m34) - m31 * (m22 * m44 - m42 * m24) + m41 * (m22 * m34 - m32 * m24)),
        -(m11 * (m32 * m44 - m42 * m34) - m31 * (m12 * m44 - m42 * m14) + m41 * (m12 * m34 - m32 * m14)),
        +(m11 * (m22 * m44 - m42 * m24) - m12 * (m21 * m44 - m41 * m24) + m14 * (m21 * m42 - m41 * m22)),
        -(m11 * (m22 * m34 - m32 * m24) - m21 * (m12 * m34 - m32 * m14) + m31 * (m12 * m24 - m22 * m14)),

        -(m21 * (m32 * m43 - m42 * m33) - m31 * (m22 * m43 - m42 * m23) + m41 * (m22 * m33 - m32 * m23)),
        +(m11 * (m32 * m43 - m42 * m33) - m12 * (m31 * m43 - m41 * m33) + m13 * (m31 * m42 - m41 * m32)),
        -(m11 * (m22 * m43 - m42 * m23) - m12 * (m21 * m43 - m41 * m23) + m13 * (m21 * m42 - m41 * m22)),
        +(m11 * (m22 * m33 - m32 * m23) - m12 * (m21 * m33 - m31 * m23) + m13 * (m21 * m32 - m31 * m22)),
    )


def inverse(m: Matrix4) -> Matrix4:
    """Inverse of ``m``; a singular matrix raises ZeroDivisionError."""
    return adjoint(m) * (1.0 / determinant(m))


def get_translation(m: Matrix4) -> Vector3:
    return Vector3(m.m41, m.m42, m.m43)


def get_right(m: Matrix4) -> Vector3:
    return Vector3(m.m11, m.m12, m.m13)


def get_up(m: Matrix4) -> Vector3:
    return Vector3(m.m21, m.m22, m.m23)


def get_look(m: Matrix4) -> Vector3:
    return Vector3(m.m31, m.m32, m.m33)


def get_scale(m: Matrix4) -> Vector3:
    return Vector3(m.m11, m.m22, m.m33)