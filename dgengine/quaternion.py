"""Quaternions for 3D rotations, with linear and spherical interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from dgengine.vectors import Vector3, normalize as normalize_vector

_NUMBER = (int, float)


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    return math.sqrt(value) if value >= 0.0 else math.nan


@dataclass(frozen=True, slots=True)
class Quaternion:
    """An immutable quaternion ``x*i + y*j + z*k + w``."""

    x: float
    y: float
    z: float
    w: float

    IDENTITY: ClassVar["Quaternion"]
    ZERO: ClassVar["Quaternion"]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __mul__(self, scalar):
        if not isinstance(scalar, _NUMBER):
            return NotImplemented
        return Quaternion(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, _NUMBER):
            return NotImplemented
        return Quaternion(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def conjugate(self) -> "Quaternion":
        """Return the quaternion with its vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quaternion":
        """Return the multiplicative inverse; ZERO raises ZeroDivisionError."""
        return self.conjugate() / self.magnitude_sqr()

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_sqr())

    def magnitude_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalize(self) -> "Quaternion":
        """Return this quaternion scaled to unit length."""
        return self / self.magnitude()

    def dot(self, other: "Quaternion") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        """Rotation of ``angle`` radians about ``axis`` (normalised here)."""
        c = math.cos(angle * 0.5)
        s = math.sin(angle * 0.5)
        n = normalize_vector(axis)
        return cls(n.x * s, n.y * s, n.z * s, c)

    @classmethod
    def from_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> "Quaternion":
        """Rotation from yaw (about Y), pitch (about X) and roll (about Z)."""
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return cls(
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            sr * cp * cy - cr * sp * sy,
            cr * cp * cy + sr * sp * sy,
        )

    @classmethod
    def from_rotation_matrix(cls, m) -> "Quaternion":
        """Extract a rotation from a Matrix4.

        Raises ValueError when none of the candidate components dominates,
        which happens for some half-turn rotations.
        """
        w = _sqrt(m.m11 + m.m22 + m.m33 + 1.0) * 0.5
        x = _sqrt(m.m11 - m.m22 - m.m33 + 1.0) * 0.5
        y = _sqrt(m.m11 + m.m22 - m.m33 + 1.0) * 0.5
        z = _sqrt(m.m11 - m.m22 + m.m33 + 1.0) * 0.5
        if w >= x and w >= y and w >= z:
            return cls(
                (m.m23 - m.m32) / (4.0 * w),
                (m.m31 - m.m13) / (4.0 * w),
                (m.m12 - m.m21) / (4.0 * w),
                w,
            )
        if x >= w and x >= y and x >= z:
            return cls(
                x,
                (m.m12 - m.m21) / (4.0 * x),
                (m.m31 - m.m13) / (4.0 * x),
                (m.m23 - m.m32) / (4.0 * x),
            )
        if y >= w and y >= x and y >= z:
            return cls(
                (m.m12 - m.m21) / (4.0 * y),
                y,
                (m.m23 - m.m32) / (4.0 * z),
                (m.m31 - m.m13) / (4.0 * y),
            )
        if z >= w and z >= x and z >= y:
            return cls(
                (m.m31 - m.m13) / (4.0 * z),
                (m.m23 - m.m32) / (4.0 * z),
                z,
                (m.m12 - m.m21) / (4.0 * z),
            )
        raise ValueError("cannot extract a quaternion from this matrix")


Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)
Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)


def lerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
    """Component-wise linear interpolation (not normalised)."""
    return q0 * (1.0 - t) + q1 * t


def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
    """Spherical interpolation along the shorter arc, normalised."""
    d = q0.dot(q1)
    q1_scale = 1.0
    if d < 0.0:
        d = -d
        q1_scale = -1.0

    if d > 0.9999:
        return lerp(q0, q1, t).normalize()

    theta = math.acos(d)
    sin_theta = math.sin(theta)
    scale0 = math.sin(theta * (1.0 - t)) / sin_theta
    scale1 = q1_scale * math.sin(theta * t) / sin_theta
    q = Quaternion(
        q0.x * scale0 + q1.x * scale1,
        q0.y * scale0 + q1.y * scale1,
        q0.z * scale0 + q1.z * scale1,
        q0.w * scale0 + q1.w * scale1,
    )
    return q.normalize()