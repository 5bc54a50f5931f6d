import math

import pytest

from dgengine.matrix import Matrix4
from dgengine.quaternion import Quaternion, lerp, slerp
from dgengine.vectors import Vector3

TOL = 1e-9


def test_identity_and_zero_constants():
    assert tuple(Quaternion.IDENTITY) == (0.0, 0.0, 0.0, 1.0)
    assert tuple(Quaternion.ZERO) == (0.0, 0.0, 0.0, 0.0)
    assert Quaternion.IDENTITY.magnitude() == 1.0
    assert Quaternion.ZERO.magnitude_sqr() == 0.0


def test_add_and_scale():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert q + q == q * 2.0
    assert (q * 2.0) / 2.0 == q
    assert 2.0 * q == q * 2.0


def test_conjugate_negates_vector_part():
    q = Quaternion(1.0, -2.0, 3.0, 4.0)
    assert q.conjugate() == Quaternion(-1.0, 2.0, -3.0, 4.0)
    assert q.conjugate().conjugate() == q


def test_inverse_of_unit_is_conjugate():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 3.0), 0.7)
    assert tuple(q.inverse()) == pytest.approx(tuple(q.conjugate()), abs=TOL)


def test_inverse_scales_by_magnitude_squared():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    inv = q.inverse()
    assert inv.dot(q.conjugate()) == pytest.approx(1.0)


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion.ZERO.inverse()


def test_magnitude_and_normalize():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert q.magnitude() ** 2 == pytest.approx(q.magnitude_sqr())
    assert q.normalize().magnitude() == pytest.approx(1.0)
    assert q.dot(q) == pytest.approx(q.magnitude_sqr())


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion.ZERO.normalize()


def test_axis_angle_zero_is_identity():
    q = Quaternion.from_axis_angle(Vector3.X_AXIS, 0.0)
    assert tuple(q) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=TOL)


def test_axis_angle_normalizes_axis():
    a = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 5.0), 1.1)
    b = Quaternion.from_axis_angle(Vector3.Z_AXIS, 1.1)
    assert tuple(a) == pytest.approx(tuple(b), abs=TOL)
    assert a.magnitude() == pytest.approx(1.0)


@pytest.mark.parametrize(
    "axis, builder",
    [
        (Vector3.X_AXIS, Matrix4.rotation_x),
        (Vector3.Y_AXIS, Matrix4.rotation_y),
        (Vector3.Z_AXIS, Matrix4.rotation_z),
    ],
)
def test_axis_angle_matches_matrix_rotation(axis, builder):
    q = Quaternion.from_axis_angle(axis, 0.6)
    assert tuple(Matrix4.rotation_quaternion(q)) == pytest.approx(
        tuple(builder(0.6)), abs=TOL
    )


def test_yaw_pitch_roll_zero_is_identity():
    q = Quaternion.from_yaw_pitch_roll(0.0, 0.0, 0.0)
    assert tuple(q) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=TOL)


@pytest.mark.parametrize(
    "angles, axis",
    [
        ((0.4, 0.0, 0.0), Vector3.Y_AXIS),
        ((0.0, 0.4, 0.0), Vector3.X_AXIS),
        ((0.0, 0.0, 0.4), Vector3.Z_AXIS),
    ],
)
def test_yaw_pitch_roll_single_axes(angles, axis):
    result = Quaternion.from_yaw_pitch_roll(*angles)
    expected = Quaternion.from_axis_angle(axis, 0.4)
    assert tuple(result) == pytest.approx(tuple(expected), abs=TOL)


@pytest.mark.parametrize("axis", [Vector3.X_AXIS, Vector3.Y_AXIS, Vector3.Z_AXIS])
def test_rotation_matrix_round_trip(axis):
    q = Quaternion.from_axis_angle(axis, 0.5)
    result = Quaternion.from_rotation_matrix(Matrix4.rotation_quaternion(q))
    assert tuple(result) == pytest.approx(tuple(q), abs=TOL)


def test_rotation_matrix_identity():
    result = Quaternion.from_rotation_matrix(Matrix4.IDENTITY)
    assert tuple(result) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=TOL)


def test_rotation_matrix_half_turn_about_z_raises():
    with pytest.raises(ValueError):
        Quaternion.from_rotation_matrix(Matrix4.rotation_z(math.pi))


def test_lerp_endpoints_and_midpoint():
    q0 = Quaternion(1.0, 2.0, 3.0, 4.0)
    q1 = Quaternion(5.0, 6.0, 7.0, 8.0)
    assert tuple(lerp(q0, q1, 0.0)) == pytest.approx((1.0, 2.0, 3.0, 4.0), abs=TOL)
    assert tuple(lerp(q0, q1, 1.0)) == pytest.approx((5.0, 6.0, 7.0, 8.0), abs=TOL)
    assert tuple(lerp(q0, q1, 0.5)) == pytest.approx((3.0, 4.0, 5.0, 6.0), abs=TOL)


def test_slerp_endpoints():
    q0 = Quaternion.IDENTITY
    q1 = Quaternion.from_axis_angle(Vector3.Z_AXIS, 1.2)
    assert tuple(slerp(q0, q1, 0.0)) == pytest.approx(tuple(q0), abs=TOL)
    assert tuple(slerp(q0, q1, 1.0)) == pytest.approx(tuple(q1), abs=TOL)


def test_slerp_midpoint_is_half_angle():
    q1 = Quaternion.from_axis_angle(Vector3.Y_AXIS, 1.2)
    mid = slerp(Quaternion.IDENTITY, q1, 0.5)
    expected = Quaternion.from_axis_angle(Vector3.Y_AXIS, 0.6)
    assert tuple(mid) == pytest.approx(tuple(expected), abs=TOL)


def test_slerp_takes_shorter_arc():
    q1 = Quaternion.from_axis_angle(Vector3.X_AXIS, 1.0)
    result = slerp(Quaternion.IDENTITY, q1 * -1.0, 1.0)
    assert tuple(result) == pytest.approx(tuple(q1), abs=TOL)


def test_slerp_nearly_equal_is_normalized():
    q0 = Quaternion.IDENTITY
    q1 = Quaternion.from_axis_angle(Vector3.X_AXIS, 1e-4)
    assert slerp(q0, q1, 0.3).magnitude() == pytest.approx(1.0)