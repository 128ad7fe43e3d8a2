"""Tests for Quaternion."""

import math

import pytest

from flightsim.physics.quaternion import Quaternion
from flightsim.physics.vectors import Vector3

X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
Z_AXIS = Vector3(0.0, 0.0, 1.0)


def assert_vector_approx(actual: Vector3, expected: Vector3, abs_tol: float = 1e-9) -> None:
    """Compare vectors component-wise."""
    assert actual.x == pytest.approx(expected.x, abs=abs_tol)
    assert actual.y == pytest.approx(expected.y, abs=abs_tol)
    assert actual.z == pytest.approx(expected.z, abs=abs_tol)


class TestQuaternionRotation:
    """Test vector rotation."""

    def test_identity_leaves_vector(self) -> None:
        """Test identity rotation is a no-op."""
        v = Vector3(1.0, -2.0, 3.0)
        assert Quaternion.identity().rotate(v) == v

    def test_rotation_about_x_pitches_forward_up(self) -> None:
        """Test positive X rotation lifts the -Z axis."""
        q = Quaternion.from_axis_angle(X_AXIS, math.pi / 2)
        assert_vector_approx(q.rotate(Vector3(0.0, 0.0, -1.0)), Vector3(0.0, 1.0, 0.0))

    def test_rotation_about_y(self) -> None:
        """Test positive Y rotation turns -Z toward -X."""
        q = Quaternion.from_axis_angle(Y_AXIS, math.pi / 2)
        assert_vector_approx(q.rotate(Vector3(0.0, 0.0, -1.0)), Vector3(-1.0, 0.0, 0.0))

    def test_rotation_about_z(self) -> None:
        """Test positive Z rotation turns +X toward +Y."""
        q = Quaternion.from_axis_angle(Z_AXIS, math.pi / 2)
        assert_vector_approx(q.rotate(X_AXIS), Y_AXIS)

    def test_opposite_angle_undoes_rotation(self) -> None:
        """Test rotating by -angle about the same axis reverses the rotation."""
        axis = Vector3(1.0, 1.0, 0.0)
        v = Vector3(0.3, -0.2, 0.9)
        there = Quaternion.from_axis_angle(axis, 0.7).rotate(v)
        assert_vector_approx(Quaternion.from_axis_angle(axis, -0.7).rotate(there), v)


class TestQuaternionComposition:
    """Test products and Euler construction."""

    def test_product_applies_right_operand_first(self) -> None:
        """Test (a * b).rotate(v) == a.rotate(b.rotate(v))."""
        a = Quaternion.from_axis_angle(X_AXIS, 0.4)
        b = Quaternion.from_axis_angle(Y_AXIS, -1.1)
        v = Vector3(0.5, 0.25, -1.0)
        assert_vector_approx((a * b).rotate(v), a.rotate(b.rotate(v)))

    def test_euler_xyz_order(self) -> None:
        """Test Euler construction equals Rx * Ry * Rz."""
        ax, ay, az = 0.3, -0.2, 0.9
        expected = (
            Quaternion.from_axis_angle(X_AXIS, ax)
            * Quaternion.from_axis_angle(Y_AXIS, ay)
            * Quaternion.from_axis_angle(Z_AXIS, az)
        )
        actual = Quaternion.from_euler_xyz(ax, ay, az)
        assert actual.w == pytest.approx(expected.w)
        assert actual.x == pytest.approx(expected.x)
        assert actual.y == pytest.approx(expected.y)
        assert actual.z == pytest.approx(expected.z)

    def test_euler_zero_is_identity(self) -> None:
        """Test zero angles give the identity."""
        assert Quaternion.from_euler_xyz(0.0, 0.0, 0.0) == Quaternion.identity()


class TestQuaternionNormalization:
    """Test normalization."""

    def test_normalized_is_unit(self) -> None:
        """Test normalization of a scaled quaternion."""
        q = Quaternion(2.0, 0.0, 2.0, 0.0).normalized()
        assert q.norm() == pytest.approx(1.0)
        assert q.w == pytest.approx(math.sqrt(0.5))

    def test_degenerate_falls_back_to_identity(self) -> None:
        """Test a zero quaternion normalizes to identity."""
        assert Quaternion(0.0, 0.0, 0.0, 0.0).normalized() == Quaternion.identity()

    def test_is_finite(self) -> None:
        """Test non-finite detection."""
        assert Quaternion.identity().is_finite()
        assert not Quaternion(math.nan, 0.0, 0.0, 0.0).is_finite()
