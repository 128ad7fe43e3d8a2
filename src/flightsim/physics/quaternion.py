"""Quaternion mathematics for attitude representation.

Quaternions give a singularity-free representation of 3D rotations, so
repeated small control inputs never run into gimbal lock.

Convention: q = w + x*i + y*j + z*k, Hamilton product, rotations are
active (``q.rotate(v)`` turns a body-frame vector into the world frame).
"""

import math
from dataclasses import dataclass

from flightsim.physics.vectors import Vector3


@dataclass
class Quaternion:
    """Rotation quaternion.

    Attributes:
        w: Scalar part.
        x: i component.
        y: j component.
        z: k component.
    """

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def identity() -> "Quaternion":
        """Return the identity rotation."""
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> "Quaternion":
        """Create a rotation of ``angle`` radians about ``axis``.

        Args:
            axis: Rotation axis (normalized internally).
            angle: Rotation angle in radians, right-handed.

        Returns:
            Unit quaternion.
        """
        unit = axis.normalized()
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(math.cos(half), unit.x * s, unit.y * s, unit.z * s)

    @staticmethod
    def from_euler_xyz(angle_x: float, angle_y: float, angle_z: float) -> "Quaternion":
        """Create a rotation from intrinsic X, then Y, then Z angles.

        Equivalent to ``Rx(angle_x) * Ry(angle_y) * Rz(angle_z)``.

        Args:
            angle_x: Rotation about local X in radians.
            angle_y: Rotation about local Y in radians.
            angle_z: Rotation about local Z in radians.

        Returns:
            Unit quaternion.
        """
        hx = angle_x * 0.5
        hy = angle_y * 0.5
        hz = angle_z * 0.5
        qx = Quaternion(math.cos(hx), math.sin(hx), 0.0, 0.0)
        qy = Quaternion(math.cos(hy), 0.0, math.sin(hy), 0.0)
        qz = Quaternion(math.cos(hz), 0.0, 0.0, math.sin(hz))
        return qx * qy * qz

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Hamilton product ``self * other`` (apply ``other`` first)."""
        return Quaternion(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def norm(self) -> float:
        """Quaternion length."""
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Quaternion":
        """Return a unit-length copy.

        Falls back to identity for a degenerate (near-zero) quaternion.
        """
        n = self.norm()
        if n < 1e-10:
            return Quaternion.identity()
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate a vector by this quaternion.

        Uses the expanded form of q * v * q^-1, which assumes a unit
        quaternion.

        Args:
            v: Vector to rotate.

        Returns:
            Rotated vector.
        """
        # t = 2 * (q_vec x v); v' = v + w*t + q_vec x t
        tx = 2.0 * (self.y * v.z - self.z * v.y)
        ty = 2.0 * (self.z * v.x - self.x * v.z)
        tz = 2.0 * (self.x * v.y - self.y * v.x)
        return Vector3(
            v.x + self.w * tx + (self.y * tz - self.z * ty),
            v.y + self.w * ty + (self.z * tx - self.x * tz),
            v.z + self.w * tz + (self.x * ty - self.y * tx),
        )

    def copy(self) -> "Quaternion":
        """Return an independent copy."""
        return Quaternion(self.w, self.x, self.y, self.z)

    def is_finite(self) -> bool:
        """True if no component is NaN or infinite."""
        return all(math.isfinite(c) for c in (self.w, self.x, self.y, self.z))
