"""3D vector type used by the flight model, camera and renderer.

World axes follow the rendering convention: +X is right (east), +Y is up,
and -Z is straight ahead for an aircraft with identity orientation.

Typical usage example:
    from flightsim.physics.vectors import Vector3

    velocity = Vector3(0.0, 0.0, -50.0)
    speed = velocity.magnitude()
    step = velocity * dt
"""

import math
from dataclasses import dataclass


@dataclass
class Vector3:
    """Mutable 3D vector.

    Arithmetic operators return new vectors; components may be assigned
    directly (e.g. ``state.position.y = 2.5``).

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.

    Examples:
        >>> Vector3(1.0, 2.0, 3.0) + Vector3(1.0, 0.0, 0.0)
        Vector3(x=2.0, y=2.0, z=3.0)
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def zero() -> "Vector3":
        """Return a new zero vector."""
        return Vector3(0.0, 0.0, 0.0)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: "Vector3") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product (self x other)."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude_squared(self) -> float:
        """Squared length, avoids the square root."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> "Vector3":
        """Return a unit-length copy.

        A zero-length vector is returned unchanged (as a zero vector) so
        callers never divide by zero.
        """
        length = self.magnitude()
        if length < 1e-12:
            return Vector3.zero()
        return self / length

    def copy(self) -> "Vector3":
        """Return an independent copy."""
        return Vector3(self.x, self.y, self.z)

    def is_finite(self) -> bool:
        """True if no component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)
