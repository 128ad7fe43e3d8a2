"""Pinhole projection from world space to screen pixels.

Builds a camera basis from a ``CameraFrame`` and projects points and line
segments onto a surface of a given size. Segments crossing the near plane
are clipped; anything entirely behind the camera is dropped.
"""

import math

from flightsim.physics.vectors import Vector3
from flightsim.rendering.camera import CameraFrame

NEAR_PLANE = 0.1  # m

ScreenPoint = tuple[float, float]


class Projector:
    """Projects world points for one camera frame.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        focal_length: Focal length in pixels.
    """

    def __init__(self, frame: CameraFrame, width: int, height: int) -> None:
        """Build the camera basis.

        Args:
            frame: Camera placement.
            width: Surface width in pixels.
            height: Surface height in pixels.
        """
        self.width = width
        self.height = height
        self.eye = frame.position
        self.forward = (frame.target - frame.position).normalized()

        right = self.forward.cross(frame.up)
        if right.magnitude_squared() < 1e-12:
            # Looking along the up hint, any perpendicular axis will do
            right = self.forward.cross(Vector3(1.0, 0.0, 0.0))
            if right.magnitude_squared() < 1e-12:
                right = self.forward.cross(Vector3(0.0, 0.0, 1.0))
        self.right = right.normalized()
        self.up = self.right.cross(self.forward)

        self.focal_length = (height * 0.5) / math.tan(math.radians(frame.fov_y_deg) * 0.5)

    def to_camera(self, point: Vector3) -> Vector3:
        """Express a world point in camera space (x right, y up, z ahead)."""
        rel = point - self.eye
        return Vector3(rel.dot(self.right), rel.dot(self.up), rel.dot(self.forward))

    def _to_screen(self, cam: Vector3) -> ScreenPoint:
        inv_z = 1.0 / cam.z
        return (
            self.width * 0.5 + cam.x * inv_z * self.focal_length,
            self.height * 0.5 - cam.y * inv_z * self.focal_length,
        )

    def project_point(self, point: Vector3) -> ScreenPoint | None:
        """Project a world point.

        Returns:
            Screen coordinates, or None if the point is behind the near
            plane or not finite.
        """
        cam = self.to_camera(point)
        if not cam.is_finite() or cam.z < NEAR_PLANE:
            return None
        return self._to_screen(cam)

    def project_segment(self, a: Vector3, b: Vector3) -> tuple[ScreenPoint, ScreenPoint] | None:
        """Project a line segment, clipping it at the near plane.

        Returns:
            Pair of screen points, or None if nothing of the segment is in
            front of the camera.
        """
        ca = self.to_camera(a)
        cb = self.to_camera(b)
        if not (ca.is_finite() and cb.is_finite()):
            return None
        if ca.z < NEAR_PLANE and cb.z < NEAR_PLANE:
            return None
        if ca.z < NEAR_PLANE:
            ca = _clip_to_near(cb, ca)
        elif cb.z < NEAR_PLANE:
            cb = _clip_to_near(ca, cb)
        return self._to_screen(ca), self._to_screen(cb)


def _clip_to_near(inside: Vector3, outside: Vector3) -> Vector3:
    t = (inside.z - NEAR_PLANE) / (inside.z - outside.z)
    return inside + (outside - inside) * t
