"""Wireframe scene rendering with pygame.

Draws the sky, a ground grid, a field of cloud blocks and the aircraft as
four boxes (fuselage, wing, tail plane, canopy), all projected through
the current camera frame.
"""

import pygame

from flightsim.physics.flight_model.base import AircraftState
from flightsim.physics.vectors import Vector3
from flightsim.rendering.camera import CameraFrame
from flightsim.rendering.projection import Projector

Color = tuple[int, int, int]

SKY_COLOR: Color = (36, 115, 195)
GRID_COLOR: Color = (64, 120, 46)
GRID_AXIS_COLOR: Color = (90, 150, 70)
CLOUD_COLOR: Color = (230, 247, 255)
FUSELAGE_COLOR: Color = (219, 227, 237)
WING_COLOR: Color = (204, 209, 224)
TAIL_COLOR: Color = (191, 199, 209)
CANOPY_COLOR: Color = (191, 212, 242)

GRID_CELLS = 80
GRID_SPACING = 40.0  # m

# (from corner index, to corner index) for the 12 box edges
_BOX_EDGES = (
    (0, 1), (0, 2), (0, 4), (1, 3), (1, 5), (2, 3),
    (2, 6), (3, 7), (4, 5), (4, 6), (5, 7), (6, 7),
)  # fmt: skip

Axes = tuple[Vector3, Vector3, Vector3]


def box_corners(center: Vector3, axes: Axes, size: Vector3) -> list[Vector3]:
    """Corners of an oriented box.

    Args:
        center: Box center.
        axes: Edge directions (a, b, c), scaled by size.x, size.y, size.z.
        size: Edge lengths along each axis.

    Returns:
        Eight corners; bit 0 of the index selects +a, bit 1 +b, bit 2 +c.
    """
    a, b, c = axes
    edge_a = a * size.x
    edge_b = b * size.y
    edge_c = c * size.z
    origin = center - edge_a * 0.5 - edge_b * 0.5 - edge_c * 0.5

    corners = []
    for index in range(8):
        corner = origin
        if index & 1:
            corner = corner + edge_a
        if index & 2:
            corner = corner + edge_b
        if index & 4:
            corner = corner + edge_c
        corners.append(corner)
    return corners


def aircraft_boxes(state: AircraftState) -> list[tuple[Vector3, Axes, Vector3, Color]]:
    """Boxes making up the aircraft model, in world space."""
    forward = state.forward()
    right = state.right()
    up = state.up()
    p = state.position
    body_axes = (right, up, forward)

    return [
        (p + forward * 1.5, body_axes, Vector3(2.2, 0.8, 9.0), FUSELAGE_COLOR),
        # Wing is a flat slab spanning right, thin along up
        (p, (right, forward, up), Vector3(14.0, 0.6, 0.25), WING_COLOR),
        (p + forward * -3.0 + up * -0.2, body_axes, Vector3(4.5, 0.4, 3.0), TAIL_COLOR),
        (p + forward * 4.0 + up * 0.6, body_axes, Vector3(1.1, 0.9, 1.6), CANOPY_COLOR),
    ]


def cloud_boxes() -> list[tuple[Vector3, Vector3]]:
    """Cloud block centers and sizes."""
    clouds = []
    for i in range(-4, 5):
        offset = i * 320.0
        clouds.append((Vector3(offset, 300.0, 900.0), Vector3(14.0, 14.0, 14.0)))
        clouds.append((Vector3(offset * 1.4, 240.0, -1100.0), Vector3(22.0, 16.0, 22.0)))
    return clouds


_WORLD_AXES: Axes = (Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0))


class SceneRenderer:
    """Renders the 3D scene onto a pygame surface."""

    def __init__(self, line_width: int = 1) -> None:
        """Initialize the renderer.

        Args:
            line_width: Wireframe line width in pixels.
        """
        self.line_width = line_width
        self._clouds = cloud_boxes()

    def render(self, surface: pygame.Surface, state: AircraftState, frame: CameraFrame) -> None:
        """Draw one frame of the scene.

        Args:
            surface: Target surface.
            state: Aircraft state (read only).
            frame: Camera placement.
        """
        surface.fill(SKY_COLOR)
        projector = Projector(frame, surface.get_width(), surface.get_height())

        self._draw_grid(surface, projector)
        for center, size in self._clouds:
            self._draw_box(surface, projector, center, _WORLD_AXES, size, CLOUD_COLOR)
        for center, axes, size, color in aircraft_boxes(state):
            self._draw_box(surface, projector, center, axes, size, color)

    def _draw_line(
        self,
        surface: pygame.Surface,
        projector: Projector,
        a: Vector3,
        b: Vector3,
        color: Color,
    ) -> None:
        segment = projector.project_segment(a, b)
        if segment is not None:
            pygame.draw.line(surface, color, segment[0], segment[1], self.line_width)

    def _draw_grid(self, surface: pygame.Surface, projector: Projector) -> None:
        half = GRID_CELLS * GRID_SPACING * 0.5
        for i in range(GRID_CELLS + 1):
            offset = -half + i * GRID_SPACING
            color = GRID_AXIS_COLOR if i == GRID_CELLS // 2 else GRID_COLOR
            self._draw_line(
                surface, projector, Vector3(offset, 0.0, -half), Vector3(offset, 0.0, half), color
            )
            self._draw_line(
                surface, projector, Vector3(-half, 0.0, offset), Vector3(half, 0.0, offset), color
            )

    def _draw_box(
        self,
        surface: pygame.Surface,
        projector: Projector,
        center: Vector3,
        axes: Axes,
        size: Vector3,
        color: Color,
    ) -> None:
        corners = box_corners(center, axes, size)
        for start, end in _BOX_EDGES:
            self._draw_line(surface, projector, corners[start], corners[end], color)
