"""Tests for scene geometry and rendering."""

from unittest.mock import patch

import pygame
import pytest

from flightsim.physics.flight_model.base import AircraftState
from flightsim.physics.vectors import Vector3
from flightsim.rendering.camera import frame_camera
from flightsim.rendering.scene import (
    SKY_COLOR,
    SceneRenderer,
    aircraft_boxes,
    box_corners,
    cloud_boxes,
)

PATCH_DRAW_LINE = "flightsim.rendering.scene.pygame.draw.line"

WORLD_AXES = (Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0))


class TestGeometry:
    """Test scene geometry helpers."""

    def test_box_corners(self) -> None:
        """Test corners of an axis-aligned box."""
        corners = box_corners(Vector3(0.0, 0.0, 0.0), WORLD_AXES, Vector3(2.0, 4.0, 6.0))
        assert len(corners) == 8
        assert corners[0] == Vector3(-1.0, -2.0, -3.0)
        assert corners[7] == Vector3(1.0, 2.0, 3.0)
        assert corners[1] == Vector3(1.0, -2.0, -3.0)

    def test_aircraft_model_parts(self) -> None:
        """Test the aircraft is built from four boxes around its position."""
        state = AircraftState()
        boxes = aircraft_boxes(state)
        assert len(boxes) == 4
        fuselage_center = boxes[0][0]
        assert fuselage_center.z == pytest.approx(-1.5)

    def test_cloud_field(self) -> None:
        """Test two rows of nine clouds."""
        clouds = cloud_boxes()
        assert len(clouds) == 18
        assert {center.y for center, _ in clouds} == {300.0, 240.0}


class TestSceneRenderer:
    """Test drawing onto a surface."""

    def test_render_draws_wireframe(self) -> None:
        """Test a chase-view frame fills the sky and draws lines."""
        surface = pygame.Surface((320, 240))
        state = AircraftState()
        renderer = SceneRenderer()

        with patch(PATCH_DRAW_LINE) as draw_line:
            renderer.render(surface, state, frame_camera(state, cockpit=False))

        assert draw_line.call_count > 0
        assert tuple(surface.get_at((0, 0)))[:3] == SKY_COLOR

    def test_render_tolerates_diverged_state(self) -> None:
        """Test non-finite aircraft positions are skipped, not drawn."""
        surface = pygame.Surface((320, 240))
        state = AircraftState()
        diverged = AircraftState(position=Vector3(0.0, float("inf"), 0.0))
        renderer = SceneRenderer()

        with patch(PATCH_DRAW_LINE):
            renderer.render(surface, diverged, frame_camera(state, cockpit=False))
