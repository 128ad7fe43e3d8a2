"""Tests for HUD text formatting."""

import math

import pytest

from flightsim.physics.flight_model.base import AircraftState, FlightForces, attitude_degrees
from flightsim.physics.quaternion import Quaternion
from flightsim.physics.vectors import Vector3
from flightsim.rendering.hud import format_debug_lines, format_hud_lines, throttle_percent


class TestThrottlePercent:
    """Test throttle display conversion."""

    @pytest.mark.parametrize(
        "throttle, expected",
        [(0.7, 70.0), (1.4, 140.0), (2.0, 140.0), (-0.5, 0.0)],
    )
    def test_throttle_percent(self, throttle: float, expected: float) -> None:
        """Test percent conversion and clamping."""
        assert throttle_percent(throttle) == pytest.approx(expected)


class TestAttitude:
    """Test pitch/roll/yaw derivation."""

    def test_level(self) -> None:
        """Test a level aircraft reads zero attitude."""
        assert attitude_degrees(AircraftState()) == pytest.approx((0.0, 0.0, 0.0))

    def test_pitch(self) -> None:
        """Test nose-up pitch reads positive."""
        state = AircraftState(
            orientation=Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), math.radians(20.0))
        )
        pitch, roll, yaw = attitude_degrees(state)
        assert pitch == pytest.approx(20.0)
        assert roll == pytest.approx(0.0, abs=1e-9)
        assert yaw == pytest.approx(0.0, abs=1e-9)

    def test_yaw_left_reads_negative(self) -> None:
        """Test yawing toward -X reads as negative heading."""
        state = AircraftState(
            orientation=Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), math.radians(30.0))
        )
        assert attitude_degrees(state)[2] == pytest.approx(-30.0)

    def test_roll(self) -> None:
        """Test rotation about the longitudinal axis reads as roll."""
        state = AircraftState(
            orientation=Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), math.radians(45.0))
        )
        assert attitude_degrees(state)[1] == pytest.approx(45.0)


class TestHudLines:
    """Test HUD readout lines."""

    def test_start_state(self) -> None:
        """Test the readout at the start position."""
        lines = format_hud_lines(AircraftState())
        assert len(lines) == 6
        assert "50.0 m/s" in lines[0]
        assert "90.0 m" in lines[1]
        assert "70.0%" in lines[2]
        assert lines[3].startswith("Pitch:")
        assert lines[4].startswith("Roll:")
        assert lines[5].startswith("Yaw:")

    def test_altitude_never_negative(self) -> None:
        """Test altitude is floored at zero."""
        lines = format_hud_lines(AircraftState(position=Vector3(0.0, -5.0, 0.0)))
        assert "0.0 m" in lines[1]

    def test_debug_lines(self) -> None:
        """Test the debug overlay content."""
        forces = FlightForces(lift=Vector3(0.0, 2300.0, 0.0))
        lines = format_debug_lines(AircraftState(), forces, fps=59.94)
        assert lines[0] == "FPS: 59.9"
        assert lines[1] == "Pos: (0.0, 90.0, 0.0)"
        assert "2300.0" in lines[4]
