"""Tests for InputSnapshot."""

import dataclasses

import pytest

from flightsim.core.input_snapshot import InputSnapshot, signed_axis


class TestSignedAxis:
    """Test flag-to-axis conversion."""

    @pytest.mark.parametrize(
        "positive, negative, expected",
        [(False, False, 0), (True, False, 1), (False, True, -1), (True, True, 0)],
    )
    def test_signed_axis(self, positive: bool, negative: bool, expected: int) -> None:
        """Test the axis is positive minus negative."""
        assert signed_axis(positive, negative) == expected


class TestInputSnapshot:
    """Test snapshot construction and derived axes."""

    def test_defaults_are_neutral(self) -> None:
        """Test a default snapshot commands nothing."""
        inputs = InputSnapshot()
        assert (inputs.pitch_axis, inputs.yaw_axis, inputs.roll_axis) == (0, 0, 0)
        assert inputs.throttle_delta == 0
        assert not inputs.brake
        assert not inputs.view_mode

    def test_axis_signs(self) -> None:
        """Test the sign convention of each axis."""
        assert InputSnapshot(pitch_up=True).pitch_axis == 1
        assert InputSnapshot(pitch_down=True).pitch_axis == -1
        assert InputSnapshot(yaw_left=True).yaw_axis == 1
        assert InputSnapshot(yaw_right=True).yaw_axis == -1
        assert InputSnapshot(roll_right=True).roll_axis == 1
        assert InputSnapshot(roll_left=True).roll_axis == -1

    def test_view_mode_alias(self) -> None:
        """Test view_mode mirrors the cockpit flag."""
        assert InputSnapshot(cockpit=True).view_mode

    @pytest.mark.parametrize("delta", [2, -2, 0.5])
    def test_invalid_throttle_delta(self, delta: float) -> None:
        """Test throttle_delta outside {-1, 0, 1} is rejected."""
        with pytest.raises(ValueError, match="throttle_delta must be one of"):
            InputSnapshot(throttle_delta=delta)

    def test_snapshot_is_frozen(self) -> None:
        """Test snapshots cannot be modified after creation."""
        inputs = InputSnapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            inputs.brake = True  # type: ignore[misc]
