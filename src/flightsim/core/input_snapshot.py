"""Per-frame control input snapshot.

An ``InputSnapshot`` is created once per frame by the input manager,
handed to the flight model and the presentation layer, and then discarded.
It holds discrete intents only; signed control axes are derived from the
flags on demand.

Typical usage example:
    from flightsim.core.input_snapshot import InputSnapshot

    inputs = InputSnapshot(pitch_up=True, throttle_delta=1)
    assert inputs.pitch_axis == 1
"""

from dataclasses import dataclass

VALID_THROTTLE_DELTAS = (-1, 0, 1)


def signed_axis(positive: bool, negative: bool) -> int:
    """Combine two opposing flags into a signed axis value.

    Args:
        positive: Flag pushing the axis toward +1.
        negative: Flag pushing the axis toward -1.

    Returns:
        -1, 0 or 1. Both flags held cancel out to 0.
    """
    return int(positive) - int(negative)


@dataclass(frozen=True)
class InputSnapshot:
    """Control intents sampled for a single frame.

    Attributes:
        roll_left: Roll-left key held.
        roll_right: Roll-right key held.
        pitch_up: Pitch-up (nose up) key held.
        pitch_down: Pitch-down key held.
        yaw_left: Yaw-left key held.
        yaw_right: Yaw-right key held.
        throttle_delta: Net throttle command, one of -1, 0, +1.
        brake: Brake key held.
        cockpit: Cockpit view requested (chase view otherwise).
    """

    roll_left: bool = False
    roll_right: bool = False
    pitch_up: bool = False
    pitch_down: bool = False
    yaw_left: bool = False
    yaw_right: bool = False
    throttle_delta: int = 0
    brake: bool = False
    cockpit: bool = False

    def __post_init__(self) -> None:
        if self.throttle_delta not in VALID_THROTTLE_DELTAS:
            raise ValueError(
                f"throttle_delta must be one of {VALID_THROTTLE_DELTAS}, got {self.throttle_delta!r}"
            )

    @property
    def view_mode(self) -> bool:
        """Alias of ``cockpit``: True for cockpit view, False for chase view."""
        return self.cockpit

    @property
    def pitch_axis(self) -> int:
        """+1 nose up, -1 nose down."""
        return signed_axis(self.pitch_up, self.pitch_down)

    @property
    def yaw_axis(self) -> int:
        """+1 yaw left, -1 yaw right."""
        return signed_axis(self.yaw_left, self.yaw_right)

    @property
    def roll_axis(self) -> int:
        """+1 roll right, -1 roll left."""
        return signed_axis(self.roll_right, self.roll_left)
