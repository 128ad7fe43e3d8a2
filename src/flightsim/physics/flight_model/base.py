"""Base types for flight models.

Defines the aircraft state owned by the simulation loop, the per-frame
force breakdown, and the interface every flight model implements.

Typical usage example:
    from flightsim.physics.flight_model.base import AircraftState

    state = AircraftState()
    heading = state.forward()
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from flightsim.physics.quaternion import Quaternion
from flightsim.physics.vectors import Vector3

# Body-frame axes (identity orientation looks down -Z)
LOCAL_FORWARD = Vector3(0.0, 0.0, -1.0)
LOCAL_UP = Vector3(0.0, 1.0, 0.0)
LOCAL_RIGHT = Vector3(1.0, 0.0, 0.0)


@dataclass
class AircraftState:
    """Complete kinematic state of the aircraft.

    One instance is owned by the game loop and mutated in place by the
    flight model every frame. Body axes are derived from ``orientation``
    on every call and never stored.

    Attributes:
        position: Position in world meters.
        velocity: Velocity in m/s.
        orientation: Unit rotation from body to world frame.
        throttle: Throttle setting (0.1 to 1.4 after any update).
    """

    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 90.0, 0.0))
    velocity: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -50.0))
    orientation: Quaternion = field(default_factory=Quaternion.identity)
    throttle: float = 0.7

    def forward(self) -> Vector3:
        """Nose direction in world frame."""
        return self.orientation.rotate(LOCAL_FORWARD)

    def up(self) -> Vector3:
        """Canopy direction in world frame."""
        return self.orientation.rotate(LOCAL_UP)

    def right(self) -> Vector3:
        """Right wing direction in world frame."""
        return self.orientation.rotate(LOCAL_RIGHT)

    def get_airspeed(self) -> float:
        """Speed in m/s (no wind, so airspeed equals ground speed)."""
        return self.velocity.magnitude()

    def get_altitude(self) -> float:
        """Height above the ground plane in meters, never negative."""
        return max(self.position.y, 0.0)

    def copy(self) -> "AircraftState":
        """Return an independent deep copy."""
        return AircraftState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            orientation=self.orientation.copy(),
            throttle=self.throttle,
        )

    def is_finite(self) -> bool:
        """True if every component is a finite number."""
        return (
            self.position.is_finite()
            and self.velocity.is_finite()
            and self.orientation.is_finite()
            and math.isfinite(self.throttle)
        )


@dataclass
class FlightForces:
    """Forces computed during the last update (for the debug overlay).

    Attributes:
        thrust: Speed-controller thrust along the nose.
        lift: Lift along the aircraft up axis.
        drag: Drag opposing velocity.
        gravity: Constant weight force.
        total: Sum of all forces.
    """

    thrust: Vector3 = field(default_factory=Vector3.zero)
    lift: Vector3 = field(default_factory=Vector3.zero)
    drag: Vector3 = field(default_factory=Vector3.zero)
    gravity: Vector3 = field(default_factory=Vector3.zero)
    total: Vector3 = field(default_factory=Vector3.zero)

    def calculate_total(self) -> None:
        """Sum component forces into ``total``."""
        self.total = self.thrust + self.lift + self.drag + self.gravity


def attitude_degrees(state: AircraftState) -> tuple[float, float, float]:
    """Derive pitch, roll and yaw in degrees from the body axes.

    Args:
        state: Aircraft state.

    Returns:
        Tuple of (pitch, roll, yaw) in degrees. Yaw is 0 when the nose
        points down -Z and grows toward +X.
    """
    forward = state.forward()
    right = state.right()
    up = state.up()
    pitch = math.asin(max(-1.0, min(1.0, forward.y)))
    yaw = math.atan2(forward.x, -forward.z)
    roll = math.atan2(right.y, up.y)
    return math.degrees(pitch), math.degrees(roll), math.degrees(yaw)


class IFlightModel(ABC):
    """Interface for flight models driven by the game loop."""

    @abstractmethod
    def initialize(self, config: dict) -> None:
        """Apply configuration overrides.

        Args:
            config: Flight model configuration dictionary.
        """

    @abstractmethod
    def update(self, state: AircraftState, dt: float, inputs) -> AircraftState:
        """Advance ``state`` by ``dt`` seconds in place.

        Args:
            state: Aircraft state to mutate.
            dt: Time step in seconds.
            inputs: Input snapshot for this frame.

        Returns:
            The same state instance.
        """

    @abstractmethod
    def apply_brake(self, state: AircraftState, dt: float) -> None:
        """Slow the aircraft down while the brake is held."""

    @abstractmethod
    def create_initial_state(self) -> AircraftState:
        """Build a fresh state from the configured start conditions."""

    @abstractmethod
    def reset(self, state: AircraftState) -> None:
        """Restore ``state`` in place to the configured start conditions."""

    @abstractmethod
    def get_update_count(self) -> int:
        """Number of updates performed since construction."""
