"""Arcade flight model with a throttle-commanded speed controller.

This module provides the flight dynamics used by the demo. It is not an
aerodynamic model: thrust is a proportional controller pulling forward
speed toward a throttle-dependent target, lift scales with speed squared
along the aircraft up axis, and control inputs rotate the aircraft at
fixed rates. Integration is semi-implicit Euler at the frame rate.

Physics model:
- Thrust = forward * (target_speed - forward_speed) * thrust_gain
- Lift = up * speed² * lift_coefficient * max(|forward.y|, min_lift_factor)
- Drag = -velocity * speed * drag_coefficient
- Gravity = (0, -gravity, 0)

The lift factor floor keeps lift nonzero in level flight. It is an arcade
simplification and is applied exactly as written.

Typical usage example:
    from flightsim.physics.flight_model.arcade import ArcadeFlightModel

    model = ArcadeFlightModel()
    state = model.create_initial_state()
    model.update(state, dt=1 / 60, inputs=InputSnapshot(pitch_up=True))
"""

import math
from typing import Any

from flightsim.core.input_snapshot import InputSnapshot
from flightsim.core.logging_system import get_logger
from flightsim.physics.flight_model.base import AircraftState, FlightForces, IFlightModel
from flightsim.physics.quaternion import Quaternion
from flightsim.physics.vectors import Vector3

logger = get_logger(__name__)

# Default tuning
GRAVITY = 9.81  # m/s²
DRAG_COEFF = 0.08
LIFT_COEFF = 11.5
MIN_LIFT_FACTOR = 0.08
THRUST_GAIN = 14.0
THROTTLE_STEP = 0.5  # per second
THROTTLE_MIN = 0.1
THROTTLE_MAX = 1.4
MIN_SPEED = 12.0  # m/s
MAX_SPEED = 130.0  # m/s
PITCH_RATE = 0.9  # rad/s
YAW_RATE = 0.4  # rad/s
ROLL_RATE = 1.4  # rad/s
GROUND_HEIGHT = 2.5  # m
BRAKE_RATE = 5.0  # per second
BRAKE_MAX_RETENTION = 0.95
BRAKE_MIN_SPEED = 1.0  # m/s
MIN_SPEED_FACTOR = 1.0  # m/s floor used for lift/drag

# Config keys mapped to attribute names
_TUNABLES = {
    "gravity": "gravity",
    "drag_coefficient": "drag_coefficient",
    "lift_coefficient": "lift_coefficient",
    "min_lift_factor": "min_lift_factor",
    "thrust_gain": "thrust_gain",
    "throttle_step": "throttle_step",
    "throttle_min": "throttle_min",
    "throttle_max": "throttle_max",
    "min_speed": "min_speed",
    "max_speed": "max_speed",
    "pitch_rate": "pitch_rate",
    "yaw_rate": "yaw_rate",
    "roll_rate": "roll_rate",
    "ground_height": "ground_height",
    "brake_rate": "brake_rate",
    "brake_max_retention": "brake_max_retention",
    "brake_min_speed": "brake_min_speed",
}

# Tunables that must never be negative
_NON_NEGATIVE = (
    "gravity",
    "drag_coefficient",
    "lift_coefficient",
    "min_lift_factor",
    "thrust_gain",
    "throttle_step",
    "min_speed",
    "pitch_rate",
    "yaw_rate",
    "roll_rate",
    "brake_rate",
    "brake_min_speed",
)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _as_float(config: dict[str, Any], key: str, default: float) -> float:
    value = config.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite, got {value!r}")
    return float(value)


def _as_vector(config: dict[str, Any], key: str, default: Vector3) -> Vector3:
    value = config.get(key)
    if value is None:
        return default.copy()
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{key} must be a list of 3 numbers, got {value!r}")
    for component in value:
        if isinstance(component, bool) or not isinstance(component, (int, float)):
            raise ValueError(f"{key} must be a list of 3 numbers, got {value!r}")
        if not math.isfinite(component):
            raise ValueError(f"{key} must be finite, got {value!r}")
    return Vector3(float(value[0]), float(value[1]), float(value[2]))


class ArcadeFlightModel(IFlightModel):
    """Arcade flight model.

    Holds tuning only; the aircraft state is passed in by the caller and
    mutated in place, so one model can drive any number of states.

    Examples:
        >>> model = ArcadeFlightModel()
        >>> state = model.create_initial_state()
        >>> _ = model.update(state, 1 / 60, InputSnapshot())
        >>> model.get_update_count()
        1
    """

    def __init__(self) -> None:
        """Initialize with default tuning (call initialize() to override)."""
        self.gravity = GRAVITY
        self.drag_coefficient = DRAG_COEFF
        self.lift_coefficient = LIFT_COEFF
        self.min_lift_factor = MIN_LIFT_FACTOR
        self.thrust_gain = THRUST_GAIN
        self.throttle_step = THROTTLE_STEP
        self.throttle_min = THROTTLE_MIN
        self.throttle_max = THROTTLE_MAX
        self.min_speed = MIN_SPEED
        self.max_speed = MAX_SPEED
        self.pitch_rate = PITCH_RATE
        self.yaw_rate = YAW_RATE
        self.roll_rate = ROLL_RATE
        self.ground_height = GROUND_HEIGHT
        self.brake_rate = BRAKE_RATE
        self.brake_max_retention = BRAKE_MAX_RETENTION
        self.brake_min_speed = BRAKE_MIN_SPEED

        # Start conditions
        self.initial_position = Vector3(0.0, 90.0, 0.0)
        self.initial_velocity = Vector3(0.0, 0.0, -50.0)
        self.initial_throttle = 0.7

        # Force breakdown of the last update
        self.last_forces = FlightForces()

        self._updates = 0

    def initialize(self, config: dict) -> None:
        """Apply tuning overrides.

        Args:
            config: Flight model configuration. Recognized keys are the
                tunable names (``lift_coefficient``, ``max_speed``, ...)
                plus an optional ``initial_state`` mapping with
                ``position``, ``velocity`` and ``throttle``. Missing keys
                keep their current value.

        Raises:
            ValueError: If a value is not numeric or the tuning is
                inconsistent.
        """
        # Validate everything before touching the model
        tuning = {
            attribute: _as_float(config, key, getattr(self, attribute))
            for key, attribute in _TUNABLES.items()
        }

        for attribute in _NON_NEGATIVE:
            if tuning[attribute] < 0.0:
                raise ValueError(f"{attribute} must not be negative")
        if tuning["min_speed"] >= tuning["max_speed"]:
            raise ValueError("min_speed must be lower than max_speed")
        if tuning["throttle_min"] >= tuning["throttle_max"]:
            raise ValueError("throttle_min must be lower than throttle_max")
        if not 0.0 <= tuning["brake_max_retention"] <= 1.0:
            raise ValueError("brake_max_retention must be within [0, 1]")

        initial = config.get("initial_state") or {}
        if not isinstance(initial, dict):
            raise ValueError("initial_state must be a mapping")
        position = _as_vector(initial, "position", self.initial_position)
        velocity = _as_vector(initial, "velocity", self.initial_velocity)
        throttle = _clamp(
            _as_float(initial, "throttle", self.initial_throttle),
            tuning["throttle_min"],
            tuning["throttle_max"],
        )

        for attribute, value in tuning.items():
            setattr(self, attribute, value)
        self.initial_position = position
        self.initial_velocity = velocity
        self.initial_throttle = throttle

        logger.info(
            "Initialized arcade model: speed=%.0f-%.0fm/s, lift=%.2f, drag=%.3f, thrust_gain=%.1f",
            self.min_speed,
            self.max_speed,
            self.lift_coefficient,
            self.drag_coefficient,
            self.thrust_gain,
        )

    def create_initial_state(self) -> AircraftState:
        """Build a new state at the configured start conditions."""
        return AircraftState(
            position=self.initial_position.copy(),
            velocity=self.initial_velocity.copy(),
            orientation=Quaternion.identity(),
            throttle=self.initial_throttle,
        )

    def reset(self, state: AircraftState) -> None:
        """Restore ``state`` in place to the start conditions."""
        fresh = self.create_initial_state()
        state.position = fresh.position
        state.velocity = fresh.velocity
        state.orientation = fresh.orientation
        state.throttle = fresh.throttle
        logger.debug("Aircraft reset to start position")

    def target_speed(self, throttle: float) -> float:
        """Airspeed commanded by a throttle setting.

        Throttle above 1.0 commands more than ``max_speed``.
        """
        return self.min_speed + (self.max_speed - self.min_speed) * throttle

    def update(self, state: AircraftState, dt: float, inputs: InputSnapshot) -> AircraftState:
        """Advance the aircraft by one frame.

        ``dt`` is expected to be clamped by the caller (1/200 to 1/30 s);
        it is not clamped again here.

        Args:
            state: Aircraft state, mutated in place.
            dt: Time step in seconds.
            inputs: Control input snapshot.

        Returns:
            The same state instance.
        """
        self._updates += 1

        pitch_input = inputs.pitch_axis
        yaw_input = inputs.yaw_axis
        roll_input = inputs.roll_axis

        state.throttle = _clamp(
            state.throttle + inputs.throttle_delta * self.throttle_step * dt,
            self.throttle_min,
            self.throttle_max,
        )

        forward = state.forward()
        up = state.up()

        self._calculate_forces(state, forward, up)

        # Semi-implicit Euler: new velocity moves the position
        state.velocity = state.velocity + self.last_forces.total * dt
        state.position = state.position + state.velocity * dt

        rotation_delta = Quaternion.from_euler_xyz(
            pitch_input * self.pitch_rate * dt,
            yaw_input * self.yaw_rate * dt,
            roll_input * self.roll_rate * dt,
        )
        state.orientation = (state.orientation * rotation_delta).normalized()

        if state.position.y < self.ground_height:
            state.position.y = self.ground_height
            state.velocity.y = max(state.velocity.y, 0.0)

        if self._updates % 60 == 0:
            logger.debug(
                "[FLIGHT] speed=%.1fm/s alt=%.1fm throttle=%.2f lift=%.1f thrust=%.1f",
                state.get_airspeed(),
                state.position.y,
                state.throttle,
                self.last_forces.lift.magnitude(),
                self.last_forces.thrust.magnitude(),
            )

        return state

    def _calculate_forces(self, state: AircraftState, forward: Vector3, up: Vector3) -> None:
        """Compute thrust, lift, drag and gravity into ``last_forces``.

        Args:
            state: Current aircraft state.
            forward: Nose direction for this frame.
            up: Canopy direction for this frame.
        """
        forces = self.last_forces

        target_speed = self.target_speed(state.throttle)
        speed_along_forward = state.velocity.dot(forward)
        forces.thrust = forward * ((target_speed - speed_along_forward) * self.thrust_gain)

        speed = max(state.velocity.magnitude(), MIN_SPEED_FACTOR)
        lift_factor = max(abs(forward.y), self.min_lift_factor)
        forces.lift = up * (speed * speed * self.lift_coefficient * lift_factor)

        forces.drag = -state.velocity * (speed * self.drag_coefficient)
        forces.gravity = Vector3(0.0, -self.gravity, 0.0)

        forces.calculate_total()

    def apply_brake(self, state: AircraftState, dt: float) -> None:
        """Bleed off speed while the brake is held.

        Velocity is scaled by ``clamp(1 - dt * brake_rate, 0, 0.95)`` so at
        least 5% of it remains each frame. Below ``brake_min_speed`` the
        brake does nothing.

        Args:
            state: Aircraft state, mutated in place.
            dt: Time step in seconds.
        """
        if state.velocity.magnitude() > self.brake_min_speed:
            retention = _clamp(1.0 - dt * self.brake_rate, 0.0, self.brake_max_retention)
            state.velocity = state.velocity * retention

    def get_update_count(self) -> int:
        """Number of updates performed."""
        return self._updates
