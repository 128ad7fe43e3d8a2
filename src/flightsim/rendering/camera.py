"""Camera framing from the aircraft state.

The camera is rigidly attached to the aircraft frame and snaps to it every
frame; there is no smoothing.
"""

from dataclasses import dataclass

from flightsim.physics.flight_model.base import AircraftState
from flightsim.physics.vectors import Vector3

DEFAULT_FOV_Y_DEG = 65.0

# Cockpit eye point and look-ahead, in body axes
COCKPIT_EYE_FORWARD = 1.6
COCKPIT_EYE_UP = 0.4
COCKPIT_LOOK_FORWARD = 14.0
COCKPIT_LOOK_UP = 0.3

# Chase offsets, in body axes
CHASE_BACK = 32.0
CHASE_UP = 14.0
CHASE_RIGHT = 3.0
CHASE_LOOK_FORWARD = 18.0


@dataclass
class CameraFrame:
    """Camera placement for one frame.

    Attributes:
        position: Eye point in world meters.
        target: Point the camera looks at.
        up: Camera up direction.
        fov_y_deg: Vertical field of view in degrees.
    """

    position: Vector3
    target: Vector3
    up: Vector3
    fov_y_deg: float = DEFAULT_FOV_Y_DEG


def frame_camera(state: AircraftState, cockpit: bool) -> CameraFrame:
    """Place the camera for the requested view.

    Args:
        state: Aircraft state (read only).
        cockpit: True for the cockpit view, False for the chase view.

    Returns:
        Camera frame whose up vector is the aircraft up axis.
    """
    forward = state.forward()
    up = state.up()
    position = state.position

    if cockpit:
        return CameraFrame(
            position=position + forward * COCKPIT_EYE_FORWARD + up * COCKPIT_EYE_UP,
            target=position + forward * COCKPIT_LOOK_FORWARD + up * COCKPIT_LOOK_UP,
            up=up,
        )

    offset = -forward * CHASE_BACK + up * CHASE_UP + state.right() * CHASE_RIGHT
    return CameraFrame(
        position=position + offset,
        target=position + forward * CHASE_LOOK_FORWARD,
        up=up,
    )
