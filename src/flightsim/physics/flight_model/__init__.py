"""Flight models driving the aircraft state."""

from flightsim.physics.flight_model.arcade import ArcadeFlightModel
from flightsim.physics.flight_model.base import (
    AircraftState,
    FlightForces,
    IFlightModel,
    attitude_degrees,
)

__all__ = [
    "AircraftState",
    "ArcadeFlightModel",
    "FlightForces",
    "IFlightModel",
    "attitude_degrees",
]
