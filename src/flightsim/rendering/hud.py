"""Heads-up display text.

``format_hud_lines`` builds the flight data readout; ``HudRenderer`` draws
it together with the controls help line, the brake banner and an optional
debug overlay.
"""

import pygame

from flightsim.core.input_snapshot import InputSnapshot
from flightsim.physics.flight_model.base import AircraftState, FlightForces, attitude_degrees

TEXT_COLOR = (255, 255, 255)
HELP_COLOR = (200, 200, 200)
DEBUG_COLOR = (255, 255, 0)
BRAKE_BANNER_COLOR = (230, 38, 38)

CONTROLS_HELP = (
    "Controls: W/S Pitch | A/D Roll | Q/E Yaw | +/- Throttle | Space Brake | C Cockpit | R Reset"
)


def throttle_percent(throttle: float) -> float:
    """Throttle as a percentage for display (0 to 140)."""
    return max(0.0, min(140.0, throttle * 100.0))


def format_hud_lines(state: AircraftState) -> list[str]:
    """Build the flight data readout.

    Args:
        state: Aircraft state (read only).

    Returns:
        Lines for speed, altitude, throttle, pitch, roll and yaw.
    """
    pitch, roll, yaw = attitude_degrees(state)
    return [
        f"Speed:    {state.get_airspeed():>6.1f} m/s",
        f"Altitude: {state.get_altitude():>6.1f} m",
        f"Throttle: {throttle_percent(state.throttle):>5.1f}%",
        f"Pitch:    {pitch:>5.1f}°",
        f"Roll:     {roll:>5.1f}°",
        f"Yaw:      {yaw:>5.1f}°",
    ]


def format_debug_lines(state: AircraftState, forces: FlightForces, fps: float) -> list[str]:
    """Build the debug overlay lines (frame rate, position, forces)."""
    p = state.position
    v = state.velocity
    return [
        f"FPS: {fps:.1f}",
        f"Pos: ({p.x:.1f}, {p.y:.1f}, {p.z:.1f})",
        f"Vel: ({v.x:.1f}, {v.y:.1f}, {v.z:.1f})",
        f"Thrust: {forces.thrust.magnitude():.1f}",
        f"Lift:   {forces.lift.magnitude():.1f}",
        f"Drag:   {forces.drag.magnitude():.1f}",
    ]


class HudRenderer:
    """Draws HUD text over the scene."""

    def __init__(self) -> None:
        """Create fonts (requires pygame.font to be initialized)."""
        self.font = pygame.font.SysFont("monospace", 22)
        self.small_font = pygame.font.SysFont("monospace", 16)
        self.large_font = pygame.font.SysFont("monospace", 34, bold=True)

    def render(
        self,
        surface: pygame.Surface,
        state: AircraftState,
        inputs: InputSnapshot,
        debug_lines: list[str] | None = None,
    ) -> None:
        """Draw the HUD.

        Args:
            surface: Target surface.
            state: Aircraft state (read only).
            inputs: This frame's input snapshot.
            debug_lines: Extra lines for the debug overlay, if enabled.
        """
        width = surface.get_width()
        height = surface.get_height()

        y_offset = 24
        for line in format_hud_lines(state):
            surface.blit(self.font.render(line, True, TEXT_COLOR), (24, y_offset))
            y_offset += 26

        help_text = self.small_font.render(CONTROLS_HELP, True, HELP_COLOR)
        surface.blit(help_text, help_text.get_rect(center=(width // 2, height - 24)))

        if inputs.brake:
            banner = pygame.Rect(0, 0, 180, 56)
            banner.center = (width // 2, height // 2)
            pygame.draw.rect(surface, BRAKE_BANNER_COLOR, banner)
            label = self.large_font.render("BRAKES", True, TEXT_COLOR)
            surface.blit(label, label.get_rect(center=banner.center))

        if debug_lines:
            y_offset = 24
            for line in debug_lines:
                text = self.small_font.render(line, True, DEBUG_COLOR)
                surface.blit(text, (width - text.get_width() - 24, y_offset))
                y_offset += 18
