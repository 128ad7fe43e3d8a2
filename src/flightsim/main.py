"""flightsim - Arcade Flight Simulator.

Main entry point for the application. Initializes Pygame, creates the game window,
sets up core systems, and runs the main game loop.

Typical usage:
    flightsim
    python -m flightsim.main --debug
    python -m flightsim.main --config my_flight_model.yaml
"""

import argparse
import logging
import sys

import pygame

from flightsim.core.config import load_section
from flightsim.core.input import InputAction, InputManager
from flightsim.core.input_snapshot import InputSnapshot
from flightsim.core.logging_system import get_logger, initialize_logging
from flightsim.core.resource_path import get_config_path
from flightsim.physics.flight_model.arcade import ArcadeFlightModel
from flightsim.rendering.camera import frame_camera
from flightsim.rendering.hud import HudRenderer, format_debug_lines
from flightsim.rendering.scene import SceneRenderer
from flightsim.version import get_version

logger = get_logger(__name__)

MIN_DT = 1.0 / 200.0  # s
MAX_DT = 1.0 / 30.0  # s
FPS_LIMIT = 240
DIVERGENCE_LOG_INTERVAL = 60  # resets between warnings


def clamp_dt(elapsed: float) -> float:
    """Clamp frame time to keep integration stable after hitches."""
    return max(MIN_DT, min(MAX_DT, elapsed))


class FlightSim:
    """Main application class.

    Owns the window, the aircraft state and the per-frame sequence:
    sample input, integrate, brake, frame camera, render.
    """

    def __init__(self, args: argparse.Namespace | None = None) -> None:
        """Initialize the application.

        Args:
            args: Command line arguments (optional).
        """
        self.args = args or argparse.Namespace(width=1280, height=720, debug=False, config=None)

        # Initialize logging first
        initialize_logging(
            str(get_config_path("logging.yaml")),
            use_platform_dir=True,
            level=logging.DEBUG if self.args.debug else None,
        )
        logger.info("flightsim %s starting up...", get_version())

        # Flight model and the single aircraft state it drives
        self.flight_model = ArcadeFlightModel()
        config_path = self.args.config or get_config_path("flight_model.yaml")
        self.flight_model.initialize(load_section(config_path, "flight_model"))
        self.aircraft = self.flight_model.create_initial_state()
        self.divergence_resets = 0

        self.input_manager = InputManager.from_config()
        self.inputs = InputSnapshot()

        # Initialize Pygame
        pygame.init()
        pygame.display.set_caption("flightsim")
        self.screen = pygame.display.set_mode((self.args.width, self.args.height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.scene_renderer = SceneRenderer()
        self.hud_renderer = HudRenderer()
        self.show_debug = bool(self.args.debug)

        # FPS tracking
        self.frame_times: list[float] = []
        self.max_frame_samples = 60

        logger.info("flightsim initialized successfully")

    def run(self) -> None:
        """Run the main game loop."""
        logger.info("Starting main game loop")

        while self.running:
            dt = clamp_dt(self.clock.tick(FPS_LIMIT) / 1000.0)
            self._track_frametime(dt)

            self._process_events()
            if not self.running:
                break

            self.inputs = self.input_manager.sample()
            self._update(dt)
            self._render()

            pygame.display.flip()

        self._shutdown()

    def _process_events(self) -> None:
        """Handle window events and discrete actions."""
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                logger.debug("Window resized to %dx%d", event.w, event.h)

        for action in self.input_manager.process_events(events):
            if action == InputAction.QUIT:
                self.running = False
            elif action == InputAction.RESET:
                logger.info("Reset requested")
                self.flight_model.reset(self.aircraft)

    def _update(self, dt: float) -> None:
        """Advance the simulation by one frame.

        Args:
            dt: Clamped delta time in seconds.
        """
        self.flight_model.update(self.aircraft, dt, self.inputs)
        if self.inputs.brake:
            self.flight_model.apply_brake(self.aircraft, dt)

        if not self.aircraft.is_finite():
            self.divergence_resets += 1
            level = (
                logging.WARNING
                if self.divergence_resets % DIVERGENCE_LOG_INTERVAL == 1
                else logging.DEBUG
            )
            logger.log(
                level,
                "Aircraft state diverged after %d updates, resetting (%d resets so far)",
                self.flight_model.get_update_count(),
                self.divergence_resets,
            )
            self.flight_model.reset(self.aircraft)

    def _render(self) -> None:
        """Render the current frame."""
        frame = frame_camera(self.aircraft, self.inputs.cockpit)
        self.scene_renderer.render(self.screen, self.aircraft, frame)

        debug_lines = None
        if self.show_debug:
            debug_lines = format_debug_lines(
                self.aircraft, self.flight_model.last_forces, self.clock.get_fps()
            )
        self.hud_renderer.render(self.screen, self.aircraft, self.inputs, debug_lines)

    def _track_frametime(self, dt: float) -> None:
        """Track frame time for performance monitoring.

        Args:
            dt: Delta time in seconds.
        """
        self.frame_times.append(dt)
        if len(self.frame_times) > self.max_frame_samples:
            self.frame_times.pop(0)

    def _shutdown(self) -> None:
        """Clean shutdown of all systems."""
        logger.info("flightsim shutting down...")
        if self.frame_times:
            average = sum(self.frame_times) / len(self.frame_times)
            logger.info(
                "Average frame time over last %d frames: %.2fms",
                len(self.frame_times),
                average * 1000.0,
            )
        pygame.quit()
        logger.info("Shutdown complete")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv).

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="flightsim - Arcade Flight Simulator")

    parser.add_argument("--width", type=int, default=1280, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=720, help="Window height in pixels")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the debug overlay and log at DEBUG level",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Flight model YAML file (defaults to the bundled flight_model.yaml)",
    )

    return parser.parse_args(argv)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    try:
        args = parse_args()
        app = FlightSim(args)
        app.run()
        return 0
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
