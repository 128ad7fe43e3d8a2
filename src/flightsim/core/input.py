"""Keyboard input handling with configurable key bindings.

The input manager turns the raw keyboard state into one ``InputSnapshot``
per frame. Continuous controls (pitch, roll, yaw, throttle, brake, view)
are sampled from the held-key state; discrete actions (reset, quit) come
from key-down events.

Typical usage example:
    from flightsim.core.input import InputManager

    input_manager = InputManager.from_config()

    # In game loop
    actions = input_manager.process_events(pygame.event.get())
    inputs = input_manager.sample()
"""

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

import pygame  # pylint: disable=no-member

from flightsim.core.config import load_section
from flightsim.core.input_snapshot import InputSnapshot, signed_axis
from flightsim.core.logging_system import get_logger
from flightsim.core.resource_path import get_config_path
from flightsim.settings.keybindings_settings import KeybindingsSettings, detect_conflicts

logger = get_logger(__name__)


class InputAction(Enum):
    """Input actions that can be bound to keys."""

    # Flight controls (held)
    ROLL_LEFT = "roll_left"
    ROLL_RIGHT = "roll_right"
    PITCH_UP = "pitch_up"
    PITCH_DOWN = "pitch_down"
    YAW_LEFT = "yaw_left"
    YAW_RIGHT = "yaw_right"
    THROTTLE_INCREASE = "throttle_increase"
    THROTTLE_DECREASE = "throttle_decrease"
    BRAKE = "brake"

    # View (held)
    COCKPIT_VIEW = "cockpit_view"

    # Discrete
    RESET = "reset"
    QUIT = "quit"


DISCRETE_ACTIONS = (InputAction.RESET, InputAction.QUIT)


class PressedKeys(Protocol):
    """Anything indexable by pygame key code, like pygame.key.get_pressed()."""

    def __getitem__(self, key: int) -> bool: ...


def key_code(name: str) -> int:
    """Resolve a binding key name to a pygame key code.

    Args:
        name: pygame constant name without the ``K_`` prefix (e.g. "a",
            "LEFT", "KP_PLUS").

    Returns:
        pygame key code.

    Raises:
        ValueError: If pygame has no such key.
    """
    code = getattr(pygame, f"K_{name}", None)
    if code is None:
        raise ValueError(f"Unknown key name: {name!r}")
    return code


class InputBindings:
    """Resolved mapping from actions to pygame key codes."""

    def __init__(self, bindings: dict[str, list[str]]) -> None:
        """Build bindings from action names to key names.

        Args:
            bindings: Action name -> list of key names.

        Raises:
            ValueError: On unknown action or key names.
        """
        self._keys: dict[InputAction, tuple[int, ...]] = {action: () for action in InputAction}
        for action_name, key_names in bindings.items():
            try:
                action = InputAction(action_name)
            except ValueError:
                raise ValueError(f"Unknown input action: {action_name!r}") from None
            if not isinstance(key_names, list):
                raise ValueError(f"Keys for {action_name} must be a list, got {key_names!r}")
            self._keys[action] = tuple(key_code(name) for name in key_names)

        for conflict in detect_conflicts(bindings):
            logger.warning(
                "Key %s is bound to several actions: %s",
                conflict["key"],
                ", ".join(conflict["actions"]),
            )

    def keys_for(self, action: InputAction) -> tuple[int, ...]:
        """Key codes bound to an action."""
        return self._keys[action]

    def is_held(self, action: InputAction, pressed: PressedKeys) -> bool:
        """True if at least one key bound to ``action`` is held."""
        return any(pressed[code] for code in self.keys_for(action))

    def actions_for_key(self, code: int) -> list[InputAction]:
        """Actions triggered by a key code."""
        return [action for action, codes in self._keys.items() if code in codes]


class InputManager:
    """Samples keyboard state into per-frame input snapshots.

    Attributes:
        bindings: Active key bindings.
    """

    def __init__(self, bindings: InputBindings) -> None:
        """Initialize input manager.

        Args:
            bindings: Key bindings to sample.
        """
        self.bindings = bindings
        self._last_snapshot = InputSnapshot()

    @classmethod
    def from_config(
        cls,
        config_path: Path | None = None,
        user_settings: KeybindingsSettings | None = None,
    ) -> "InputManager":
        """Create an input manager from YAML bindings.

        Args:
            config_path: Default bindings file. Defaults to the bundled
                keybindings.yaml.
            user_settings: User overrides. Defaults to the overrides in
                ~/.flightsim, if present.

        Returns:
            Configured input manager.
        """
        path = config_path or get_config_path("keybindings.yaml")
        defaults: dict[str, Any] = load_section(path, "bindings")

        if user_settings is None:
            user_settings = KeybindingsSettings()
            user_settings.load()

        bindings = user_settings.apply_to(defaults)
        if user_settings.has_overrides():
            logger.info("User keybindings applied from %s", user_settings.settings_path)
        logger.info("Input bindings loaded from %s", path)
        return cls(InputBindings(bindings))

    def sample(self, pressed: PressedKeys | None = None) -> InputSnapshot:
        """Capture the control intents for this frame.

        Args:
            pressed: Held-key state. Defaults to pygame.key.get_pressed().

        Returns:
            New input snapshot.
        """
        if pressed is None:
            pressed = pygame.key.get_pressed()

        def held(action: InputAction) -> bool:
            return self.bindings.is_held(action, pressed)

        snapshot = InputSnapshot(
            roll_left=held(InputAction.ROLL_LEFT),
            roll_right=held(InputAction.ROLL_RIGHT),
            pitch_up=held(InputAction.PITCH_UP),
            pitch_down=held(InputAction.PITCH_DOWN),
            yaw_left=held(InputAction.YAW_LEFT),
            yaw_right=held(InputAction.YAW_RIGHT),
            throttle_delta=signed_axis(
                held(InputAction.THROTTLE_INCREASE), held(InputAction.THROTTLE_DECREASE)
            ),
            brake=held(InputAction.BRAKE),
            cockpit=held(InputAction.COCKPIT_VIEW),
        )

        if snapshot.cockpit != self._last_snapshot.cockpit:
            logger.debug("View mode: %s", "cockpit" if snapshot.cockpit else "chase")
        self._last_snapshot = snapshot
        return snapshot

    def process_events(self, events: Iterable[Any]) -> list[InputAction]:
        """Extract discrete actions from pygame events.

        Args:
            events: Events from pygame.event.get().

        Returns:
            Discrete actions triggered this frame, in event order. A window
            close request maps to QUIT.
        """
        actions: list[InputAction] = []
        for event in events:
            if event.type == pygame.QUIT:
                actions.append(InputAction.QUIT)
            elif event.type == pygame.KEYDOWN:
                for action in self.bindings.actions_for_key(event.key):
                    if action in DISCRETE_ACTIONS:
                        actions.append(action)
        return actions
