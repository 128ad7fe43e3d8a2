"""User keybinding overrides.

Users may replace the default YAML bindings for individual actions in:
    ~/.flightsim/keybindings.yaml

The file is only read, never written. Format:

    bindings:
      - action: yaw_left
        keys: [z]
      - action: cockpit_view
        unbound: true

Typical usage:
    from flightsim.settings.keybindings_settings import KeybindingsSettings

    settings = KeybindingsSettings()
    settings.load()
    bindings = settings.apply_to(default_bindings)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from flightsim.core.resource_path import get_user_dir

logger = logging.getLogger(__name__)

KEYBINDINGS_FILE = "keybindings.yaml"


@dataclass
class BindingOverride:
    """Single binding override.

    Attributes:
        action: Action name (e.g., "pitch_up").
        keys: Key names replacing the defaults (e.g., ["UP", "w"]).
        unbound: If True, the action has no keys at all.
    """

    action: str
    keys: list[str] = field(default_factory=list)
    unbound: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BindingOverride":
        """Create from a YAML entry.

        Raises:
            ValueError: If the entry has no action or keys is not a list.
        """
        action = data.get("action")
        if not action or not isinstance(action, str):
            raise ValueError(f"Binding override without action: {data!r}")
        keys = data.get("keys", [])
        if not isinstance(keys, list):
            raise ValueError(f"Keys for {action} must be a list, got {keys!r}")
        return cls(
            action=action,
            keys=[str(k) for k in keys],
            unbound=bool(data.get("unbound", False)),
        )


class KeybindingsSettings:
    """Keybinding overrides loaded from the user settings directory.

    Attributes:
        overrides: Loaded overrides, in file order.
    """

    def __init__(self, settings_dir: Path | None = None) -> None:
        """Initialize keybindings settings.

        Args:
            settings_dir: Directory holding keybindings.yaml. Defaults to
                ~/.flightsim.
        """
        self.settings_dir = settings_dir or get_user_dir()
        self.overrides: list[BindingOverride] = []

    @property
    def settings_path(self) -> Path:
        """Get path to the override file."""
        return self.settings_dir / KEYBINDINGS_FILE

    def load(self) -> bool:
        """Load overrides from file.

        Returns:
            True if loaded, False if no file exists.

        Raises:
            ValueError: If the file is malformed.
        """
        if not self.settings_path.exists():
            logger.debug("No keybindings override file at %s", self.settings_path)
            return False

        with open(self.settings_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{self.settings_path} must contain a mapping")
        entries = data.get("bindings", [])
        if not isinstance(entries, list):
            raise ValueError(f"'bindings' in {self.settings_path} must be a list")

        self.overrides = [BindingOverride.from_dict(entry) for entry in entries]
        logger.info("Loaded %d keybinding overrides", len(self.overrides))
        return True

    def has_overrides(self) -> bool:
        """Check if any overrides are configured."""
        return bool(self.overrides)

    def apply_to(self, defaults: dict[str, list[str]]) -> dict[str, list[str]]:
        """Merge overrides over default bindings.

        Args:
            defaults: Action name -> key names.

        Returns:
            New mapping with overrides applied; defaults are not modified.
        """
        merged = {action: list(keys) for action, keys in defaults.items()}
        for override in self.overrides:
            merged[override.action] = [] if override.unbound else list(override.keys)
        return merged


def detect_conflicts(bindings: dict[str, list[str]]) -> list[dict[str, Any]]:
    """Find keys bound to more than one action.

    Args:
        bindings: Action name -> key names.

    Returns:
        List of {"key": name, "actions": [...]} entries.
    """
    seen: dict[str, list[str]] = {}
    for action, keys in bindings.items():
        for key in keys:
            seen.setdefault(key.upper(), []).append(action)

    return [
        {"key": key, "actions": actions} for key, actions in seen.items() if len(actions) > 1
    ]
