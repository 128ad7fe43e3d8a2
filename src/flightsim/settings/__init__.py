"""User settings for flightsim.

This package reads per-user preferences that override the bundled
defaults, such as custom key bindings.
"""

from flightsim.settings.keybindings_settings import (
    BindingOverride,
    KeybindingsSettings,
    detect_conflicts,
)

__all__ = [
    "BindingOverride",
    "KeybindingsSettings",
    "detect_conflicts",
]
