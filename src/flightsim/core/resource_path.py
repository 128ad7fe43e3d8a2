"""Resource path resolution.

Bundled configuration lives in the ``config`` directory inside the
package so it is available both from a source checkout and from an
installed wheel.
"""

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def get_config_dir() -> Path:
    """Return the bundled configuration directory."""
    return PACKAGE_ROOT / "config"


def get_config_path(name: str) -> Path:
    """Return the path of a bundled configuration file.

    Args:
        name: File name relative to the config directory
            (e.g. "flight_model.yaml").

    Returns:
        Absolute path (the file may not exist).
    """
    return get_config_dir() / name


def get_user_dir() -> Path:
    """Return the per-user settings directory (``~/.flightsim``)."""
    return Path.home() / ".flightsim"
