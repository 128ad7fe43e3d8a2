"""Version information for flightsim.

This module provides version information from the installed distribution
metadata, with a fallback for source checkouts.
"""

from importlib.metadata import PackageNotFoundError, version

# Version info
__version__ = "0.1.0"  # Fallback version
__license__ = "MIT"


def get_version() -> str:
    """Get the current version string.

    Reads the installed package metadata or falls back to __version__.

    Returns:
        Version string (e.g., "0.1.0").
    """
    try:
        return version("flightsim")
    except PackageNotFoundError:
        return __version__
