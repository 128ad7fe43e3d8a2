"""flightsim - arcade flight dynamics demo built on pygame."""

from flightsim.version import __version__

__all__ = ["__version__"]
