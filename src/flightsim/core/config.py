"""YAML configuration loading."""

from pathlib import Path
from typing import Any

import yaml

from flightsim.core.logging_system import get_logger

logger = get_logger(__name__)


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load a YAML mapping from disk.

    Args:
        path: File to read.

    Returns:
        Parsed mapping (empty for an empty file).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.debug("Config %s is empty", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_section(path: str | Path, section: str) -> dict[str, Any]:
    """Load one top-level section of a YAML config.

    Args:
        path: File to read.
        section: Top-level key.

    Returns:
        The section mapping, or an empty dict if the key is absent.

    Raises:
        ValueError: If the section exists but is not a mapping.
    """
    data = load_yaml_config(path).get(section) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Section '{section}' in {path} must be a mapping")
    return data
