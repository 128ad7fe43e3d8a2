"""Logging setup for flightsim.

Modules obtain loggers with ``get_logger(__name__)``; the application calls
``initialize_logging()`` once at startup. Configuration is a
``logging.config.dictConfig`` document stored as YAML.

Typical usage example:
    from flightsim.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    logger = get_logger(__name__)
    logger.info("ready")
"""

import logging
import logging.config
import logging.handlers
import platform
from pathlib import Path
from typing import Any

import yaml

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_NAME = "flightsim.log"


def get_log_dir() -> Path:
    """Return the platform-specific directory for log files."""
    system = platform.system()
    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "flightsim"
    if system == "Windows":
        return Path.home() / "AppData" / "Local" / "flightsim" / "logs"
    return Path.home() / ".local" / "state" / "flightsim" / "logs"


def _default_config() -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": "INFO",
            }
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }


def _add_file_handler(log_dir: Path) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(logging.DEBUG)
    logging.getLogger().addHandler(handler)


def initialize_logging(
    config_path: str | None = None,
    use_platform_dir: bool = False,
    level: int | None = None,
) -> None:
    """Configure the logging system.

    Args:
        config_path: YAML dictConfig file. If None, a console-only default
            configuration is used.
        use_platform_dir: Also write a rotating log file in the platform
            log directory.
        level: Optional root level override (e.g. ``logging.DEBUG``).

    Raises:
        ValueError: If the config file does not contain a mapping.
    """
    config = _default_config()
    if config_path is not None:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"Logging config {config_path} must contain a mapping")
        config = loaded

    logging.config.dictConfig(config)

    if use_platform_dir:
        try:
            _add_file_handler(get_log_dir())
        except OSError as e:
            logging.getLogger(__name__).warning("Log file disabled: %s", e)

    if level is not None:
        logging.getLogger().setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Standard library logger.
    """
    return logging.getLogger(name)
