"""
Logging configuration.

We use a YAML logging config (`src/latlong/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `LATLONG_LOG_LEVEL`).
"""

from __future__ import annotations

import logging.config

from latlong.config.settings import get_logging_config, get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure the Python logging system based on packaged YAML config + settings.

    `level` (e.g. from a `--log-level` flag) takes priority over settings.
    """
    config = get_logging_config()
    # get_logging_config() is cached; never mutate the shared dict.
    config = {**config, "root": dict(config.get("root", {}))}
    config["handlers"] = {name: dict(h) for name, h in config.get("handlers", {}).items()}

    level = (level or get_settings().app.log_level).upper()
    config["root"]["level"] = level
    for handler in config["handlers"].values():
        if "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
