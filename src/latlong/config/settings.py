# src/latlong/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/latlong/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `LATLONG_CONFIG_PATH`
- environment variables (`LATLONG_LOG_LEVEL`, `LATLONG_EARTH_RADIUS_KM`)

Design rule:
- The navigation functions stay pure and take `radius_km` explicitly; this layer only
  decides which radius callers such as the CLI pass in.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from latlong.core.env import load_dotenv_if_present
from latlong.core.navigation import HAVERSINE_RADIUS_KM, MEAN_RADIUS_KM


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `latlong.config`."""
    text = resources.files("latlong.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    log_level: str = "INFO"


class EarthSettings(BaseModel):
    # Haversine uses the equatorial radius; the other formulas use the mean radius.
    haversine_radius_km: float = Field(HAVERSINE_RADIUS_KM, gt=0)
    mean_radius_km: float = Field(MEAN_RADIUS_KM, gt=0)


class DisplaySettings(BaseModel):
    significant_figures: int = Field(4, ge=1, le=17)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    earth: EarthSettings = Field(default_factory=EarthSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    `LATLONG_EARTH_RADIUS_KM` sets both radii, so every formula uses one Earth.
    """
    data = dict(data)
    log_level = os.getenv("LATLONG_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    radius = os.getenv("LATLONG_EARTH_RADIUS_KM")
    if radius:
        earth = data.setdefault("earth", {})
        earth["haversine_radius_km"] = radius
        earth["mean_radius_km"] = radius

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("LATLONG_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
