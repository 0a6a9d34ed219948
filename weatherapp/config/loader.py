"""YAML config loader with environment overrides and dotted-key lookup."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from weatherapp.config.schema import AppConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENWEATHER_API_KEY"
UNITS_ENV = "WEATHERAPP_UNITS"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file, then apply env overrides.

    A missing path or empty file yields the defaults. The API key is taken
    from OPENWEATHER_API_KEY when the file does not set one.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
            if not isinstance(raw, dict):
                raise ValueError(
                    f"Config file {path} must hold a mapping, got {type(raw).__name__}"
                )
        else:
            logger.warning("Config file %s not found, using defaults", path)

    return apply_env_overrides(raw, os.environ)


def apply_env_overrides(raw: dict[str, Any], env: Any) -> AppConfig:
    provider = _section(raw, "provider")
    if not provider.get("api_key") and env.get(API_KEY_ENV):
        provider["api_key"] = env[API_KEY_ENV]

    if env.get(UNITS_ENV):
        _section(raw, "display")["default_unit"] = env[UNITS_ENV]

    return AppConfig(**raw)


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section {name!r} must be a mapping")
    raw[name] = section
    return section


def get_config_value(config: AppConfig | dict[str, Any], dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.country_code'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, dict) and part in obj:
            obj = obj[part]
        elif not isinstance(obj, dict) and hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_json(config: AppConfig) -> str:
    """Config as JSON with the API key masked, for display."""
    return _redacted(config).model_dump_json(indent=2)


def redacted_dict(config: AppConfig) -> dict[str, Any]:
    """Config as plain data with the API key masked."""
    return _redacted(config).model_dump(mode="json")


def _redacted(config: AppConfig) -> AppConfig:
    return config.model_copy(
        update={
            "provider": config.provider.model_copy(
                update={"api_key": "***" if config.provider.api_key else ""}
            )
        }
    )
