"""YAML config loader with environment overrides and runtime get/set."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from summit.config.defaults import DEFAULT_POINTS
from summit.config.schema import AppConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "SUMMIT_"


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, starts from built-in defaults. If no points are specified,
    injects DEFAULT_POINTS. ``SUMMIT_<SECTION>__<FIELD>`` environment
    variables override file values.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if "points" not in raw or not raw["points"]:
        raw["points"] = [p.model_dump() for p in DEFAULT_POINTS]

    config = AppConfig(**raw)
    return apply_env_overrides(config, os.environ if environ is None else environ)


def apply_env_overrides(config: AppConfig, environ: Mapping[str, str]) -> AppConfig:
    for name, value in sorted(environ.items()):
        if not name.startswith(ENV_PREFIX) or "__" not in name:
            continue
        key = name[len(ENV_PREFIX):].lower().replace("__", ".")
        logger.debug("Config override %s from %s", key, name)
        config = set_config_value(config, key, value)
    return config


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.forecast_days'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: AppConfig, dotted_key: str, value: Any) -> AppConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AppConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return AppConfig(**data)
