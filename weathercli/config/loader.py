"""YAML config loader with dotted-key lookup."""

import logging
from pathlib import Path
from typing import Any

import yaml

from weathercli.config.schema import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "weathercli.yaml"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file or an empty document gives the defaults.
    """
    path = Path(path or DEFAULT_CONFIG)
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return AppConfig()

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.units'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, dict) and part in obj:
            obj = obj[part]
        elif part in getattr(type(obj), "model_fields", {}):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
