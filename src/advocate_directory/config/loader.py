import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..errors import ConfigError

DEFAULT_CONFIG_PATH = Path("advocate_directory.config.yaml")

DATABASE_URL_ENV = "DATABASE_URL"
LOG_LEVEL_ENV = "ADVOCATE_DIRECTORY_LOG_LEVEL"

BASE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "database": {
        "url": None,
        "echo": False,
    },
    "listing": {
        "cache_max_age_seconds": 60,
    },
    "logging": {
        "level": "INFO",
    },
}


def _merge_defaults(config: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Overlay user sections on the built-in defaults, one level deep."""
    merged = deepcopy(BASE_DEFAULTS)
    for section, values in config.items():
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")
        merged.setdefault(section, {}).update(values)
    return merged


def load_config(
    path: Path | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Load configuration from YAML, apply defaults and environment overrides.

    The file is optional when no explicit path is given. DATABASE_URL and
    ADVOCATE_DIRECTORY_LOG_LEVEL override the file.

    Args:
        path: Optional path to a YAML config file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Dictionary with "database", "listing" and "logging" sections

    Raises:
        ConfigError: If an explicit path is missing or the YAML is malformed
    """
    environ = os.environ if environ is None else environ
    cfg_path = path or DEFAULT_CONFIG_PATH

    raw: Dict[str, Any] = {}
    if cfg_path.exists():
        try:
            with cfg_path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {cfg_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must contain a mapping: {cfg_path}")
    elif path is not None:
        raise ConfigError(f"Config file not found: {cfg_path}")

    config = _merge_defaults(raw)

    if environ.get(DATABASE_URL_ENV):
        config["database"]["url"] = environ[DATABASE_URL_ENV]
    if environ.get(LOG_LEVEL_ENV):
        config["logging"]["level"] = environ[LOG_LEVEL_ENV]

    return config


def get_cache_max_age(config: Mapping[str, Any]) -> int:
    value = config.get("listing", {}).get("cache_max_age_seconds", 60)
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        raise ConfigError(f"listing.cache_max_age_seconds must be an integer, got {value!r}")
