"""Run settings assembled from defaults, an optional YAML file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

import yaml

from manifestcheck.config.constants import DEFAULT_CONFIG
from manifestcheck.exceptions import ConfigError
from manifestcheck.utils import get_logger, load_file, validate_config

logger = get_logger(__name__)

CONFIG_ENV = "MANIFESTCHECK_CONFIG"

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "manifestcheck configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "schema_url": {"type": "string", "minLength": 1},
        "cache_file": {"type": "string", "minLength": 1},
        "document_extension": {"type": "string", "minLength": 1},
        "fetch_timeout": {"type": ["number", "null"], "exclusiveMinimum": 0},
        "max_depth": {"type": "integer", "minimum": 1},
        "sort_properties": {"type": "boolean"},
        "max_workers": {"type": ["integer", "null"], "minimum": 1},
    },
}

# env var -> (settings field, converter)
_ENV_OVERRIDES = {
    "MANIFESTCHECK_SCHEMA_URL": ("schema_url", str),
    "MANIFESTCHECK_CACHE_FILE": ("cache_file", str),
    "MANIFESTCHECK_EXTENSION": ("document_extension", str),
    "MANIFESTCHECK_FETCH_TIMEOUT": ("fetch_timeout", float),
    "MANIFESTCHECK_MAX_DEPTH": ("max_depth", int),
    "MANIFESTCHECK_SORT_PROPERTIES": ("sort_properties", lambda v: v.strip().lower() in ("1", "true", "yes", "on")),
    "MANIFESTCHECK_MAX_WORKERS": ("max_workers", int),
}


@dataclass(frozen=True)
class Settings:
    schema_url: str = DEFAULT_CONFIG["schema_url"]
    cache_file: str = DEFAULT_CONFIG["cache_file"]
    document_extension: str = DEFAULT_CONFIG["document_extension"]
    fetch_timeout: Optional[float] = DEFAULT_CONFIG["fetch_timeout"]
    max_depth: int = DEFAULT_CONFIG["max_depth"]
    sort_properties: bool = DEFAULT_CONFIG["sort_properties"]
    max_workers: Optional[int] = DEFAULT_CONFIG["max_workers"]

    def __post_init__(self) -> None:
        ext = self.document_extension
        if ext and not ext.startswith("."):
            object.__setattr__(self, "document_extension", "." + ext)


def load_config_file(path: str) -> Dict[str, Any]:
    """Parse and validate a manifestcheck YAML config file."""
    try:
        cfg = yaml.safe_load(load_file(path))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file {path} is not valid YAML: {e}") from e
    if cfg is None:
        cfg = {}
    validate_config(cfg, CONFIG_SCHEMA)
    return cfg


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_key, (field, convert) in _ENV_OVERRIDES.items():
        raw = environ.get(env_key)
        if raw is None or raw == "":
            continue
        try:
            overrides[field] = convert(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {env_key}: {raw!r}") from e
    return overrides


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings: defaults, then the file named by MANIFESTCHECK_CONFIG, then env vars."""
    environ = os.environ if environ is None else environ
    settings = Settings()

    config_path = environ.get(CONFIG_ENV)
    if config_path:
        settings = replace(settings, **load_config_file(config_path))
        logger.debug("config loaded path=%s", config_path)

    overrides = _env_overrides(environ)
    if overrides:
        validate_config(overrides, CONFIG_SCHEMA)
        settings = replace(settings, **overrides)
    return settings
