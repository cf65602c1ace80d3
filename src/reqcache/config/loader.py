"""YAML config loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from reqcache.config.hierarchy import load_config_hierarchy
from reqcache.errors.exceptions import ConfigError
from reqcache.types import CacheServiceConfig


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load any YAML file safely."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected YAML mapping, got {type(raw).__name__} in {path}")

    return raw


def load_service_config(path: str | Path | None = None, **overrides: Any) -> CacheServiceConfig:
    """Resolve the config hierarchy (plus an optional explicit file) into a CacheServiceConfig.

    An explicit file sits between the environment and runtime overrides.
    """
    explicit = load_yaml(path) if path else {}
    explicit.update({k: v for k, v in overrides.items() if v is not None})
    merged = load_config_hierarchy(**explicit)
    fields = {k: v for k, v in merged.items() if k in CacheServiceConfig.model_fields}

    try:
        return CacheServiceConfig(**fields)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigError(f"Invalid configuration: {first['msg']}", key=key) from e
