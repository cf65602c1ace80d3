"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# URL query params win over an explicit params object
DEFAULT_PARAMS_OBJECT_OVERWRITES = False

# Joins the unique identifier and the canonical URL in a cache key
DEFAULT_UID_SEPARATOR = "__"

# Log cache hits/misses at INFO instead of DEBUG
DEFAULT_DEV_MODE = False

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "params_object_overwrites": DEFAULT_PARAMS_OBJECT_OVERWRITES,
        "uid_separator": DEFAULT_UID_SEPARATOR,
        "dev_mode": DEFAULT_DEV_MODE,
        "log_level": DEFAULT_LOG_LEVEL,
    }
