"""Error handling — exception hierarchy."""

from reqcache.errors.exceptions import ConfigError, FetchError, ReqCacheError

__all__ = [
    "ReqCacheError",
    "ConfigError",
    "FetchError",
]
