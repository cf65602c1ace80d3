"""reqcache — canonical cache keys and key matching for client-side HTTP caches."""

from reqcache.cache import (
    UID_SEPARATOR,
    CacheService,
    build_cache_key,
    get_matched_keys,
    rearrange_url,
)
from reqcache.types import CacheServiceConfig, CleanQueryOptions, MergeStrategy, RequestConfig

__all__ = [
    "CacheService",
    "CacheServiceConfig",
    "CleanQueryOptions",
    "MergeStrategy",
    "RequestConfig",
    "UID_SEPARATOR",
    "build_cache_key",
    "get_matched_keys",
    "rearrange_url",
]
