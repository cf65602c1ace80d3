"""Cache subsystem — canonical URL keys, key matching and an in-memory service."""

from reqcache.cache.keys import UID_SEPARATOR, build_cache_key
from reqcache.cache.matching import get_matched_keys
from reqcache.cache.rearrange import rearrange_url
from reqcache.cache.service import CacheService

__all__ = [
    "CacheService",
    "UID_SEPARATOR",
    "build_cache_key",
    "get_matched_keys",
    "rearrange_url",
]
