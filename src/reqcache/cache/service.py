"""Cache service — in-memory request cache keyed by canonical URL."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable
from typing import Any, TypeVar

from reqcache.cache.keys import build_cache_key
from reqcache.cache.matching import get_matched_keys
from reqcache.cache.rearrange import rearrange_url
from reqcache.types import (
    CacheServiceConfig,
    CacheStats,
    CleanQueryOptions,
    MergeStrategy,
    RequestConfig,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheService:
    """Caches fetch results under ``<uid><separator><canonical url>`` keys.

    Entries are kept in insertion order; fuzzy lookups report matches in
    that order.
    """

    def __init__(self, config: CacheServiceConfig | None = None) -> None:
        self._config = config or CacheServiceConfig()
        self._store: OrderedDict[str, Any] = OrderedDict()
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> CacheServiceConfig:
        return self._config

    @property
    def strategy(self) -> MergeStrategy:
        return self._config.strategy

    @property
    def cached_data(self) -> dict[str, Any]:
        """Shallow copy of the store, in insertion order."""
        return dict(self._store)

    def canonical_url(self, request: RequestConfig) -> str:
        return rearrange_url(
            request.url,
            default_params=request.default_params,
            params=request.params,
            strategy=self.strategy,
        )

    def cache_key(self, request: RequestConfig) -> str:
        return build_cache_key(
            self.canonical_url(request),
            request.unique_identifier,
            self._config.uid_separator,
        )

    def get(self, request: RequestConfig, fetch: Callable[[str], T]) -> T:
        """Return the cached value for ``request``, fetching it on a miss.

        ``fetch`` receives the canonical URL (without the identifier prefix).
        Nothing is stored when it raises.
        """
        url = self.canonical_url(request)
        key = build_cache_key(url, request.unique_identifier, self._config.uid_separator)

        if key in self._store:
            self._hits += 1
            self._log("Cache hit: %s", key)
            return self._store[key]

        self._misses += 1
        self._log("Cache miss: %s", key)
        value = fetch(url)
        self._store[key] = value
        return value

    def get_matched_keys(
        self,
        url: str,
        unique_identifier: str | None = None,
        options: CleanQueryOptions | None = None,
    ) -> list[str]:
        return get_matched_keys(
            self._store,
            url,
            unique_identifier=unique_identifier,
            options=options,
            strategy=self.strategy,
            separator=self._config.uid_separator,
        )

    def get_cached(
        self,
        url: str,
        unique_identifier: str | None = None,
        options: CleanQueryOptions | None = None,
    ) -> dict[str, Any]:
        """Return the matched entries without fetching anything."""
        return {
            key: self._store[key]
            for key in self.get_matched_keys(url, unique_identifier, options)
        }

    def clean(
        self,
        url: str | None = None,
        unique_identifier: str | None = None,
        options: CleanQueryOptions | None = None,
    ) -> int:
        """Remove matched entries. Returns count deleted.

        With neither url nor identifier, everything is removed.
        """
        if url is None and not unique_identifier:
            count = len(self._store)
            self._store.clear()
            logger.info("Cleared %d cache entries", count)
            return count

        to_remove = self.get_matched_keys(url or "", unique_identifier, options)
        for key in to_remove:
            del self._store[key]
        logger.info(
            "Removed %d cache entries matching url=%r uid=%r",
            len(to_remove),
            url,
            unique_identifier,
        )
        return len(to_remove)

    def stats(self) -> CacheStats:
        return CacheStats(entries=len(self._store), hits=self._hits, misses=self._misses)

    def _log(self, msg: str, *args: Any) -> None:
        level = logging.INFO if self._config.dev_mode else logging.DEBUG
        logger.log(level, msg, *args)
