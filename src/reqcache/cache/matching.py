"""Cache key matching — exact and fuzzy lookups over a key store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from reqcache.cache.keys import UID_SEPARATOR, build_cache_key
from reqcache.cache.rearrange import rearrange_url
from reqcache.types import CleanQueryOptions, MergeStrategy


def get_matched_keys(
    source: Mapping[str, Any],
    url: str,
    unique_identifier: str | None = None,
    options: CleanQueryOptions | None = None,
    strategy: MergeStrategy = MergeStrategy.URL_WINS,
    separator: str = UID_SEPARATOR,
) -> list[str]:
    """Return the keys of ``source`` compatible with the lookup, in store order.

    Exact mode compares the full cache key. Fuzzy mode keeps keys that
    contain the identifier and the URL address, then (when the lookup has
    query parameters) every ``name=value`` pair of the canonical lookup URL.
    Fuzzy matches are substring based, so unrelated keys that happen to
    contain the same fragments also match.
    """
    options = options or CleanQueryOptions()
    canonical_url = rearrange_url(url, params=options.query_params, strategy=strategy)
    key = build_cache_key(canonical_url, unique_identifier, separator)

    if options.exact:
        return [source_key for source_key in source if source_key == key]

    # Query params are ignored here; the identifier and the address are checked
    # separately so that "some_uid__companies/some_id" matches
    # uid="some_uid", url="some_id".
    address = url.split("?")[0]
    matches = [
        source_key
        for source_key in source
        if (unique_identifier or "") in source_key and address in source_key
    ]

    query = canonical_url.partition("?")[2]
    if query:
        pairs = query.split("&")
        matches = [
            matched_key
            for matched_key in matches
            if all(pair in matched_key for pair in pairs)
        ]
    return matches
