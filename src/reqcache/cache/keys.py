"""Cache key assembly — identifier namespace + canonical URL."""

from __future__ import annotations

from reqcache.config.defaults import DEFAULT_UID_SEPARATOR

UID_SEPARATOR = DEFAULT_UID_SEPARATOR


def build_cache_key(
    canonical_url: str,
    unique_identifier: str | None = None,
    separator: str = UID_SEPARATOR,
) -> str:
    """Prefix the canonical URL with ``<identifier><separator>`` when given."""
    if unique_identifier:
        return unique_identifier + separator + canonical_url
    return canonical_url
