"""HTTP fetchers for CacheService misses, built on httpx."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx

from reqcache.errors.exceptions import FetchError

logger = logging.getLogger(__name__)


def json_fetcher(client: httpx.Client) -> Callable[[str], Any]:
    """Return a fetch callable that GETs a canonical URL and decodes JSON.

    Relative canonical URLs (``/posts?a=1``) resolve against the client's
    ``base_url``.
    """

    def fetch(url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                str(exc),
                error_type="http_status",
                http_status=exc.response.status_code,
                url=url,
                original=exc,
            ) from exc
        except httpx.TransportError as exc:
            raise FetchError(
                str(exc),
                error_type="transport",
                url=url,
                original=exc,
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(
                str(exc),
                error_type="decode",
                http_status=response.status_code,
                url=url,
                original=exc,
            ) from exc

    return fetch
