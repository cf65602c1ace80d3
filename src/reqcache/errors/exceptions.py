"""Custom exception hierarchy for reqcache."""

from __future__ import annotations

from typing import Any


class ReqCacheError(Exception):
    """Base exception for all reqcache errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(ReqCacheError):
    """Invalid configuration — a file, env var or override failed validation."""

    def __init__(self, message: str = "", key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class FetchError(ReqCacheError):
    """The underlying request for a cache miss failed.

    Examples: 404/500 response, connection refused, timeout.
    """

    def __init__(
        self,
        message: str = "",
        error_type: str = "http_status",
        http_status: int | None = None,
        url: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.http_status = http_status
        self.url = url
        self.original = original
