"""Shared Pydantic models for reqcache."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, field_validator

from reqcache.config.defaults import (
    DEFAULT_DEV_MODE,
    DEFAULT_PARAMS_OBJECT_OVERWRITES,
    DEFAULT_UID_SEPARATOR,
)

ParamValue = str | int | float | bool | None

# ── Enums ──


class MergeStrategy(StrEnum):
    """Which parameter source wins when the same key appears twice.

    Default params always have the lowest precedence.
    """

    URL_WINS = "url_wins"
    PARAMS_WIN = "params_win"

    @classmethod
    def from_flag(cls, params_object_overwrites: bool) -> MergeStrategy:
        return cls.PARAMS_WIN if params_object_overwrites else cls.URL_WINS


# ── Request models ──


class CleanQueryOptions(BaseModel):
    exact: bool = False
    query_params: dict[str, ParamValue] | None = None


class RequestConfig(BaseModel):
    url: str
    default_params: dict[str, ParamValue] | None = None
    params: dict[str, ParamValue] | None = None
    unique_identifier: str | None = None


# ── Service models ──


class CacheServiceConfig(BaseModel):
    params_object_overwrites: bool = DEFAULT_PARAMS_OBJECT_OVERWRITES
    uid_separator: str = DEFAULT_UID_SEPARATOR
    dev_mode: bool = DEFAULT_DEV_MODE

    @field_validator("uid_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("uid_separator must not be empty")
        return value

    @property
    def strategy(self) -> MergeStrategy:
        return MergeStrategy.from_flag(self.params_object_overwrites)


class CacheStats(BaseModel):
    """Aggregate cache statistics."""

    entries: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
