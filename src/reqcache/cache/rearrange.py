"""Canonical URL rearrangement — merge, filter and sort query parameters.

The canonical URL is the storage key of a cached request (before any
identifier prefix). It depends only on its arguments:

  address + "?" + sorted "key=value" pairs joined with "&"

Three parameter sources are merged, lowest precedence first:
  URL_WINS:   default_params → params → URL query
  PARAMS_WIN: default_params → URL query → params
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from reqcache.types import MergeStrategy, ParamValue

# Stringified values that callers use to mean "no value"
FILLER_VALUES = frozenset({"", "''", '""', "undefined", "null"})

# ";" also splits pairs, so a literal ";" inside a value truncates it
_PAIR_SEPARATORS = ("&", ";")

_EXPONENT_THRESHOLD = 1e21


def rearrange_url(
    url: str,
    default_params: Mapping[str, ParamValue] | None = None,
    params: Mapping[str, ParamValue] | None = None,
    strategy: MergeStrategy = MergeStrategy.URL_WINS,
) -> str:
    """Return the canonical form of ``url`` merged with the given params.

    A URL without a query string and without (non-empty) ``params`` is
    returned as its bare address, even when ``default_params`` are given.
    When every merged parameter is filtered out the result keeps a
    trailing ``?``.
    """
    address, _, raw_query = url.partition("?")

    if not raw_query and not params:
        return address

    url_params = parse_query(raw_query)

    if strategy == MergeStrategy.PARAMS_WIN:
        final_params = {**(default_params or {}), **url_params, **(params or {})}
    else:
        final_params = {**(default_params or {}), **(params or {}), **url_params}

    query = "&".join(
        f"{key}={_stringify(final_params[key])}"
        for key in sorted(key for key, value in final_params.items() if _has_value(value))
    )
    return address + "?" + query


def parse_query(raw_query: str) -> dict[str, str | None]:
    """Parse a raw query string into a mapping.

    An item without ``=`` maps to None. Later duplicates overwrite earlier ones.
    """
    result: dict[str, str | None] = {}
    if not raw_query:
        return result

    items = [raw_query]
    for sep in _PAIR_SEPARATORS:
        items = [part for item in items for part in item.split(sep)]

    for item in items:
        key, eq, value = item.partition("=")
        result[key] = value if eq else None
    return result


def _has_value(value: ParamValue) -> bool:
    if not value:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return _stringify(value) not in FILLER_VALUES


def _stringify(value: ParamValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        # Integral floats print without ".0" below 1e21, exponent form above
        if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return str(int(value))
    return str(value)
