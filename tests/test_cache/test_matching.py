"""Tests for exact and fuzzy cache key matching."""

from collections import OrderedDict

from reqcache.cache.matching import get_matched_keys
from reqcache.types import CleanQueryOptions, MergeStrategy


def _store(*keys: str) -> OrderedDict:
    return OrderedDict((key, f"value:{key}") for key in keys)


class TestExactMatching:
    def test_matches_canonical_form(self):
        source = _store("/posts?a=1&b=2", "/posts?a=1")
        result = get_matched_keys(source, "/posts?b=2&a=1", options=CleanQueryOptions(exact=True))
        assert result == ["/posts?a=1&b=2"]

    def test_no_match_returns_empty_list(self):
        source = _store("/posts?a=1&b=2")
        result = get_matched_keys(source, "/posts?a=1", options=CleanQueryOptions(exact=True))
        assert result == []

    def test_with_identifier(self):
        source = _store("users__/posts?a=1", "/posts?a=1")
        result = get_matched_keys(
            source, "/posts?a=1", unique_identifier="users", options=CleanQueryOptions(exact=True)
        )
        assert result == ["users__/posts?a=1"]

    def test_query_params_merged_into_lookup(self):
        source = _store("/posts?a=1&b=2")
        options = CleanQueryOptions(exact=True, query_params={"b": 2})
        assert get_matched_keys(source, "/posts?a=1", options=options) == ["/posts?a=1&b=2"]

    def test_strategy_applies_to_lookup(self):
        source = _store("/posts?a=1", "/posts?a=2")
        options = CleanQueryOptions(exact=True, query_params={"a": "2"})
        assert get_matched_keys(source, "/posts?a=1", options=options) == ["/posts?a=1"]
        assert get_matched_keys(
            source, "/posts?a=1", options=options, strategy=MergeStrategy.PARAMS_WIN
        ) == ["/posts?a=2"]

    def test_custom_separator(self):
        source = _store("users::/posts", "users__/posts")
        result = get_matched_keys(
            source,
            "/posts",
            unique_identifier="users",
            options=CleanQueryOptions(exact=True),
            separator="::",
        )
        assert result == ["users::/posts"]


class TestFuzzyMatching:
    def test_sorted_and_truncated_lookup(self):
        source = _store("/posts?c=T&g=T&z=T")
        options = CleanQueryOptions(query_params={"f": "undefined", "g": "T"})
        result = get_matched_keys(source, "/posts?m=null&z=T&k=&c=T&", options=options)
        assert result == ["/posts?c=T&g=T&z=T"]

    def test_address_only_matches_all_variants_in_store_order(self):
        source = _store("/posts?b=1", "/comments", "/posts", "users__/posts/1?x=y")
        assert get_matched_keys(source, "/posts") == [
            "/posts?b=1",
            "/posts",
            "users__/posts/1?x=y",
        ]

    def test_every_pair_required(self):
        source = _store("/posts?a=1&b=2", "/posts?a=1", "/posts?a=2&b=2", "/posts?b=2")
        assert get_matched_keys(source, "/posts?b=2&a=1") == ["/posts?a=1&b=2"]

    def test_extra_pairs_in_key_allowed(self):
        source = _store("/posts?a=1&b=2&c=3")
        assert get_matched_keys(source, "/posts?c=3") == ["/posts?a=1&b=2&c=3"]

    def test_pair_substring_false_positive(self):
        # "a=1" is a substring of "a=10"
        source = _store("/posts?a=10", "/posts?a=2")
        assert get_matched_keys(source, "/posts?a=1") == ["/posts?a=10"]

    def test_identifier_filters(self):
        source = _store("users__/posts?a=1", "admins__/posts?a=1", "/posts?a=1")
        result = get_matched_keys(source, "/posts", unique_identifier="users")
        assert result == ["users__/posts?a=1"]

    def test_identifier_and_address_checked_separately(self):
        source = _store("some_uid__companies/some_id", "other__companies/some_id")
        result = get_matched_keys(source, "some_id", unique_identifier="some_uid")
        assert result == ["some_uid__companies/some_id"]

    def test_filtered_lookup_query_ignores_pairs(self):
        source = _store("/posts?a=1", "/posts?b=2")
        assert get_matched_keys(source, "/posts?a=null") == ["/posts?a=1", "/posts?b=2"]

    def test_no_match(self):
        source = _store("/posts?a=1")
        assert get_matched_keys(source, "/comments") == []

    def test_empty_store(self):
        assert get_matched_keys({}, "/posts") == []

    def test_store_not_mutated(self):
        source = _store("/posts?a=1", "/comments")
        snapshot = list(source.items())
        get_matched_keys(source, "/posts?a=1")
        get_matched_keys(source, "/posts?a=1", options=CleanQueryOptions(exact=True))
        assert list(source.items()) == snapshot

    def test_plain_dict_store(self):
        source = {"/b": 1, "/a/b": 2, "/c": 3}
        assert get_matched_keys(source, "/b") == ["/b", "/a/b"]
