"""Tests for the linear search engine."""

import pytest

from context_server.errors import MissingQuery
from context_server.query import search
from context_server.types import CreateContextArgs


def _add(store, name="Item", content="body", type="text", tags=None):
    return store.create(CreateContextArgs(name=name, content=content, type=type, tags=tags))


class TestTextPredicate:
    def test_matches_name(self, store):
        item = _add(store, name="Deployment Notes")
        assert search(store, "deploy") == [item]

    def test_matches_content(self, store):
        item = _add(store, content="Use HTTP status codes")
        assert search(store, "status") == [item]

    def test_matches_any_tag(self, store):
        item = _add(store, tags=["alpha", "Best-Practices"])
        assert search(store, "practices") == [item]

    def test_case_insensitive(self, store):
        item = _add(store, name="README")
        assert search(store, "ReadMe") == [item]

    def test_no_match(self, store):
        _add(store, name="a", content="b", tags=["c"])
        assert search(store, "zzz") == []

    def test_missing_query(self, store):
        with pytest.raises(MissingQuery, match="Missing required field: query"):
            search(store, "")
        with pytest.raises(MissingQuery):
            search(store, None)


class TestTypeFilter:
    def test_exact_type(self, store):
        _add(store, name="hello text", type="text")
        code = _add(store, name="hello code", type="code")
        assert search(store, "hello", type="code") == [code]

    def test_absent_type_matches_all(self, store):
        _add(store, name="hello", type="text")
        _add(store, name="hello", type="data")
        assert len(search(store, "hello")) == 2


class TestTagFilter:
    def test_shared_tag_matches(self, store):
        item = _add(store, name="x", tags=["a", "b"])
        assert search(store, "x", tags=["b", "c"]) == [item]

    def test_no_shared_tag(self, store):
        _add(store, name="x", tags=["a", "b"])
        assert search(store, "x", tags=["c", "d"]) == []

    def test_empty_filter_matches_all(self, store):
        item = _add(store, name="x", tags=["a"])
        assert search(store, "x", tags=[]) == [item]

    def test_filter_is_exact(self, store):
        _add(store, name="x", tags=["Api"])
        assert search(store, "x", tags=["api"]) == []

    def test_untagged_item_excluded_by_filter(self, store):
        _add(store, name="x")
        assert search(store, "x", tags=["a"]) == []


class TestCombined:
    def test_all_predicates_must_hold(self, store):
        _add(store, name="hello", type="code", tags=["a"])
        _add(store, name="hello", type="text", tags=["b"])
        target = _add(store, name="hello", type="text", tags=["a"])
        assert search(store, "hello", type="text", tags=["a"]) == [target]

    def test_end_to_end_scenario(self, store):
        item = _add(store, name="X", content="hello world", type="text", tags=["greet"])
        assert search(store, "hello") == [item]
        assert search(store, "hello", type="code") == []


class TestLimit:
    def test_truncates_in_iteration_order(self, store):
        for n in range(1, 26):
            _add(store, name=f"Item-{n}", content="shared term")
        results = search(store, "shared", limit=10)
        assert [i.name for i in results] == [f"Item-{n}" for n in range(1, 11)]

    def test_stops_scanning_at_limit(self, store):
        for n in range(5):
            _add(store, name=f"match-{n}")

        seen = []

        def tracking():
            for item in store:
                seen.append(item.id)
                yield item

        search(tracking(), "match", limit=2)
        assert len(seen) == 2

    def test_default_limit_is_ten(self, store):
        for n in range(15):
            _add(store, name=f"n{n}")
        assert len(search(store, "n")) == 10

    def test_limit_not_clamped(self, store):
        for n in range(120):
            _add(store, name=f"n{n}")
        assert len(search(store, "n", limit=110)) == 110

    def test_zero_limit_returns_nothing(self, store):
        _add(store, name="n")
        assert search(store, "n", limit=0) == []

    def test_non_matching_items_do_not_count(self, store):
        _add(store, name="other")
        a = _add(store, name="hit")
        _add(store, name="other")
        b = _add(store, name="hit")
        assert search(store, "hit", limit=2) == [a, b]


def test_seeded_search(seeded_store):
    names = [i.name for i in search(seeded_store, "api")]
    assert names == ["API Guidelines"]
