"""Tests for the template sequence helpers."""

import random
from types import SimpleNamespace

from pagewright.filters import filter_by_type, first_n, last_n, random_n


def page(kind, name):
    return SimpleNamespace(type=kind, title=name)


class TestFirstN:
    def test_short_sequence_returned_unchanged(self):
        items = [1, 2]
        assert first_n(5, items) is items

    def test_takes_front_items_in_order(self):
        assert first_n(2, [1, 2, 3, 4]) == [1, 2]

    def test_exact_length(self):
        assert first_n(3, [1, 2, 3]) == [1, 2, 3]


class TestLastN:
    def test_short_sequence_returned_unchanged(self):
        items = ["a"]
        assert last_n(3, items) is items

    def test_takes_back_items_in_order(self):
        assert last_n(2, [1, 2, 3, 4]) == [3, 4]

    def test_zero_items(self):
        assert list(last_n(0, [1, 2, 3])) == []


class TestRandomN:
    def test_short_sequence_returned_unchanged(self):
        items = [1, 2]
        assert random_n(3, items) is items

    def test_returns_distinct_items(self):
        items = list(range(20))
        picked = random_n(5, items, rng=random.Random(1))
        assert len(picked) == 5
        assert len(set(picked)) == 5
        assert set(picked) <= set(items)

    def test_seeded_rng_is_reproducible(self):
        items = list(range(50))
        first = random_n(10, items, rng=random.Random(42))
        second = random_n(10, items, rng=random.Random(42))
        assert first == second


class TestFilterByType:
    def test_keeps_matching_pages_in_order(self):
        pages = [page("post", "a"), page("page", "b"), page("post", "c")]
        assert [p.title for p in filter_by_type("post", pages)] == ["a", "c"]

    def test_no_match_returns_empty_list(self):
        pages = [page("post", "a")]
        assert filter_by_type("note", pages) == []
