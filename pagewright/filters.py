"""Sequence helpers exposed to templates, e.g. ``first_n(5, filter_by_type("post", pages))``."""
from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def first_n(n: int, items: Sequence[T]) -> Sequence[T]:
    if len(items) < n:
        return items
    return items[:n]


def last_n(n: int, items: Sequence[T]) -> Sequence[T]:
    if len(items) < n:
        return items
    return items[len(items) - n :]


def random_n(n: int, items: Sequence[T], rng: Optional[random.Random] = None) -> Sequence[T]:
    if len(items) < n:
        return items
    rng = rng or random.Random()
    order = list(range(len(items)))
    rng.shuffle(order)
    return [items[idx] for idx in order[:n]]


def filter_by_type(page_type: str, pages: Sequence) -> list:
    return [page for page in pages if page.type == page_type]
