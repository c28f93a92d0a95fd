"""Deterministic ordering of contributors."""

from __future__ import annotations

from collections.abc import Mapping

from gitfame_core.errors import ConfigError
from gitfame_core.models import AuthorRecord

SORT_KEYS = ("lines", "commits", "files")


def key_precedence(order_by: str) -> tuple[str, ...]:
    """Return the sort keys with order_by first and the rest in their fixed order.

    e.g. "commits" -> ("commits", "lines", "files")
    """
    if order_by not in SORT_KEYS:
        raise ConfigError(f"{order_by!r} is not a sorting option. Choose one of: {', '.join(SORT_KEYS)}.")
    return (order_by, *(key for key in SORT_KEYS if key != order_by))


def rank(records: Mapping[str, AuthorRecord], order_by: str = "lines") -> list[tuple[str, AuthorRecord]]:
    """Sort contributors descending by the precedence keys, then by identity ascending.

    The identity breaks every remaining tie, so the result never depends on
    the iteration order of records.
    """
    keys = key_precedence(order_by)

    def sort_key(item: tuple[str, AuthorRecord]):
        identity, record = item
        counters = record.counters()
        return (*(-counters[key] for key in keys), identity)

    return sorted(records.items(), key=sort_key)
