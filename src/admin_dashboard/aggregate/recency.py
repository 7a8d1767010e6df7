"""Newest-first selection of records."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

from admin_dashboard.aggregate.relations import created_at_of
from admin_dashboard.aggregate.timestamps import recency_key


class RecentItem(NamedTuple):
    record: Any
    rank: int


def most_recent(
    items: Iterable[Any] | None,
    n: int,
    predicate: Callable[[Any], bool] | None = None,
    timestamp: Callable[[Any], Any] = created_at_of,
) -> list[Any]:
    """Return the `n` most recently created records, newest first.

    Args:
        items: Records to select from; None is treated as empty.
        n: Maximum number of records to return.
        predicate: Optional filter applied before ordering.
        timestamp: Reads the raw creation timestamp of a record.

    Returns:
        The original record objects. Records with a missing or unparsable
        timestamp come after every dated record; equal timestamps keep their
        input order.
    """
    if n <= 0:
        return []

    keyed = [
        (recency_key(timestamp(item)), item)
        for item in items or ()
        if predicate is None or predicate(item)
    ]
    # sorted() stays stable with reverse=True
    keyed.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in keyed[:n]]


def rank_recent(
    items: Iterable[Any] | None,
    n: int,
    predicate: Callable[[Any], bool] | None = None,
    timestamp: Callable[[Any], Any] = created_at_of,
) -> list[RecentItem]:
    """Same as `most_recent` but pairs each record with its 1-based rank."""
    selected = most_recent(items, n, predicate=predicate, timestamp=timestamp)
    return [RecentItem(record=record, rank=i) for i, record in enumerate(selected, start=1)]
