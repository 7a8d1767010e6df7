"""Group counting and top-N ranking.

Expectations:
- `count_by` keeps groups in first-seen order and its totals always add up
  to the number of input records.
- `top_n` sorts by total descending with a stable sort, so groups with equal
  totals keep the order `count_by` produced them in.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

import pandas as pd

log = logging.getLogger(__name__)


class GroupCount(NamedTuple):
    key: str
    total: int


class RankedItem(NamedTuple):
    key: str
    total: int
    rank: int


def count_by(items: Iterable[Any] | None, key: Callable[[Any], str]) -> list[GroupCount]:
    """Group records by a derived key and count each group.

    Args:
        items: Records to group; None is treated as empty.
        key: Function deriving the group label of a record. It is expected to
            substitute a sentinel label for absent relations.

    Returns:
        `GroupCount` pairs in the order each key was first seen.
    """
    keys = [key(item) for item in items or ()]
    if not keys:
        return []

    labels = pd.Series(keys, dtype="object")
    sizes = labels.groupby(labels, sort=False, dropna=False).size()

    groups = [GroupCount(key=k, total=int(total)) for k, total in sizes.items()]
    log.debug("Grouped %d records into %d groups", len(keys), len(groups))
    return groups


def top_n(groups: Iterable[tuple[str, int]] | None, n: int) -> list[RankedItem]:
    """Return the `n` largest groups, ranked from 1.

    Args:
        groups: `(key, total)` pairs, e.g. the output of `count_by`.
        n: Maximum number of entries to return.

    Returns:
        Up to `n` `RankedItem` rows sorted by total descending; ties keep
        their input order. Ranks are positional after sorting.
    """
    rows = list(groups or ())
    if n <= 0 or not rows:
        return []

    frame = pd.DataFrame(rows, columns=["key", "total"])
    # kind="stable" keeps equal totals in input order
    ranked = frame.sort_values("total", ascending=False, kind="stable").head(n)

    return [
        RankedItem(key=row.key, total=int(row.total), rank=position)
        for position, row in enumerate(ranked.itertuples(index=False), start=1)
    ]
