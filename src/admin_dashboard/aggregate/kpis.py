"""Scalar KPI counts over labelled collections."""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class KpiSpec:
    """One KPI card definition.

    Attributes:
        label: Card label, also the key in the `compute_kpis` result.
        items: Collection to count; None counts as empty.
        predicate: Optional filter; only matching records are counted.
    """
    label: str
    items: Sequence[Any] | None
    predicate: Callable[[Any], bool] | None = None


def count_matching(
    items: Iterable[Any] | None,
    predicate: Callable[[Any], bool] | None = None,
) -> int:
    if items is None:
        return 0
    if predicate is None:
        return sum(1 for _ in items)
    return sum(1 for item in items if predicate(item))


def compute_kpis(specs: Iterable[KpiSpec]) -> dict[str, int]:
    """Count each KPI collection, in the order the specs are given.

    Returns:
        Mapping of label to count. Counts are never clamped; 0 is a valid
        result. A repeated label keeps its first position and last value.
    """
    return {spec.label: count_matching(spec.items, spec.predicate) for spec in specs}
