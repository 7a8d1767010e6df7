from __future__ import annotations

from admin_dashboard.aggregate.recency import most_recent, rank_recent
from admin_dashboard.aggregate.relations import role_is
from admin_dashboard.models import ClassRecord


def test_newest_first_with_missing_timestamp_last() -> None:
    jan = {"id": 1, "createdAt": "2024-01-01"}
    mar = {"id": 2, "createdAt": "2024-03-01"}
    undated = {"id": 3, "createdAt": None}
    assert most_recent([jan, mar, undated], 5) == [mar, jan, undated]


def test_unparsable_sorts_after_real_timestamps() -> None:
    bad = {"id": 1, "createdAt": "yesterday-ish"}
    old = {"id": 2, "createdAt": "1970-01-01T00:00:00Z"}
    assert most_recent([bad, old], 5) == [old, bad]


def test_ties_keep_input_order() -> None:
    items = [{"id": i, "createdAt": "2024-05-05"} for i in range(3)]
    items += [{"id": 10}, {"id": 11}]
    assert [r["id"] for r in most_recent(items, 10)] == [0, 1, 2, 10, 11]


def test_limit_and_predicate() -> None:
    users = [
        {"id": 1, "role": "teacher", "createdAt": "2024-01-01"},
        {"id": 2, "role": "admin", "createdAt": "2024-06-01"},
        {"id": 3, "role": "teacher", "createdAt": "2024-04-01"},
        {"id": 4, "role": "teacher", "createdAt": "2024-02-01"},
    ]
    picked = most_recent(users, 2, predicate=role_is("teacher"))
    assert [u["id"] for u in picked] == [3, 4]


def test_reads_snake_case_timestamps_and_is_repeatable() -> None:
    items = [{"id": 1, "created_at": "2023-01-01"}, {"id": 2, "created_at": "2023-02-01"}]
    first = most_recent(items, 5)
    assert [r["id"] for r in first] == [2, 1]
    assert most_recent(items, 5) == first
    assert [r["id"] for r in items] == [1, 2]


def test_rank_recent_and_empty_input() -> None:
    items = [{"id": 1, "createdAt": "2024-01-01"}, {"id": 2, "createdAt": "2024-02-01"}]
    ranked = rank_recent(items, 5)
    assert [(r.record["id"], r.rank) for r in ranked] == [(2, 1), (1, 2)]
    assert most_recent([], 5) == []
    assert most_recent(None, 5) == []
    assert most_recent(items, 0) == []


def test_raw_and_validated_records_sort_the_same() -> None:
    raw = [
        {"id": 1, "name": "Seconds-sized", "createdAt": 31_536_000_000},
        {"id": 2, "name": "One day in ms", "createdAt": 86_400_000},
        {"id": 3, "name": "Iso", "createdAt": "1970-06-01T00:00:00Z"},
    ]
    models = [ClassRecord.model_validate(r) for r in raw]
    assert models[1].created_at == 86_400_000
    assert [r["id"] for r in most_recent(raw, 5)] == [1, 3, 2]
    assert [m.id for m in most_recent(models, 5)] == [1, 3, 2]
