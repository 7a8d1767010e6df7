"""Build a `DashboardSnapshot` from a record source.

Module notes:
- Each resource is fetched independently; a failed fetch leaves that
  collection None, exactly like a fetch that has not completed yet.
- Records are validated with the Pydantic entity models. Invalid records are
  counted and kept as raw mappings, so collection lengths never change.
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from admin_dashboard.ingest.sources import RecordFetchError, RecordSource
from admin_dashboard.models import ClassRecord, DashboardSnapshot, Department, Subject, User

log = logging.getLogger(__name__)

MODELS: dict[str, type[BaseModel]] = {
    "users": User,
    "subjects": Subject,
    "departments": Department,
    "classes": ClassRecord,
}


def validate_records(resource: str, records: list[Any]) -> tuple[list[Any], int]:
    """Validate raw records of a resource against its entity model.

    Records that fail validation are kept as received so that counts still
    match what the source returned; the aggregation layer reads raw mappings
    through the relation accessors.

    Args:
        resource: Resource name (one of `MODELS`).
        records: Raw records as returned by a source.

    Returns:
        A tuple of (records, bad_count) where `records` has the same length
        and order as the input, holding models for valid rows and the raw
        record for invalid ones.
    """
    model = MODELS[resource]
    out: list[Any] = []
    bad = 0

    for rec in records:
        try:
            out.append(model.model_validate(rec))
        except ValidationError as exc:
            bad += 1
            out.append(rec)
            log.debug("Invalid %s record kept unvalidated: %s", resource, exc.errors())

    if bad:
        log.warning("%d of %d %s records failed validation (kept as raw)", bad, len(out), resource)
    return out, bad


def fetch_resource(source: RecordSource, resource: str) -> list[Any] | None:
    """Fetch and validate one resource, or return None if the fetch failed."""
    try:
        records = source.fetch_list(resource)
    except RecordFetchError as exc:
        log.warning("Fetch failed for %s: %s", resource, exc)
        return None

    validated, _ = validate_records(resource, records)
    return validated


def load_snapshot(source: RecordSource) -> DashboardSnapshot:
    """Fetch users, subjects, departments and classes from `source`."""
    collections = {resource: fetch_resource(source, resource) for resource in MODELS}
    return DashboardSnapshot(**collections)
