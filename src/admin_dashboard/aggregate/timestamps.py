"""Creation-timestamp resolution used for newest-first ordering.

`resolve_timestamp` never raises: missing or unparsable values resolve to
`EARLIEST`. `recency_key` additionally separates those values from real
instants so they sort after every real timestamp.
"""
from __future__ import annotations

import math
import numbers
from datetime import date, datetime, time, timezone
from typing import Any

import pandas as pd

EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _parse(value: Any) -> datetime | None:
    """Return an aware UTC datetime for `value`, or None when it has none."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    try:
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            ts = pd.to_datetime(text, errors="coerce", utc=True)
        elif isinstance(value, numbers.Real):
            # numbers are epoch milliseconds
            if not math.isfinite(value):
                return None
            ts = pd.to_datetime(value, unit="ms", errors="coerce", utc=True)
        else:
            return None
    except (OverflowError, ValueError, TypeError):
        return None

    if pd.isna(ts):
        return None
    return ts.to_pydatetime()


def has_timestamp(value: Any) -> bool:
    """Return True when `value` resolves to a real instant."""
    return _parse(value) is not None


def resolve_timestamp(value: Any) -> datetime:
    """Resolve an optional creation timestamp to an aware UTC datetime.

    Args:
        value: ISO-8601 text (a trailing `Z` is accepted), `datetime`, `date`,
            epoch milliseconds, or None.

    Returns:
        The parsed instant, or `EARLIEST` when the value is missing or
        cannot be parsed.
    """
    parsed = _parse(value)
    return EARLIEST if parsed is None else parsed


def recency_key(value: Any) -> tuple[bool, datetime]:
    """Sort key that orders real timestamps above missing ones.

    Sorting with `reverse=True` yields newest first with unresolved values
    last.
    """
    parsed = _parse(value)
    if parsed is None:
        return (False, EARLIEST)
    return (True, parsed)
