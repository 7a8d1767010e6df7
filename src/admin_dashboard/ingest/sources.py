"""Record sources for the dashboard resources.

`RecordSource` is the interface the dashboard consumes. Two adapters are
provided: `StaticSource` (in-memory, used for fixtures and demos) and
`JsonDirectorySource` (reads `<resource>.json` exports from disk).
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

log = logging.getLogger(__name__)

RESOURCES = ("users", "subjects", "departments", "classes")


class RecordFetchError(RuntimeError):
    """Raised when a source cannot produce the records of a resource."""


class RecordSource(Protocol):
    def fetch_list(self, resource: str) -> list[dict[str, Any]]:
        ...


class StaticSource:
    """In-memory source; resources it does not hold return an empty list."""

    def __init__(self, data: Mapping[str, Sequence[dict[str, Any]]]) -> None:
        self._data = {name: list(records) for name, records in data.items()}

    def fetch_list(self, resource: str) -> list[dict[str, Any]]:
        return list(self._data.get(resource, []))


def _unwrap(payload: Any, path: Path) -> list[dict[str, Any]]:
    """Accept a bare JSON array or a `{"data": [...]}` envelope."""
    if isinstance(payload, Mapping) and "data" in payload:
        payload = payload["data"]
    if not isinstance(payload, list):
        raise RecordFetchError(f"{path} does not contain a list of records")
    return payload


class JsonDirectorySource:
    """Read each resource from `<directory>/<resource>.json`.

    A missing file means the backend exported nothing for that resource and
    yields an empty list.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def path_for(self, resource: str) -> Path:
        return self.directory / f"{resource}.json"

    def fetch_list(self, resource: str) -> list[dict[str, Any]]:
        """Return the records stored for `resource`.

        Raises:
            RecordFetchError: if the file cannot be read or is not a JSON list
                (optionally wrapped in a `data` key).
        """
        path = self.path_for(resource)
        if not path.exists():
            log.info("No export for %s at %s", resource, path)
            return []

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RecordFetchError(f"Unable to read {path}: {exc}") from exc

        records = _unwrap(payload, path)
        log.info("Read %d %s records from %s", len(records), resource, path)
        return records
