"""Utilities to configure consistent logging for the dashboard tools."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    log_path: Path | None = None,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Configure root logging handlers and formatting.

    Replaces any handlers already installed on the root logger.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Logging level as a number or a name such as "debug".
        stream: Console stream (defaults to stdout). Commands that print
            data to stdout pass stderr here.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=_coerce_level(level),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
