"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the dashboard options from the environment (after loading `.env` from
the project root) and rejects limits that are not non-negative integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_TOP_N = 5
DEFAULT_RECENT_N = 5


@dataclass(frozen=True)
class Settings:
    """Container for dashboard configuration read from the environment.

    Attributes:
        data_dir: Directory holding `<resource>.json` exports for the CLI.
        top_n: Number of groups kept in the top departments/subjects lists.
        recent_n: Number of records kept in the newest classes/teachers lists.
        teacher_role: Role value identifying teachers.
        admin_role: Role value identifying admins.
        log_path: Optional log file; stdout only when unset.
    """
    data_dir: Path
    top_n: int = DEFAULT_TOP_N
    recent_n: int = DEFAULT_RECENT_N
    teacher_role: str = "teacher"
    admin_role: str = "admin"
    log_path: Path | None = None


def _read_limit(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None
    if value < 0:
        raise RuntimeError(f"{name} must not be negative, got {value}.")
    return value


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `DASHBOARD_TOP_N` or `DASHBOARD_RECENT_N` is not a
            non-negative integer.
    """
    data_dir = Path(os.getenv("DASHBOARD_DATA_DIR", "data"))
    log_path_raw = os.getenv("DASHBOARD_LOG_PATH", "").strip()

    return Settings(
        data_dir=data_dir,
        top_n=_read_limit("DASHBOARD_TOP_N", DEFAULT_TOP_N),
        recent_n=_read_limit("DASHBOARD_RECENT_N", DEFAULT_RECENT_N),
        teacher_role=os.getenv("DASHBOARD_TEACHER_ROLE", "teacher").strip() or "teacher",
        admin_role=os.getenv("DASHBOARD_ADMIN_ROLE", "admin").strip() or "admin",
        log_path=Path(log_path_raw) if log_path_raw else None,
    )
