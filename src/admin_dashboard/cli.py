"""Command-line interface for the admin dashboard.

Provides subcommands: `summary` and `kpis`. Each command is implemented as a
`cmd_*` function that accepts an argparse namespace and the `Settings` read
once in `main`, and reads the four resources from a directory of JSON
exports.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from admin_dashboard.aggregate.build_view import build_dashboard_from_snapshot
from admin_dashboard.config import Settings, get_settings
from admin_dashboard.ingest.load_snapshot import load_snapshot
from admin_dashboard.ingest.sources import JsonDirectorySource
from admin_dashboard.logging_config import configure_logging
from admin_dashboard.models import DashboardView

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _settings_for(args: argparse.Namespace, s: Settings) -> Settings:
    """Return `s` overridden by CLI options."""
    overrides = {}
    if getattr(args, "data_dir", None) is not None:
        overrides["data_dir"] = args.data_dir
    if getattr(args, "top_n", None) is not None:
        overrides["top_n"] = args.top_n
    if getattr(args, "recent_n", None) is not None:
        overrides["recent_n"] = args.recent_n
    return replace(s, **overrides)


def _build_view(s: Settings) -> DashboardView:
    log.info("Loading dashboard exports from %s", s.data_dir)
    snapshot = load_snapshot(JsonDirectorySource(s.data_dir))
    return build_dashboard_from_snapshot(snapshot, s)


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return n


# --------------------------------------------------
# Commands
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace, s: Settings) -> None:
    """Print the full dashboard view as JSON."""
    view = _build_view(s)
    print(json.dumps(view.as_dict(), indent=args.indent, ensure_ascii=False))


def cmd_kpis(args: argparse.Namespace, s: Settings) -> None:
    """Print one `label: value` line per KPI."""
    view = _build_view(s)
    for item in view.kpis:
        print(f"{item.label}: {item.value}")


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="admin-dashboard")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_summary = sub.add_parser("summary")
    p_summary.add_argument("--data-dir", type=Path, default=None)
    p_summary.add_argument("--top-n", type=_non_negative, default=None)
    p_summary.add_argument("--recent-n", type=_non_negative, default=None)
    p_summary.add_argument("--indent", type=int, default=2)

    p_kpis = sub.add_parser("kpis")
    p_kpis.add_argument("--data-dir", type=Path, default=None)

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    args = build_parser().parse_args(argv)
    s = _settings_for(args, get_settings())
    configure_logging(s.log_path, level=logging.WARNING, stream=sys.stderr)

    if args.cmd == "summary":
        cmd_summary(args, s)
    elif args.cmd == "kpis":
        cmd_kpis(args, s)
    else:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
