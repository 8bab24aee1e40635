"""Command line entry point: ``work in|out|status|fix|summary|batch``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..container import Container
from ..core.exceptions import DomainError
from ..settings import configure_logging, container_from_settings, load_settings
from . import presenter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="work", description="Work time and overtime tracker")
    sub = parser.add_subparsers(dest="command", required=True)

    p_in = sub.add_parser("in", help="clock in (defaults to now)")
    p_in.add_argument("time", nargs="?", help="HH:MM")
    p_in.add_argument("--force", action="store_true", help="overwrite an open clock-in")

    p_out = sub.add_parser("out", help="clock out (defaults to now)")
    p_out.add_argument("time", nargs="?", help="HH:MM")

    sub.add_parser("status", help="show today's status and expected leave time")

    p_fix = sub.add_parser("fix", help="record or correct a past day")
    p_fix.add_argument("date", help="YYYY-MM-DD")
    p_fix.add_argument("clock_in", help="HH:MM")
    p_fix.add_argument("clock_out", help="HH:MM")

    p_summary = sub.add_parser("summary", help="monthly overtime summary")
    p_summary.add_argument("month", nargs="?", help="YYYY-MM (defaults to the current month)")

    p_batch = sub.add_parser("batch", help="fix many days from a file of 'YYYY-MM-DD HH:MM HH:MM' lines")
    p_batch.add_argument("file", type=Path)

    return parser


def _emit(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)


def run(args: argparse.Namespace, container: Container) -> int:
    clock = container.clock_service

    if args.command == "in":
        _emit(presenter.format_clock_in(clock.clock_in(args.time, force=args.force)))
    elif args.command == "out":
        _emit(presenter.format_day(clock.clock_out(args.time), title="Clocked out"))
    elif args.command == "status":
        _emit(presenter.format_status(clock.status()))
    elif args.command == "fix":
        _emit(presenter.format_day(clock.fix(args.date, args.clock_in, args.clock_out), title="Day fixed"))
    elif args.command == "summary":
        _emit(presenter.format_summary(clock.summary(args.month)))
    elif args.command == "batch":
        with args.file.open(encoding="utf-8") as f:
            report = clock.fix_many(f)
        _emit(presenter.format_batch(report))
        return 1 if report.failures else 0
    return 0


def main(argv: Optional[Sequence[str]] = None, *, container: Optional[Container] = None) -> int:
    args = build_parser().parse_args(argv)

    if container is None:
        settings = load_settings()
        configure_logging(settings)
        container = container_from_settings(settings)

    try:
        return run(args, container)
    except DomainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.debug("I/O failure", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
