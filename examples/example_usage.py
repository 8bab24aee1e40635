"""Example: use the service layer directly (no CLI).

Records a couple of days into a scratch ledger and prints the month totals.
"""

import tempfile
from pathlib import Path

from src.work_tracker.work_tracker.container import build_container


def main():
    root = Path(tempfile.mkdtemp(prefix="work_tracker_"))
    container = build_container(ledger_dir=root / "ledger", state_file=root / "state.json")

    container.clock_service.fix("2026-02-10", "08:05", "19:37")
    container.clock_service.fix("2026-02-11", "09:20", "17:30")

    summary = container.clock_service.summary("2026-02")
    print(summary.totals)
    print(summary.path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
