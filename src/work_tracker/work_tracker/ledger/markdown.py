"""Markdown rendering and lossy parsing of the month ledger.

Document layout::

    # Overtime log 2026-02

    | Date | Clock-in | Clock-out | Worked (h) | Overtime (h) | Notes |
    | :---: | :---: | :---: | :---: | :---: | :--- |
    | 2026-02-10 | 08:30 | 19:00 | 7.5 | 0.5 🔥 |  |

    ---

    **Summary:** 1 days, worked 7.5 h, overtime 0.5 h, late 0 days

The parser only trusts table rows; everything else is structure and is
regenerated on every write.
"""

from __future__ import annotations

import re
from datetime import datetime

from ..common.datetime_utils import TimeOfDay
from ..core.constants import NOTE_SEPARATOR, OVERTIME_MARKER
from ..core.exceptions import InvalidTimeError
from .model import DayRecord, MonthLedger, ParseResult

TITLE_PREFIX = "# Overtime log"
COLUMNS = ("Date", "Clock-in", "Clock-out", "Worked (h)", "Overtime (h)", "Notes")
ALIGNMENT = (":---:", ":---:", ":---:", ":---:", ":---:", ":---")
SEPARATOR = "---"

_CELL_SPLIT_RE = re.compile(r"(?<!\\)\|")
_ALIGN_CELL_RE = re.compile(r"^:?-+:?$")
_HOURS_RE = re.compile(r"^(\d+(?:\.\d+)?)")


def escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def unescape_cell(text: str) -> str:
    return text.replace("\\|", "|")


def _table_row(cells) -> str:
    return "| " + " | ".join(cells) + " |"


def render_row(record: DayRecord) -> str:
    overtime = f"{record.overtime_hours:.1f}"
    if record.overtime_hours > 0:
        overtime = f"{overtime} {OVERTIME_MARKER}"
    notes = NOTE_SEPARATOR.join(escape_cell(n) for n in record.notes)
    return _table_row(
        [
            record.work_date.isoformat(),
            str(record.clock_in),
            str(record.clock_out),
            f"{record.worked_hours:.1f}",
            overtime,
            notes,
        ]
    )


def render_ledger(ledger: MonthLedger) -> str:
    totals = ledger.totals()
    lines = [
        f"{TITLE_PREFIX} {ledger.month}",
        "",
        _table_row(COLUMNS),
        _table_row(ALIGNMENT),
    ]
    lines.extend(render_row(r) for r in ledger.records())
    lines += [
        "",
        SEPARATOR,
        "",
        (
            f"**Summary:** {totals.days} days, worked {totals.worked_hours:.1f} h, "
            f"overtime {totals.overtime_hours:.1f} h, late {totals.late_days} days"
        ),
        "",
    ]
    return "\n".join(lines)


def _split_cells(line: str) -> list[str]:
    inner = line.strip()[1:-1]
    return [c.strip() for c in _CELL_SPLIT_RE.split(inner)]


def _is_structural(cells: list[str]) -> bool:
    if cells and cells[0] == COLUMNS[0]:
        return True
    filled = [c for c in cells if c]
    return bool(filled) and all(_ALIGN_CELL_RE.match(c) for c in filled)


def parse_row(line: str) -> DayRecord | None:
    """Parse one table row, or return None if it does not have the row shape."""

    cells = _split_cells(line)
    if len(cells) < 5:
        return None

    try:
        work_date = datetime.strptime(cells[0], "%Y-%m-%d").date()
        clock_in = TimeOfDay.parse(cells[1])
        clock_out = TimeOfDay.parse(cells[2])
    except (ValueError, InvalidTimeError):
        return None

    worked = _HOURS_RE.match(cells[3])
    overtime = _HOURS_RE.match(cells[4])
    if not worked or not overtime:
        return None

    notes_cell = cells[5] if len(cells) > 5 else ""
    notes = tuple(unescape_cell(n).strip() for n in notes_cell.split(NOTE_SEPARATOR) if n.strip())

    return DayRecord(
        work_date=work_date,
        clock_in=clock_in,
        clock_out=clock_out,
        worked_hours=float(worked.group(1)),
        overtime_hours=float(overtime.group(1)),
        notes=notes,
    )


def parse_ledger(text: str, month: str) -> ParseResult:
    ledger = MonthLedger(month=month)
    skipped = 0

    for line in text.splitlines():
        stripped = line.strip()
        if not (stripped.startswith("|") and stripped.endswith("|") and len(stripped) > 1):
            continue
        cells = _split_cells(stripped)
        if _is_structural(cells):
            continue
        record = parse_row(stripped)
        if record is None:
            skipped += 1
            continue
        ledger.upsert(record)

    return ParseResult(ledger=ledger, skipped_lines=skipped)
