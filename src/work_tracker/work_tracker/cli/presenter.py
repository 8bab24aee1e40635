"""Console rendering of command results."""

from __future__ import annotations

from ..clock.model import BatchReport, ClockInReceipt, DayOutcome, StatusReport
from ..common.datetime_utils import format_minutes
from ..core.constants import OVERTIME_MARKER
from ..core.enums import StatusPhase
from ..ledger.service import MonthSummary
from ..worktime.model import OvertimeHint

RULE = "━" * 32


def _hint_line(hint: OvertimeHint | None) -> list[str]:
    if hint is None:
        return []
    return [f"Hint:        {hint.minutes_remaining} more minutes would count {hint.overtime_hours:.1f} h overtime"]


def format_clock_in(receipt: ClockInReceipt) -> list[str]:
    s = receipt.schedule
    lines = [f"Clocked in at {receipt.pending.time} ({receipt.pending.work_date.isoformat()})"]
    if receipt.replaced:
        lines.append(
            f"Replaced open clock-in {receipt.replaced.work_date.isoformat()} {receipt.replaced.time}"
        )
    lines += [
        f"Regular end:      {format_minutes(s.required_end)}",
        f"Overtime from:    {format_minutes(s.overtime_threshold)}",
    ]
    if s.is_late:
        lines.append("Late: after the flex deadline")
    lines += [f"Warning: {w}" for w in receipt.warnings]
    return lines


def format_day(outcome: DayOutcome, title: str = "Day recorded") -> list[str]:
    r = outcome.record
    lines = [
        "",
        f"{RULE} {title}",
        f"Date:        {r.work_date.isoformat()}",
        f"Clock-in:    {r.clock_in}",
        f"Clock-out:   {r.clock_out}",
        f"Worked:      {r.worked_hours:.1f} h",
        f"Overtime:    {r.overtime_hours:.1f} h",
    ]
    lines += [f"  {n}" for n in r.notes]
    lines += _hint_line(outcome.result.hint)
    lines += [RULE, f"Saved to {outcome.path}", ""]
    return lines


def format_status(report: StatusReport) -> list[str]:
    if report.phase is StatusPhase.NOT_CLOCKED_IN:
        return ["Not clocked in today", "  use `work in [HH:MM]` to clock in"]

    s = report.schedule
    p = report.pending
    lines = [
        "",
        f"{RULE} Today",
        f"Date:             {p.work_date.isoformat()}",
        f"Clock-in:         {p.time}",
        f"Regular end:      {format_minutes(s.required_end)}",
        f"Overtime from:    {format_minutes(s.overtime_threshold)}",
    ]
    if s.is_late:
        lines.append("Late: after the flex deadline")
    if report.is_stale:
        lines.append(f"Warning: this clock-in is from {p.work_date.isoformat()}, not today")

    if report.progress is not None:
        lines.append(f"Worked so far:    {report.progress.worked_hours:.1f} h")
        if report.phase is StatusPhase.OVERTIME:
            lines.append(f"Overtime so far:  {report.progress.overtime_hours:.1f} h")
            lines += _hint_line(report.progress.hint)
        elif report.phase is StatusPhase.GAP:
            lines.append(f"Overtime starts in {report.minutes_remaining} minutes")
        else:
            lines.append(f"Regular end in {report.minutes_remaining} minutes")

    lines += [RULE, ""]
    return lines


def format_summary(summary: MonthSummary) -> list[str]:
    if not summary.exists:
        return [f"No records for {summary.month}"]
    if not summary.records:
        return [f"No valid records for {summary.month}"]

    lines = [
        "",
        f"{RULE} {summary.month} summary",
        "",
        "| Date       | In    | Out   | Worked (h) | Overtime (h) |",
        "| :--------: | :---: | :---: | :--------: | :----------: |",
    ]
    for r in summary.records:
        overtime = f"{r.overtime_hours:.1f}"
        if r.overtime_hours > 0:
            overtime = f"{overtime} {OVERTIME_MARKER}"
        lines.append(f"| {r.work_date.isoformat()} | {r.clock_in} | {r.clock_out} | {r.worked_hours:.1f} | {overtime} |")

    t = summary.totals
    lines += [
        "",
        f"Days:             {t.days}",
        f"Worked:           {t.worked_hours:.1f} h",
        f"Overtime:         {t.overtime_hours:.1f} h",
    ]
    if t.late_days:
        lines.append(f"Late:             {t.late_days} days")
    if summary.skipped_lines:
        lines.append(f"Skipped {summary.skipped_lines} unreadable row(s) in {summary.path}")
    lines += [RULE, ""]
    return lines


def format_batch(report: BatchReport) -> list[str]:
    lines = [""]
    for o in report.outcomes:
        r = o.record
        lines.append(
            f"ok    {r.work_date.isoformat()} {r.clock_in} -> {r.clock_out}  "
            f"worked {r.worked_hours:.1f} h, overtime {r.overtime_hours:.1f} h"
        )
    for f in report.failures:
        lines.append(f"fail  {f.line}: {f.error}")
    lines += ["", f"{len(report.outcomes)} succeeded, {len(report.failures)} failed", ""]
    return lines
