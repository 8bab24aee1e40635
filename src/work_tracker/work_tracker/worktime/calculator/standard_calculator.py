from __future__ import annotations

import math
from typing import Optional

from ...common.datetime_utils import TimeOfDay, format_minutes
from ...core.constants import LATE_NOTE_PREFIX
from ..model import DaySchedule, OvertimeHint, WorkRules, WorktimeResult
from .base import WorktimeCalculator


class StandardWorktimeCalculator(WorktimeCalculator):
    """Fixed-lunch rule set with flexible start and stepped overtime.

    Worked hours are capped at the required duration; overtime starts counting
    one gap after the required end and is floored to whole steps.
    """

    def __init__(self, rules: WorkRules | None = None):
        self._rules = rules or WorkRules()

    @property
    def rules(self) -> WorkRules:
        return self._rules

    def plan(self, clock_in: TimeOfDay) -> DaySchedule:
        r = self._rules
        effective_start = max(clock_in.minutes, r.work_start)

        if effective_start < r.lunch_start:
            required_end = effective_start + r.required_work + r.lunch_duration
        elif effective_start >= r.lunch_end:
            required_end = effective_start + r.required_work
        else:
            # Clocked in during lunch: work effectively starts when lunch ends.
            required_end = r.lunch_end + r.required_work

        return DaySchedule(
            effective_start=effective_start,
            is_late=effective_start > r.flex_deadline,
            required_end=required_end,
            overtime_threshold=required_end + r.overtime_gap,
        )

    def calculate(self, clock_in: TimeOfDay, clock_out: TimeOfDay) -> WorktimeResult:
        r = self._rules
        schedule = self.plan(clock_in)
        out = clock_out.minutes
        notes: list[str] = []

        if schedule.is_late:
            notes.append(
                f"{LATE_NOTE_PREFIX} clocked in at {clock_in}, after flex deadline {format_minutes(r.flex_deadline)}"
            )

        overlap_start = max(schedule.effective_start, r.lunch_start)
        overlap_end = min(out, r.lunch_end)
        lunch_overlap = max(0, overlap_end - overlap_start)

        actual = (out - schedule.effective_start) - lunch_overlap
        worked_hours = min(max(actual, 0), r.required_work) / 60

        if actual < r.required_work:
            deficit = math.ceil(r.required_work - actual)
            notes.append(f"Short of the required {r.required_hours:g}h by {deficit} minutes")

        overtime_hours = 0.0
        if out > schedule.overtime_threshold:
            raw = out - schedule.overtime_threshold
            if raw >= r.overtime_min:
                overtime_hours = (raw // r.overtime_step) * r.overtime_step / 60

        return WorktimeResult(
            worked_hours=worked_hours,
            overtime_hours=overtime_hours,
            is_late=schedule.is_late,
            schedule=schedule,
            notes=tuple(notes),
            hint=self._overtime_hint(out, schedule.overtime_threshold),
        )

    def _overtime_hint(self, clock_out: int, threshold: int) -> Optional[OvertimeHint]:
        r = self._rules
        step = r.overtime_step
        # First boundary that actually pays out, given the minimum.
        first = max(step, math.ceil(r.overtime_min / step) * step)

        elapsed = clock_out - threshold
        if elapsed < first:
            boundary = first
        else:
            boundary = (elapsed // step + 1) * step

        remaining = boundary - elapsed
        if remaining > r.hint_window:
            return None
        return OvertimeHint(minutes_remaining=remaining, overtime_hours=boundary / 60)
