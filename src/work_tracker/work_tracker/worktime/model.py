from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.datetime_utils import TimeOfDay
from ..core import constants


@dataclass(frozen=True)
class WorkRules:
    """Workplace rules the calculator applies. Times are minute offsets."""

    work_start: int = TimeOfDay.parse(constants.DEFAULT_WORK_START).minutes
    flex_deadline: int = TimeOfDay.parse(constants.DEFAULT_FLEX_DEADLINE).minutes
    lunch_start: int = TimeOfDay.parse(constants.DEFAULT_LUNCH_START).minutes
    lunch_end: int = TimeOfDay.parse(constants.DEFAULT_LUNCH_END).minutes
    required_work: int = constants.DEFAULT_REQUIRED_WORK_MINUTES
    overtime_gap: int = constants.DEFAULT_OVERTIME_GAP_MINUTES
    overtime_min: int = constants.DEFAULT_OVERTIME_MIN_MINUTES
    overtime_step: int = constants.DEFAULT_OVERTIME_STEP_MINUTES
    hint_window: int = constants.DEFAULT_HINT_WINDOW_MINUTES
    suspicious_clock_in: int = TimeOfDay.parse(constants.SUSPICIOUS_CLOCK_IN).minutes

    @property
    def lunch_duration(self) -> int:
        return self.lunch_end - self.lunch_start

    @property
    def required_hours(self) -> float:
        return self.required_work / 60

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "WorkRules":
        """Build rules from settings; times as HH:MM strings, durations as minutes."""

        kwargs: dict[str, int] = {}
        for name in ("work_start", "flex_deadline", "lunch_start", "lunch_end", "suspicious_clock_in"):
            if values.get(name):
                kwargs[name] = TimeOfDay.parse(str(values[name])).minutes
        for name in ("required_work", "overtime_gap", "overtime_min", "overtime_step", "hint_window"):
            if values.get(name) is not None:
                kwargs[name] = int(values[name])

        rules = cls(**kwargs)
        if rules.lunch_end < rules.lunch_start:
            raise ValueError("lunch_end must not be earlier than lunch_start")
        if rules.overtime_step <= 0:
            raise ValueError("overtime_step must be positive")
        return rules


@dataclass(frozen=True)
class DaySchedule:
    """Milestones derived from a clock-in. Offsets may run past midnight."""

    effective_start: int
    is_late: bool
    required_end: int
    overtime_threshold: int


@dataclass(frozen=True)
class OvertimeHint:
    minutes_remaining: int
    overtime_hours: float


@dataclass(frozen=True)
class WorktimeResult:
    worked_hours: float
    overtime_hours: float
    is_late: bool
    schedule: DaySchedule
    notes: tuple[str, ...] = field(default_factory=tuple)
    hint: Optional[OvertimeHint] = None
