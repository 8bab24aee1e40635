from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from ..common.datetime_utils import TimeOfDay
from ..core.enums import StatusPhase
from ..ledger.model import DayRecord
from ..worktime.model import DaySchedule, WorktimeResult


@dataclass(frozen=True)
class PendingClockIn:
    """An open clock-in waiting for its clock-out."""

    time: TimeOfDay
    work_date: date


@dataclass(frozen=True)
class ClockInReceipt:
    pending: PendingClockIn
    schedule: DaySchedule
    warnings: tuple[str, ...] = ()
    replaced: Optional[PendingClockIn] = None


@dataclass(frozen=True)
class DayOutcome:
    record: DayRecord
    result: WorktimeResult
    path: Path


@dataclass(frozen=True)
class StatusReport:
    now: datetime
    phase: StatusPhase
    pending: Optional[PendingClockIn] = None
    schedule: Optional[DaySchedule] = None
    is_stale: bool = False
    progress: Optional[WorktimeResult] = None
    minutes_remaining: Optional[int] = None


@dataclass(frozen=True)
class BatchFailure:
    line: str
    error: str


@dataclass(frozen=True)
class BatchReport:
    outcomes: list[DayOutcome] = field(default_factory=list)
    failures: list[BatchFailure] = field(default_factory=list)
