from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator

from ..common.datetime_utils import TimeOfDay
from ..core.constants import LATE_NOTE_PREFIX
from ..worktime.model import WorktimeResult


@dataclass(frozen=True)
class DayRecord:
    """One ledger row: a day's clock times and the hours derived from them."""

    work_date: date
    clock_in: TimeOfDay
    clock_out: TimeOfDay
    worked_hours: float
    overtime_hours: float
    notes: tuple[str, ...] = ()

    @property
    def is_late(self) -> bool:
        return any(n.startswith(LATE_NOTE_PREFIX) for n in self.notes)

    @classmethod
    def from_result(
        cls,
        work_date: date,
        clock_in: TimeOfDay,
        clock_out: TimeOfDay,
        result: WorktimeResult,
    ) -> "DayRecord":
        return cls(
            work_date=work_date,
            clock_in=clock_in,
            clock_out=clock_out,
            worked_hours=result.worked_hours,
            overtime_hours=result.overtime_hours,
            notes=tuple(result.notes),
        )


@dataclass(frozen=True)
class LedgerTotals:
    days: int
    worked_hours: float
    overtime_hours: float
    late_days: int


@dataclass
class MonthLedger:
    """Records of one month keyed by date; a later upsert replaces the earlier one."""

    month: str
    _records: dict[date, DayRecord] = field(default_factory=dict)

    def upsert(self, record: DayRecord) -> None:
        self._records[record.work_date] = record

    def get(self, work_date: date) -> DayRecord | None:
        return self._records.get(work_date)

    def records(self) -> list[DayRecord]:
        return [self._records[d] for d in sorted(self._records)]

    def totals(self) -> LedgerTotals:
        records = self._records.values()
        return LedgerTotals(
            days=len(self._records),
            worked_hours=sum(r.worked_hours for r in records),
            overtime_hours=sum(r.overtime_hours for r in records),
            late_days=sum(1 for r in records if r.is_late),
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DayRecord]:
        return iter(self.records())


@dataclass(frozen=True)
class ParseResult:
    """Best-effort parse of a ledger document."""

    ledger: MonthLedger
    skipped_lines: int = 0
